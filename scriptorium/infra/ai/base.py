from typing import Protocol


class TextProvider(Protocol):
    provider_key: str

    async def generate_poem(self, prompt: str, params: dict) -> str:
        """
        Генерирует стихотворение на основе промпта и параметров.

        Поддерживаемые параметры: system_prompt, temperature, max_tokens, model.
        Пустой ответ модели возвращается как пустая строка.
        """
        ...
