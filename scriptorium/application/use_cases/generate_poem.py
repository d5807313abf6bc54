import structlog

from scriptorium.application.dto.schemas import GeneratedPoem, PoemRequest
from scriptorium.application.errors import PoemGenerationError, PoemRequestError
from scriptorium.application.services.poem_parser import PoemParser
from scriptorium.application.services.prompt_builder import PromptBuilder
from scriptorium.infra.ai.base import TextProvider

logger = structlog.get_logger()


class GeneratePoemUseCase:
    def __init__(
        self,
        provider: TextProvider,
        params: dict,
        prompt_builder: PromptBuilder | None = None,
        poem_parser: PoemParser | None = None,
    ):
        self.provider = provider
        self.params = params
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.poem_parser = poem_parser or PoemParser()

    async def execute(self, request: PoemRequest) -> GeneratedPoem:
        # 1. Валидация: провайдер не вызывается без всех полей
        missing = request.missing_fields()
        if missing:
            logger.info("poem_request_rejected", missing=missing)
            raise PoemRequestError(missing)

        # 2. Собираем промпт
        prompt = self.prompt_builder.build_poem_prompt(
            request.character,
            request.location,
            request.event,
            request.emotion,
            request.language,
        )
        params = {"system_prompt": self.prompt_builder.system_prompt, **self.params}

        logger.info(
            "poem_generation_requested",
            provider=self.provider.provider_key,
            character=request.character,
            location=request.location,
            poem_event=request.event,
            emotion=request.emotion,
            language=request.language,
        )

        # 3. Генерируем и разбираем ответ
        try:
            poem_text = await self.provider.generate_poem(prompt, params)
            poem = self.poem_parser.parse(
                poem_text or "",
                request.character,
                request.location,
                request.event,
                request.emotion,
                request.language,
            )
        except Exception as e:
            logger.exception("poem_generation_failed", provider=self.provider.provider_key, error=str(e))
            raise PoemGenerationError() from e

        logger.info("poem_generated", title=poem.title, stanzas=len(poem.stanzas))
        return poem
