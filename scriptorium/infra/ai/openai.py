import httpx
import logging
from scriptorium.infra.ai.base import TextProvider

logger = logging.getLogger(__name__)


class OpenAIProvider(TextProvider):
    """Клиент для любого OpenAI-совместимого endpoint'а /chat/completions."""

    provider_key = "openai"

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o-mini",
        timeout: float = 60.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout

    async def generate_poem(self, prompt: str, params: dict) -> str:
        if not self.api_key:
            raise ValueError("OpenAI API key is not configured")

        url = f"{self.base_url}/chat/completions"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}"
        }
        messages = []
        if params.get("system_prompt"):
            messages.append({"role": "system", "content": params["system_prompt"]})
        messages.append({"role": "user", "content": prompt})

        payload = {
            "model": params.get("model", self.model),
            "messages": messages,
            "temperature": params.get("temperature", 0.8),
            "max_tokens": params.get("max_tokens", 1000)
        }

        logger.debug(f"Sending chat completion request to {url} with model {payload['model']}")

        async with httpx.AsyncClient() as client:
            response = await client.post(url, json=payload, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            result = response.json()

        choices = result.get("choices") or []
        if not choices:
            logger.warning("OpenAI response has no choices")
            return ""
        message = choices[0].get("message") or {}
        return message.get("content") or ""
