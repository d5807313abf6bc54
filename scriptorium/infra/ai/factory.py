from scriptorium.domain.enums import ProviderKind
from scriptorium.infra.ai.base import TextProvider
from scriptorium.infra.ai.gemini import GeminiProvider
from scriptorium.infra.ai.openai import OpenAIProvider
from scriptorium.infra.ai.test_provider import DummyTextProvider
from scriptorium.infra.config.settings import Settings, settings as default_settings


def get_provider(kind: ProviderKind, settings: Settings = default_settings) -> TextProvider:
    if kind == ProviderKind.OPENAI:
        return OpenAIProvider(
            api_key=settings.OPENAI_API_KEY.get_secret_value() if settings.OPENAI_API_KEY else None,
            base_url=settings.OPENAI_BASE_URL,
            model=settings.OPENAI_MODEL,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )
    if kind == ProviderKind.GEMINI:
        return GeminiProvider(
            api_key=settings.GEMINI_API_KEY.get_secret_value() if settings.GEMINI_API_KEY else None,
            model=settings.GEMINI_MODEL,
        )
    return DummyTextProvider()
