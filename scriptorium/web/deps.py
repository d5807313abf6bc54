from fastapi import Depends

from scriptorium.application.use_cases.generate_poem import GeneratePoemUseCase
from scriptorium.infra.ai.base import TextProvider
from scriptorium.infra.ai.factory import get_provider
from scriptorium.infra.config.settings import settings


def get_text_provider() -> TextProvider:
    return get_provider(settings.LLM_PROVIDER)


def get_generate_poem_use_case(
    provider: TextProvider = Depends(get_text_provider),
) -> GeneratePoemUseCase:
    return GeneratePoemUseCase(provider, settings.generation_params)
