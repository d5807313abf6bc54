from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import SecretStr

from scriptorium.domain.enums import ProviderKind


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    LOG_LEVEL: str = "INFO"

    # LLM
    LLM_PROVIDER: ProviderKind = ProviderKind.OPENAI
    LLM_TEMPERATURE: float = 0.8
    LLM_MAX_TOKENS: int = 1000
    LLM_TIMEOUT_SECONDS: float = 60.0

    # AI Providers
    OPENAI_API_KEY: SecretStr | None = None
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_MODEL: str = "gpt-4o-mini"
    GEMINI_API_KEY: SecretStr | None = None
    GEMINI_MODEL: str = "gemini-1.5-flash"

    @property
    def generation_params(self) -> dict:
        return {
            "temperature": self.LLM_TEMPERATURE,
            "max_tokens": self.LLM_MAX_TOKENS,
        }


settings = Settings()
