from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "Go Outing API"
    api_prefix: str = "/api"

    host: str = "0.0.0.0"
    port: int = 3000

    openai_api_key: str = Field(default="", description="Credential for the chat completion API")
    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = "gpt-3.5-turbo"
    openai_temperature: float = 0.8
    openai_max_tokens: int = 700
    openai_timeout_seconds: float = 30.0

    max_body_bytes: int = 50 * 1024

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]


settings = get_settings()
