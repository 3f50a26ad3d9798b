# uigen/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="UI Gen")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # model provider: openai | ollama | echo
    PROVIDER: str = Field(default="openai")
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")
    OLLAMA_HOST: str = Field(default="http://localhost:11434")
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")

    # generation
    TEMPERATURE: float | None = None
    MAX_TOKENS: int | None = None
    # seconds; unset means the provider call is never timed out
    REQUEST_TIMEOUT: float | None = None

    # prestyled component docs; unset uses the bundled components.yaml
    CATALOG_PATH: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )


settings = Settings()
