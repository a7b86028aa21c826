from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "leave-tracker"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # Balances strictly below this are reported as low
    LOW_BALANCE_THRESHOLD: int = Field(default=5, ge=0)


settings = Settings()  # type: ignore
