"""envdoc configuration settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from envdoc.infrastructure.logging_setup import configure_logging


class Settings(BaseSettings):
    """Library settings with env var support.

    These cover envdoc itself; application parameters are declared on a
    `Registry` instead.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENVDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    def setup_logging(self) -> None:
        configure_logging(level=self.log_level, json_logs=self.log_json)


# Global settings instance
settings = Settings()
