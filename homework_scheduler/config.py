"""Runtime settings, read from ``HOMEWORK_*`` environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HOMEWORK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # env: dev|stage|prod
    app_env: str = "dev"
    log_level: str = "INFO"
    seed_demo_data: bool = True

    # Tracebacks in error responses are opt-in and never shown in prod
    expose_error_details: bool = False

    @property
    def show_error_details(self) -> bool:
        return self.expose_error_details and self.app_env != "prod"


settings = Settings()
