"""Модуль конфигурации приложения."""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.enums import normalize_keyword_language
from snippets.variants import VARIANTS


ROOT_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = ROOT_DIR / ".env"

# Загружаем переменные только если файл существует, чтобы избежать лишних предупреждений
if ENV_PATH.exists():
    load_dotenv(ENV_PATH, override=False)


class Settings(BaseSettings):
    """Основные настройки приложения."""

    model_config = SettingsConfigDict(
        env_prefix="SNIPPET_SERVICE_",
        env_file=ENV_PATH,
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="snippet-service", description="Название сервиса")
    api_prefix: str = Field(default="/api/v1", description="Префикс для HTTP API")
    host: str = Field(default="127.0.0.1", description="Хост для запуска приложения")
    port: int = Field(default=8000, description="Порт для запуска приложения")

    default_variant: str = Field(
        default="java", description="Вариант сниппетов, если в запросе он не указан"
    )
    keyword_language: str | None = Field(
        default=None, description="Язык ключевых слов в коде (например, ru); None - английский"
    )
    ascii_identifiers: bool = Field(
        default=True, description="Строить имена функций только из ASCII символов"
    )

    @field_validator("default_variant")
    @classmethod
    def _validate_default_variant(cls, value: str) -> str:
        normalized = value.strip().casefold()
        if normalized not in VARIANTS:
            raise ValueError(
                f"default_variant must be one of: {', '.join(sorted(VARIANTS))}"
            )
        return normalized

    @field_validator("keyword_language")
    @classmethod
    def _normalize_language(cls, value: str | None) -> str | None:
        return normalize_keyword_language(value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Получить настройки приложения с кешированием."""

    settings = Settings()
    logging.getLogger(__name__).debug("Config loaded: %s", settings.model_dump())
    return settings
