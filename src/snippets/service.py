"""Пакетная генерация сниппетов для набора неописанных шагов."""
from __future__ import annotations

import logging
from functools import partial
from threading import Lock
from typing import Iterable

from app.config import Settings
from domain.enums import code_keyword_for, normalize_keyword_language
from domain.models import Step

from .errors import UnsupportedLanguageError
from .generator import SnippetGenerator
from .variants import VARIANTS, get_variant

logger = logging.getLogger(__name__)


class SnippetService:
    """Выбирает генератор по варианту и языку и убирает дубли сниппетов."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._generators: dict[tuple[str, str | None], SnippetGenerator] = {}
        self._lock = Lock()

    def variants(self) -> list[str]:
        return sorted(VARIANTS)

    def generator_for(self, variant: str | None = None, language: str | None = None) -> SnippetGenerator:
        """Возвращает (и кеширует) генератор для пары вариант/язык ключевых слов.

        Язык нормализуется до построения ключа кеша, поэтому число генераторов
        ограничено числом вариантов и поддерживаемых языков.
        """

        variant_config = get_variant(variant or self.settings.default_variant)
        effective_language = self.settings.keyword_language
        if language and language.strip():
            try:
                effective_language = normalize_keyword_language(language)
            except ValueError as error:
                raise UnsupportedLanguageError(str(error)) from error
        key = (variant_config.name, effective_language)
        with self._lock:
            generator = self._generators.get(key)
            if generator is None:
                generator = SnippetGenerator(
                    variant_config,
                    keyword_resolver=partial(code_keyword_for, language=effective_language),
                    ascii_identifiers=self.settings.ascii_identifiers,
                )
                self._generators[key] = generator
                logger.info(
                    "Создан генератор сниппетов %s (язык ключевых слов: %s)",
                    variant_config.name,
                    effective_language or "en",
                )
        return generator

    def generate(
        self,
        steps: Iterable[Step],
        variant: str | None = None,
        language: str | None = None,
    ) -> list[str]:
        """Генерирует сниппеты для шагов; одинаковые сниппеты возвращаются один раз."""

        generator = self.generator_for(variant, language)
        snippets: list[str] = []
        seen: set[str] = set()
        total = 0
        for step in steps:
            total += 1
            snippet = generator.get_snippet(step)
            if snippet in seen:
                continue
            seen.add(snippet)
            snippets.append(snippet)
        logger.info(
            "Сгенерировано сниппетов: %s (шагов: %s, вариант: %s)",
            len(snippets),
            total,
            generator.variant.name,
        )
        return snippets
