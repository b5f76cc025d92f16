"""Генерация сниппета step definition для неописанного шага."""
from __future__ import annotations

import logging
from functools import partial
from typing import Callable

from domain.enums import code_keyword_for
from domain.models import Step

from .argument_scanner import argument_types
from .identifier import function_name_for
from .pattern_builder import build_pattern
from .variants import HINT, SnippetVariant, validate_variant

logger = logging.getLogger(__name__)

KeywordResolver = Callable[[str], str]


class SnippetGenerator:
    """Собирает сниппет из ключевого слова, паттерна, имени функции и аргументов.

    Экземпляр настраивается один раз и не меняется, поэтому его можно
    переиспользовать из любого числа потоков.
    """

    def __init__(
        self,
        variant: SnippetVariant,
        keyword_resolver: KeywordResolver | None = None,
        ascii_identifiers: bool = True,
    ) -> None:
        validate_variant(variant)
        self.variant = variant
        self.keyword_resolver = keyword_resolver or partial(code_keyword_for, language=None)
        self.ascii_identifiers = ascii_identifiers

    def pattern_for(self, name: str) -> str:
        return build_pattern(name, self.variant.argument_patterns, self.variant.named_groups)

    def function_name_for(self, name: str) -> str:
        return function_name_for(name, self.variant.argument_patterns, ascii_only=self.ascii_identifiers)

    def argument_types_for(self, name: str) -> list[str]:
        return argument_types(name, self.variant.argument_patterns)

    def get_snippet(self, step: Step) -> str:
        """Возвращает готовый к заполнению сниппет для шага."""

        if step.is_blank:
            logger.warning("Пустой текст шага (keyword=%r), сниппет будет без аргументов", step.keyword)
            name = ""
        else:
            name = step.name

        variant = self.variant
        keyword = variant.format_keyword(self.keyword_resolver(step.keyword))
        snippet = variant.template.format(
            keyword=keyword,
            pattern=variant.escape_pattern(self.pattern_for(name)),
            functionName=self.function_name_for(name),
            arguments=variant.render_arguments(self.argument_types_for(name)),
            hint=HINT,
        )
        logger.debug("Сниппет %s для шага %r сгенерирован", variant.name, step.name)
        return snippet
