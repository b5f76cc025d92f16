"""Доменные модели шагов и аргументов, из которых собираются сниппеты."""
from __future__ import annotations

import re
from dataclasses import dataclass

from .enums import ArgumentType, StepKeyword


@dataclass(frozen=True)
class Step:
    """Шаг сценария: ключевое слово и свободная фраза после него."""

    keyword: str
    name: str

    @classmethod
    def from_line(cls, line: str) -> "Step":
        """Разбирает строку вида ``Given I have 5 cukes`` на ключевое слово и фразу.

        Если первое слово не является ключевым словом Gherkin, строка целиком
        считается фразой, а ключевым словом становится ``Given``.
        """

        stripped = line.strip()
        head, _, tail = stripped.partition(" ")
        if head and head.casefold() in StepKeyword.supported_keywords():
            return cls(keyword=head, name=tail.strip())
        return cls(keyword=StepKeyword.GIVEN.value, name=stripped)

    @property
    def is_blank(self) -> bool:
        return not self.name.strip()


@dataclass(frozen=True)
class ArgumentPattern:
    """Распознаваемая форма аргумента: регулярка и семантический тип."""

    matcher: re.Pattern[str]
    semantic_type: str

    @classmethod
    def of(cls, regex: str, semantic_type: str | ArgumentType) -> "ArgumentPattern":
        tag = semantic_type.value if isinstance(semantic_type, ArgumentType) else semantic_type
        return cls(matcher=re.compile(regex, re.ASCII), semantic_type=tag)

    @property
    def source(self) -> str:
        """Исходный текст регулярки, который подставляется в паттерн шага."""

        return self.matcher.pattern


@dataclass(frozen=True)
class ArgumentHit:
    """Найденный в тексте аргумент: позиция начала, длина совпадения и тип."""

    position: int
    type: str
    length: int = 0

    @property
    def end(self) -> int:
        return self.position + self.length


DEFAULT_ARGUMENT_PATTERNS: tuple[ArgumentPattern, ...] = (
    ArgumentPattern.of(r'"([^"]*)"', ArgumentType.STRING),
    ArgumentPattern.of(r"(\d+)", ArgumentType.INT),
)
