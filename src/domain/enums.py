"""Перечисления, описывающие основные типы доменной модели."""
from __future__ import annotations

import logging
import re
from enum import Enum

logger = logging.getLogger(__name__)

_GHERKIN_NOISE_RE = re.compile(r"[\s',!]")


class StepKeyword(str, Enum):
    """Ключевые слова Gherkin/Cucumber для шагов сценария."""

    GIVEN = "Given"
    WHEN = "When"
    THEN = "Then"
    AND = "And"
    BUT = "But"

    def as_text(self, language: str | None = None) -> str:
        """Возвращает строковое представление ключевого слова."""

        if language and language.casefold() == "ru":
            localized = {
                StepKeyword.GIVEN: "Дано",
                StepKeyword.WHEN: "Когда",
                StepKeyword.THEN: "Тогда",
                StepKeyword.AND: "И",
                StepKeyword.BUT: "Но",
            }
            return localized[self]
        return self.value

    @classmethod
    def _alias_map(cls) -> dict[str, "StepKeyword"]:
        """Возвращает соответствие всех поддерживаемых написаний к каноническим ключевым словам."""

        aliases: dict[str, StepKeyword] = {kw.value.casefold(): kw for kw in cls}
        aliases.update(
            {
                # Русские варианты Given
                "дано": cls.GIVEN,
                "пусть": cls.GIVEN,
                "допустим": cls.GIVEN,
                # Русские варианты When
                "когда": cls.WHEN,
                "если": cls.WHEN,
                # Русские варианты Then
                "тогда": cls.THEN,
                "то": cls.THEN,
                # Русские варианты And
                "и": cls.AND,
                # Русские варианты But
                "но": cls.BUT,
                "а": cls.BUT,
            }
        )
        return aliases

    @classmethod
    def from_string(cls, keyword: str) -> "StepKeyword":
        """Преобразует строку с ключевым словом шага в каноническое перечисление.

        Поддерживаются английские и русские варианты Gherkin. Регистр не имеет значения.
        """

        normalized = keyword.strip().casefold()
        if not normalized:
            raise ValueError("Keyword cannot be empty")

        try:
            return cls._alias_map()[normalized]
        except KeyError as error:
            raise ValueError(f"Unsupported step keyword: {keyword}") from error

    @classmethod
    def supported_keywords(cls) -> set[str]:
        """Возвращает множество всех поддерживаемых написаний ключевых слов."""

        return set(cls._alias_map().keys())


class ArgumentType(str, Enum):
    """Семантический тип аргумента, найденного в тексте шага.

    Набор открыт: паттерн аргумента хранит тип как строку, поэтому вариант
    может объявить собственный тег, не трогая алгоритм генерации.
    """

    STRING = "String"
    INT = "Int"


SUPPORTED_KEYWORD_LANGUAGES = ("en", "ru")


def normalize_keyword_language(language: str | None) -> str | None:
    """Приводит язык ключевых слов к каноническому виду; английский - ``None``.

    Неподдерживаемый язык - ``ValueError``.
    """

    if language is None:
        return None
    normalized = language.strip().casefold()
    if not normalized or normalized == "en":
        return None
    if normalized not in SUPPORTED_KEYWORD_LANGUAGES:
        raise ValueError(
            f"Unsupported keyword language: {language!r} (supported: {', '.join(SUPPORTED_KEYWORD_LANGUAGES)})"
        )
    return normalized


def code_keyword_for(keyword: str, language: str | None = None) -> str:
    """Возвращает ключевое слово шага в том виде, в котором оно пишется в коде.

    Известные написания (в том числе русские) приводятся к каноническому
    ``StepKeyword`` и локализуются под ``language``. Неизвестные ключевые слова
    очищаются от пробелов и знаков ``',!``, как это делает i18n Gherkin.
    """

    try:
        return StepKeyword.from_string(keyword).as_text(language)
    except ValueError:
        cleaned = _GHERKIN_NOISE_RE.sub("", keyword or "")
        if cleaned:
            return cleaned

    logger.warning("Пустое ключевое слово шага %r, используется %s", keyword, StepKeyword.GIVEN.value)
    return StepKeyword.GIVEN.as_text(language)
