"""Приведение текста шага к допустимому имени функции."""
from __future__ import annotations

from typing import Sequence

from domain.models import ArgumentPattern

from .pattern_builder import replace_arguments_with_space

PLACEHOLDER = "_"


def _is_ascii_start(char: str) -> bool:
    return char.isascii() and (char.isalpha() or char == "_")


def _is_ascii_part(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def _is_unicode_start(char: str) -> bool:
    return char.isidentifier()


def _is_unicode_part(char: str) -> bool:
    return f"_{char}".isidentifier()


def sanitize_identifier(text: str, ascii_only: bool = True) -> str:
    """Возвращает непустой идентификатор, построенный из ``text``.

    Первый символ сохраняется, если с него может начинаться идентификатор,
    иначе заменяется на ``_``. Каждая серия недопустимых символов (вместе с
    подчёркиваниями рядом) схлопывается в один ``_``, хвостовой ``_`` не
    добавляется. Для пустого ввода возвращается ``_``.
    """

    is_start = _is_ascii_start if ascii_only else _is_unicode_start
    is_part = _is_ascii_part if ascii_only else _is_unicode_part

    if not text:
        return PLACEHOLDER

    sanitized = [text[0] if is_start(text[0]) else PLACEHOLDER]
    pending_separator = False
    for char in text[1:]:
        if char == PLACEHOLDER or not is_part(char):
            pending_separator = True
            continue
        if pending_separator and sanitized[-1] != PLACEHOLDER:
            sanitized.append(PLACEHOLDER)
        pending_separator = False
        sanitized.append(char)
    return "".join(sanitized)


def function_name_for(
    text: str, patterns: Sequence[ArgumentPattern], ascii_only: bool = True
) -> str:
    """Имя функции для шага: аргументы вырезаются, остаток санитизируется."""

    stripped = replace_arguments_with_space(text, patterns)
    return sanitize_identifier(stripped, ascii_only=ascii_only)
