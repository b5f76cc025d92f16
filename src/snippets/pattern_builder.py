"""Построение регулярного выражения шага по его тексту."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from domain.models import ArgumentPattern

_REGEX_META_RE = re.compile(r"([\\.^$*+?{}\[\]|()])")


@dataclass(frozen=True)
class NamedGroupStyle:
    """Обрамление номера именованной группы, например ``{arg`` и ``}``."""

    start: str
    end: str


@dataclass(frozen=True)
class _Segment:
    text: str
    is_group: bool = False


def escape_literal(text: str) -> str:
    """Экранирует метасимволы регулярок, оставляя пробелы и кавычки как есть."""

    return _REGEX_META_RE.sub(r"\\\1", text)


def build_pattern(
    text: str,
    patterns: Sequence[ArgumentPattern],
    named_groups: NamedGroupStyle | None = None,
) -> str:
    """Превращает текст шага в якорное регулярное выражение с группами захвата.

    Каждый паттерн аргумента применяется ко всему тексту до перехода к
    следующему; замены затрагивают только те участки, которые предыдущие
    проходы оставили литеральными. Литеральный текст экранируется, поэтому
    полученное выражение всегда совпадает с исходной фразой.
    """

    if not text.strip():
        return "^$"

    segments = [_Segment(text)]
    for argument_pattern in patterns:
        segments = list(_replace_with_groups(segments, argument_pattern))

    counter = 1
    parts: list[str] = []
    for segment in segments:
        if not segment.is_group:
            parts.append(escape_literal(segment.text))
        elif named_groups is None:
            parts.append(segment.text)
        else:
            rendered, counter = _with_named_groups(segment.text, named_groups, counter)
            parts.append(rendered)
    return "^" + "".join(parts) + "$"


def _replace_with_groups(
    segments: Iterable[_Segment], argument_pattern: ArgumentPattern
) -> Iterable[_Segment]:
    for segment in segments:
        if segment.is_group:
            yield segment
            continue
        last_end = 0
        for match in argument_pattern.matcher.finditer(segment.text):
            if match.end() == match.start():
                continue
            if match.start() > last_end:
                yield _Segment(segment.text[last_end : match.start()])
            yield _Segment(argument_pattern.source, is_group=True)
            last_end = match.end()
        if last_end < len(segment.text):
            yield _Segment(segment.text[last_end:])


def _with_named_groups(source: str, style: NamedGroupStyle, counter: int) -> tuple[str, int]:
    """Заменяет открывающие скобки групп захвата на именованные, считая с ``counter``."""

    result: list[str] = []
    in_class = False
    idx = 0
    while idx < len(source):
        char = source[idx]
        if char == "\\":
            result.append(source[idx : idx + 2])
            idx += 2
            continue
        if in_class:
            in_class = char != "]"
        elif char == "[":
            in_class = True
        elif char == "(" and not source.startswith("?", idx + 1):
            result.append(f"({style.start}{counter}{style.end}")
            counter += 1
            idx += 1
            continue
        result.append(char)
        idx += 1
    return "".join(result), counter


def replace_arguments_with_space(text: str, patterns: Sequence[ArgumentPattern]) -> str:
    """Заменяет каждое вхождение аргумента одиночным пробелом."""

    for argument_pattern in patterns:
        text = argument_pattern.matcher.sub(
            lambda match: " " if match.group(0) else "", text
        )
    return text
