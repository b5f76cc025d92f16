"""Поиск аргументов в тексте шага."""
from __future__ import annotations

import logging
from typing import Sequence

from domain.models import ArgumentHit, ArgumentPattern

logger = logging.getLogger(__name__)


def scan_arguments(text: str, patterns: Sequence[ArgumentPattern]) -> list[ArgumentHit]:
    """Находит аргументы в ``text`` слева направо, без пересечений.

    Позиции перебираются от 0 до ``len(text)`` включительно. На каждой позиции
    паттерны проверяются в порядке приоритета якорным совпадением; побеждает
    первый непустой матч, после чего сканирование продолжается с конца
    совпадения. Остальные паттерны, сработавшие на той же позиции, лишь
    логируются как неоднозначность.

    Исходная схема добавляла отдельный аргумент для каждого сработавшего
    паттерна и для каждой позиции внутри уже найденного числа (``55`` давало
    два ``Int``). Здесь аргументы не пересекаются, и их число совпадает с
    числом групп захвата в паттерне шага.
    """

    hits: list[ArgumentHit] = []
    pos = 0
    while pos <= len(text):
        winner: ArgumentHit | None = None
        for argument_pattern in patterns:
            match = argument_pattern.matcher.match(text, pos)
            if not match or match.end() == pos:
                continue
            if winner is None:
                winner = ArgumentHit(
                    position=pos, type=argument_pattern.semantic_type, length=match.end() - pos
                )
            else:
                logger.debug(
                    "Неоднозначный аргумент на позиции %s: %s вытеснен %s",
                    pos,
                    argument_pattern.semantic_type,
                    winner.type,
                )
        if winner is None:
            pos += 1
            continue
        hits.append(winner)
        pos = winner.end
    return hits


def argument_types(text: str, patterns: Sequence[ArgumentPattern]) -> list[str]:
    """Возвращает типы аргументов шага в порядке их появления."""

    return [hit.type for hit in scan_arguments(text, patterns)]
