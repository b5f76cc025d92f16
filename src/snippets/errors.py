"""Исключения генератора сниппетов."""
from __future__ import annotations


class SnippetConfigurationError(ValueError):
    """Raised when a snippet variant is wired incorrectly."""


class UnknownVariantError(ValueError):
    """Raised when a variant name is not present in the registry."""

    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(f"Unknown snippet variant: {name!r} (known: {', '.join(known)})")
        self.name = name
        self.known = known


class UnsupportedLanguageError(ValueError):
    """Raised when keywords are requested in a language without code keywords."""
