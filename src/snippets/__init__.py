"""Генерация сниппетов step definitions по тексту шагов."""
from __future__ import annotations

from .argument_scanner import argument_types, scan_arguments
from .errors import SnippetConfigurationError, UnknownVariantError
from .generator import SnippetGenerator
from .identifier import sanitize_identifier
from .pattern_builder import NamedGroupStyle, build_pattern
from .variants import VARIANTS, SnippetVariant, get_variant

__all__ = [
    "NamedGroupStyle",
    "SnippetConfigurationError",
    "SnippetGenerator",
    "SnippetVariant",
    "UnknownVariantError",
    "VARIANTS",
    "argument_types",
    "build_pattern",
    "get_variant",
    "sanitize_identifier",
    "scan_arguments",
]
