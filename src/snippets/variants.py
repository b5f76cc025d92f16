"""Варианты сниппетов под конкретные языки step definitions.

Вариант задаёт только шаблон, набор паттернов аргументов, способ отрисовки
списка аргументов, стиль именованных групп и экранирование паттерна для
строкового литерала целевого языка. Сам алгоритм генерации общий и живёт в
:mod:`snippets.generator`.
"""
from __future__ import annotations

from dataclasses import dataclass
from string import Formatter
from typing import Callable, Sequence

from domain.enums import ArgumentType
from domain.models import DEFAULT_ARGUMENT_PATTERNS, ArgumentPattern

from .errors import SnippetConfigurationError, UnknownVariantError
from .pattern_builder import NamedGroupStyle

ArgumentRenderer = Callable[[Sequence[str]], str]

HINT = "Express the Regexp above with the code you wish you had"
TEMPLATE_SLOTS = ("keyword", "pattern", "functionName", "arguments", "hint")


def _identity(value: str) -> str:
    return value


@dataclass(frozen=True)
class SnippetVariant:
    """Конфигурация генерации сниппетов для одного стиля кода.

    Шаблон использует пять именованных слотов: ``{keyword}``, ``{pattern}``,
    ``{functionName}``, ``{arguments}`` и ``{hint}``. Фигурные скобки самого
    языка удваиваются, как в ``str.format``.
    """

    name: str
    template: str
    render_arguments: ArgumentRenderer
    argument_patterns: tuple[ArgumentPattern, ...] = DEFAULT_ARGUMENT_PATTERNS
    named_groups: NamedGroupStyle | None = None
    escape_pattern: Callable[[str], str] = _identity
    format_keyword: Callable[[str], str] = _identity


def template_fields(template: str) -> list[str]:
    """Возвращает имена всех полей подстановки шаблона в порядке появления."""

    try:
        return [field for _, field, _, _ in Formatter().parse(template) if field is not None]
    except ValueError as error:
        raise SnippetConfigurationError(f"Malformed snippet template: {error}") from error


def validate_variant(variant: SnippetVariant) -> None:
    """Проверяет конфигурацию варианта; ошибки всплывают сразу, а не при генерации."""

    fields = template_fields(variant.template)
    missing = [slot for slot in TEMPLATE_SLOTS if slot not in fields]
    if missing:
        raise SnippetConfigurationError(
            f"Template of variant {variant.name!r} is missing placeholders: {', '.join(missing)}"
        )
    unknown = sorted({field for field in fields if field not in TEMPLATE_SLOTS})
    if unknown:
        raise SnippetConfigurationError(
            f"Template of variant {variant.name!r} has unknown placeholders: {', '.join(unknown)}"
        )
    if not variant.argument_patterns:
        raise SnippetConfigurationError(f"Variant {variant.name!r} has no argument patterns")
    style = variant.named_groups
    if style is not None and not (style.start and style.end):
        raise SnippetConfigurationError(
            f"Variant {variant.name!r} must define both named group start and end"
        )


def argument_names(argument_types: Sequence[str]) -> list[str]:
    """Имена аргументов ``arg1..argN`` в порядке появления в шаге."""

    return [f"arg{n}" for n in range(1, len(argument_types) + 1)]


def untyped_arguments(argument_types: Sequence[str]) -> str:
    return ", ".join(argument_names(argument_types))


# Неизвестные теги пользовательских паттернов отображаются в String
_JAVA_TYPES = {
    ArgumentType.STRING.value: "String",
    ArgumentType.INT.value: "int",
}


def java_arguments(argument_types: Sequence[str]) -> str:
    """Типизированные аргументы Java: ``int arg1, String arg2``."""

    return ", ".join(
        f"{_JAVA_TYPES.get(arg_type, 'String')} {name}"
        for arg_type, name in zip(argument_types, argument_names(argument_types))
    )


def ruby_arguments(argument_types: Sequence[str]) -> str:
    if not argument_types:
        return ""
    return f" |{untyped_arguments(argument_types)}|"


def python_arguments(argument_types: Sequence[str]) -> str:
    return ", ".join(["context", *argument_names(argument_types)])


def escape_java_string(pattern: str) -> str:
    return pattern.replace("\\", "\\\\").replace('"', '\\"')


def escape_slashes(pattern: str) -> str:
    return pattern.replace("/", "\\/")


def escape_single_quotes(pattern: str) -> str:
    return pattern.replace("'", "\\'")


JAVA = SnippetVariant(
    name="java",
    template=(
        '@{keyword}("{pattern}")\n'
        "public void {functionName}({arguments}) {{\n"
        "    // {hint}\n"
        "}}\n"
    ),
    render_arguments=java_arguments,
    escape_pattern=escape_java_string,
)

GROOVY = SnippetVariant(
    name="groovy",
    template=(
        "{keyword}(~/{pattern}/) {{ {arguments} ->\n"
        "    // {functionName}: {hint}\n"
        "}}\n"
    ),
    render_arguments=untyped_arguments,
    escape_pattern=escape_slashes,
)

JAVASCRIPT = SnippetVariant(
    name="javascript",
    template=(
        "{keyword}(/{pattern}/, function {functionName}({arguments}) {{\n"
        "  // {hint}\n"
        "}});\n"
    ),
    render_arguments=untyped_arguments,
    escape_pattern=escape_slashes,
)

RUBY = SnippetVariant(
    name="ruby",
    template=(
        "{keyword} /{pattern}/ do{arguments}\n"
        "  # {functionName}: {hint}\n"
        "  pending\n"
        "end\n"
    ),
    render_arguments=ruby_arguments,
    escape_pattern=escape_slashes,
)

PYTHON = SnippetVariant(
    name="python",
    template=(
        '# use_step_matcher("re")\n'
        "@{keyword}(r'{pattern}')\n"
        "def step_{functionName}({arguments}):\n"
        "    # {hint}\n"
        "    raise NotImplementedError\n"
    ),
    render_arguments=python_arguments,
    named_groups=NamedGroupStyle(start="?P<arg", end=">"),
    escape_pattern=escape_single_quotes,
    format_keyword=str.lower,
)

VARIANTS: dict[str, SnippetVariant] = {
    variant.name: variant for variant in (JAVA, GROOVY, JAVASCRIPT, RUBY, PYTHON)
}

for _variant in VARIANTS.values():
    validate_variant(_variant)


def get_variant(name: str) -> SnippetVariant:
    """Возвращает встроенный вариант по имени (регистр не важен)."""

    try:
        return VARIANTS[name.strip().casefold()]
    except KeyError as error:
        raise UnknownVariantError(name, sorted(VARIANTS)) from error
