"""Pydantic-схемы запросов и ответов для HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from domain.models import Step


def _to_camel(value: str) -> str:
    """Преобразует snake_case в camelCase для JSON."""

    parts = value.split("_")
    return parts[0] + "".join(word.capitalize() for word in parts[1:])


class ApiBaseModel(BaseModel):
    """Базовая модель для API со стилем camelCase и populate_by_name."""

    model_config = ConfigDict(
        alias_generator=_to_camel, populate_by_name=True, from_attributes=True
    )


class StepDto(ApiBaseModel):
    """Шаг сценария, для которого нужен сниппет."""

    keyword: str = Field(default="Given", description="Ключевое слово шага (Given/Когда/...)")
    name: str = Field(default="", description="Текст шага после ключевого слова")

    def to_domain(self) -> Step:
        return Step(keyword=self.keyword, name=self.name)


class GenerateSnippetsRequest(ApiBaseModel):
    """Запрос на генерацию сниппетов для неописанных шагов."""

    steps: list[StepDto] = Field(default_factory=list, description="Шаги для генерации")
    lines: list[str] = Field(
        default_factory=list,
        description="Строки шагов целиком, например 'Given I have 5 cukes'",
    )
    variant: str | None = Field(
        default=None, description="Вариант сниппета (java/groovy/javascript/ruby/python)"
    )
    language: str | None = Field(
        default=None, description="Язык ключевых слов в коде (ru/en)"
    )

    def to_domain_steps(self) -> list[Step]:
        return [step.to_domain() for step in self.steps] + [
            Step.from_line(line) for line in self.lines
        ]


class GenerateSnippetsResponse(ApiBaseModel):
    """Сгенерированные сниппеты без дублей."""

    variant: str = Field(..., description="Использованный вариант сниппета")
    snippets: list[str] = Field(default_factory=list, description="Тексты сниппетов")


class VariantsResponse(ApiBaseModel):
    """Доступные варианты сниппетов."""

    variants: list[str] = Field(default_factory=list)
    default_variant: str = Field(..., description="Вариант по умолчанию")
