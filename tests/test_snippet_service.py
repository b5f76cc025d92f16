from __future__ import annotations

import pytest

from app.config import Settings
from domain.models import Step
from snippets.errors import UnknownVariantError, UnsupportedLanguageError
from snippets.service import SnippetService


def _service(**overrides) -> SnippetService:
    return SnippetService(Settings(_env_file=None, **overrides))


def test_duplicate_snippets_are_returned_once() -> None:
    service = _service()
    steps = [
        Step(keyword="Given", name="I have 5 cukes"),
        Step(keyword="Given", name="I have 7 cukes"),
        Step(keyword="Given", name="I am happy"),
    ]

    snippets = service.generate(steps)

    assert len(snippets) == 2
    assert snippets[0].startswith('@Given("^I have (\\\\d+) cukes$")')
    assert snippets[1].startswith('@Given("^I am happy$")')


def test_generator_is_cached_per_variant_and_language() -> None:
    service = _service()

    assert service.generator_for("ruby") is service.generator_for("Ruby")
    assert service.generator_for("ruby") is not service.generator_for("ruby", "ru")


def test_default_variant_and_language_come_from_settings() -> None:
    service = _service(default_variant="ruby", keyword_language="ru")

    snippets = service.generate([Step(keyword="Given", name="I am happy")])

    assert snippets[0].startswith("Дано /^I am happy$/ do\n")


def test_unknown_variant_is_rejected() -> None:
    with pytest.raises(UnknownVariantError, match="cobol"):
        _service().generate([Step(keyword="Given", name="x")], variant="cobol")


def test_lists_registered_variants() -> None:
    assert _service().variants() == ["groovy", "java", "javascript", "python", "ruby"]


def test_language_is_normalized_before_caching() -> None:
    service = _service()

    assert service.generator_for("java", "RU") is service.generator_for("java", " ru ")
    assert service.generator_for("java", "en") is service.generator_for("java")


def test_unsupported_language_is_rejected_without_caching() -> None:
    service = _service()

    for idx in range(20):
        with pytest.raises(UnsupportedLanguageError, match="lang"):
            service.generator_for("java", f"lang{idx}")

    service.generator_for("java", "ru")
    assert len(service._generators) == 1
