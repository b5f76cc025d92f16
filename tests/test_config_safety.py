from __future__ import annotations

import pytest

from app.config import Settings


def test_safe_defaults_for_local_runtime(monkeypatch) -> None:
    monkeypatch.delenv("SNIPPET_SERVICE_HOST", raising=False)
    monkeypatch.delenv("SNIPPET_SERVICE_DEFAULT_VARIANT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.host == "127.0.0.1"
    assert settings.api_prefix == "/api/v1"
    assert settings.default_variant == "java"
    assert settings.keyword_language is None
    assert settings.ascii_identifiers is True


def test_default_variant_is_read_from_env(monkeypatch) -> None:
    monkeypatch.setenv("SNIPPET_SERVICE_DEFAULT_VARIANT", "Ruby")
    settings = Settings(_env_file=None)
    assert settings.default_variant == "ruby"


def test_unknown_default_variant_is_rejected() -> None:
    with pytest.raises(ValueError, match="default_variant must be one of"):
        Settings(_env_file=None, default_variant="cobol")


def test_keyword_language_is_normalized() -> None:
    assert Settings(_env_file=None, keyword_language=" RU ").keyword_language == "ru"
    assert Settings(_env_file=None, keyword_language="  ").keyword_language is None


def test_unsupported_keyword_language_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported keyword language"):
        Settings(_env_file=None, keyword_language="de")
