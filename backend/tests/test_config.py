"""Settings — environment parsing, defaults and limits projection."""

import pytest
from pydantic import ValidationError

from glitchstore.config import Settings
from glitchstore.core.domain_types import DocumentLimits, Locale


def test_defaults(monkeypatch):
    for name in ("GLITCH_STORAGE_PATH", "GLITCH_LOCALE", "GLITCH_MAX_TEXT_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.storage_path == "glitch_data.json"
    assert settings.locale == Locale.EN
    assert settings.cors_allow_origin == "*"
    assert settings.limits == DocumentLimits(
        max_text_length=1000, max_css_length=50_000, max_payload_bytes=1_048_576,
    )


def test_env_prefix(monkeypatch, tmp_path):
    monkeypatch.setenv("GLITCH_STORAGE_PATH", str(tmp_path / "g.json"))
    monkeypatch.setenv("GLITCH_MAX_CSS_LENGTH", "10")
    monkeypatch.setenv("GLITCH_LOCALE", "uk")
    settings = Settings(_env_file=None)
    assert settings.storage_path == str(tmp_path / "g.json")
    assert settings.limits.max_css_length == 10
    assert settings.locale == Locale.UK


def test_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("GLITCH_PORT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("GLITCH_PORT=9090\n")
    assert Settings(_env_file=str(env_file)).port == 9090


def test_invalid_log_format_rejected():
    with pytest.raises(ValidationError):
        Settings(log_format="xml", _env_file=None)


def test_unknown_locale_rejected():
    with pytest.raises(ValidationError):
        Settings(locale="fr", _env_file=None)


def test_negative_limit_rejected():
    with pytest.raises(ValidationError):
        Settings(max_text_length=-1, _env_file=None)
