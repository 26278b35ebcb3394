import os

import pytest
from pydantic import ValidationError

from charsetutil.settings import (
    ENV_DEFAULT_ENCODING,
    ENV_ON_DECODE_ERROR,
    SanitizerSettings,
    get_settings,
    reload_settings,
)


def test_defaults_without_environment():
    settings = get_settings()
    assert settings.default_encoding == "UCS-2BE"
    assert settings.on_decode_error == "keep"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv(ENV_DEFAULT_ENCODING, "UTF-16LE")
    monkeypatch.setenv(ENV_ON_DECODE_ERROR, "Strict")
    settings = reload_settings()
    assert settings.default_encoding == "UTF-16LE"
    assert settings.on_decode_error == "strict"


def test_settings_are_cached_until_reload(monkeypatch):
    first = get_settings()
    monkeypatch.setenv(ENV_ON_DECODE_ERROR, "remove")
    assert get_settings() is first
    assert reload_settings().on_decode_error == "remove"


def test_dotenv_file_is_loaded(tmp_path):
    (tmp_path / ".env").write_text(f"{ENV_ON_DECODE_ERROR}=remove\n", encoding="utf-8")
    assert reload_settings().on_decode_error == "remove"


def test_dotenv_file_leaves_environment_untouched(tmp_path):
    (tmp_path / ".env").write_text(
        f"{ENV_ON_DECODE_ERROR}=remove\nSOME_APP_SECRET=leaked\n", encoding="utf-8"
    )
    before = dict(os.environ)
    assert get_settings().on_decode_error == "remove"
    assert dict(os.environ) == before
    assert "SOME_APP_SECRET" not in os.environ
    assert ENV_ON_DECODE_ERROR not in os.environ


def test_environment_wins_over_dotenv_file(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text(f"{ENV_ON_DECODE_ERROR}=remove\n", encoding="utf-8")
    monkeypatch.setenv(ENV_ON_DECODE_ERROR, "strict")
    assert reload_settings().on_decode_error == "strict"


def test_invalid_values_rejected(monkeypatch):
    monkeypatch.setenv(ENV_ON_DECODE_ERROR, "ignore")
    with pytest.raises(ValidationError):
        reload_settings()


def test_invalid_encoding_rejected():
    with pytest.raises(ValidationError):
        SanitizerSettings(default_encoding="NOPE-42")


def test_settings_are_frozen():
    settings = SanitizerSettings()
    with pytest.raises(ValidationError):
        settings.on_decode_error = "remove"
