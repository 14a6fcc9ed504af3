"""Tests for I18nConfig settings."""

import pytest

from musicat_i18n.config import I18nConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MUSICAT_I18N_LOG_LEVEL",
        "MUSICAT_I18N_JSON_LOGS",
        "MUSICAT_I18N_REFERENCE_LOCALE",
        "MUSICAT_I18N_STRICT",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_defaults(self) -> None:
        settings = I18nConfig()
        assert settings.log_level == "WARNING"
        assert settings.json_logs is False
        assert settings.reference_locale == "en"
        assert settings.strict is False


class TestEnvironment:
    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MUSICAT_I18N_STRICT", "1")
        monkeypatch.setenv("MUSICAT_I18N_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("MUSICAT_I18N_REFERENCE_LOCALE", "zh")
        settings = I18nConfig()
        assert settings.strict is True
        assert settings.log_level == "DEBUG"
        assert settings.reference_locale == "zh"

    def test_unknown_reference_locale(self) -> None:
        with pytest.raises(ValueError, match="reference_locale must be one of"):
            I18nConfig(reference_locale="fr")

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError):
            I18nConfig(log_level="LOUD")  # type: ignore[arg-type]
