"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- I18nSettings validation and defaults
- Settings class initialization
- Integration with Pydantic BaseSettings
"""

import pytest

from infrastructure.configuration import I18nSettings, Settings

I18N_ENV_VARS = [
    "I18N_SUPPORTED_LANGUAGES",
    "I18N_SYNC_QUERY",
    "I18N_STORAGE_KEY",
    "I18N_QUERY_PARAM",
    "I18N_SELECT_SELECTOR",
    "I18N_LOCALES_DIR",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without i18n environment overrides."""
    for name in I18N_ENV_VARS + ["PREFIX", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)


class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_i18n_settings_defaults(self):
        """Test I18nSettings uses correct default values."""
        i18n = I18nSettings()

        assert i18n.supported_languages == ["en", "es", "pt"]
        assert i18n.sync_query is True
        assert i18n.storage_key == "resonance-lang"
        assert i18n.query_param == "lang"
        assert i18n.select_selector == ".lang-select"
        assert i18n.locales_dir is None

    def test_i18n_settings_custom_values(self, monkeypatch):
        """Test I18nSettings accepts custom configuration."""
        monkeypatch.setenv("I18N_SUPPORTED_LANGUAGES", "en,fr")
        monkeypatch.setenv("I18N_SYNC_QUERY", "false")
        monkeypatch.setenv("I18N_STORAGE_KEY", "site-lang")
        monkeypatch.setenv("I18N_QUERY_PARAM", "hl")
        monkeypatch.setenv("I18N_SELECT_SELECTOR", "#language")
        monkeypatch.setenv("I18N_LOCALES_DIR", "/srv/locales")

        i18n = I18nSettings()

        assert i18n.supported_languages == ["en", "fr"]
        assert i18n.sync_query is False
        assert i18n.storage_key == "site-lang"
        assert i18n.query_param == "hl"
        assert i18n.select_selector == "#language"
        assert i18n.locales_dir == "/srv/locales"

    def test_supported_languages_json(self, monkeypatch):
        """Test I18N_SUPPORTED_LANGUAGES accepts a JSON list."""
        monkeypatch.setenv("I18N_SUPPORTED_LANGUAGES", '["PT", "en", "pt"]')

        assert I18nSettings().supported_languages == ["pt", "en"]

    def test_supported_languages_blank_entries(self, monkeypatch):
        """Test blank entries are dropped and whitespace trimmed."""
        monkeypatch.setenv("I18N_SUPPORTED_LANGUAGES", " es , ,en ")

        assert I18nSettings().supported_languages == ["es", "en"]

    @pytest.mark.parametrize("value", ["", " , ", "[]", "[not json"])
    def test_supported_languages_fallback(self, monkeypatch, value):
        """Test empty or invalid values fall back to the default set."""
        monkeypatch.setenv("I18N_SUPPORTED_LANGUAGES", value)

        assert I18nSettings().supported_languages == ["en", "es", "pt"]


class TestSettings:
    """Test suite for the aggregated Settings."""

    def test_settings_builds_subsettings(self):
        """Test Settings instantiates i18n settings automatically."""
        settings = Settings()

        assert isinstance(settings.i18n, I18nSettings)
        assert settings.LOG_LEVEL == "INFO"

    def test_settings_accepts_override(self):
        """Test an explicit i18n section is used as-is."""
        custom = I18nSettings()
        settings = Settings(i18n=custom)

        assert settings.i18n is custom

    def test_is_production(self, monkeypatch):
        """Test production mode depends on PREFIX."""
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False
