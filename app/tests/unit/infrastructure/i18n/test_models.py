"""Tests for infrastructure.i18n.models module."""

from infrastructure.i18n import DEFAULT_SUPPORTED, I18nOptions
from infrastructure.i18n.models import normalize_supported


class TestNormalizeSupported:
    """Tests for normalize_supported()."""

    def test_none_uses_default(self):
        """Missing list falls back to the built-in set."""
        assert normalize_supported(None) == ["en", "es", "pt"]
        assert tuple(normalize_supported(None)) == DEFAULT_SUPPORTED

    def test_empty_uses_default(self):
        """Empty list falls back to the default."""
        assert normalize_supported([], default=["fr"]) == ["fr"]

    def test_string_is_not_a_list(self):
        """A bare string is rejected in favor of the default."""
        assert normalize_supported("es") == ["en", "es", "pt"]

    def test_duplicates_removed_keeping_order(self):
        """Duplicates collapse to their first occurrence."""
        assert normalize_supported(["pt", "en", "pt", "es", "en"]) == [
            "pt",
            "en",
            "es",
        ]

    def test_returns_copy(self):
        """Result is a new list."""
        source = ["en", "es"]
        result = normalize_supported(source)
        result.append("pt")
        assert source == ["en", "es"]


class TestI18nOptions:
    """Tests for I18nOptions."""

    def test_defaults(self):
        """Options default to runtime-provided behavior."""
        options = I18nOptions()
        assert options.supported is None
        assert options.sync_query is None
        assert options.messages is None
        assert options.initial_lang is None
        assert options.select is None
        assert options.select_selector is None
        assert options.additional_selects == []

    def test_from_mapping_none(self):
        """from_mapping(None) returns default options."""
        assert I18nOptions.from_mapping(None) == I18nOptions()

    def test_from_mapping_camel_case(self):
        """camelCase page option names map onto fields."""
        control = object()
        options = I18nOptions.from_mapping(
            {
                "supported": ["en", "es"],
                "syncQuery": False,
                "initialLang": "es",
                "selectSelector": "#lang",
                "additionalSelects": [control],
            }
        )
        assert options.supported == ["en", "es"]
        assert options.sync_query is False
        assert options.initial_lang == "es"
        assert options.select_selector == "#lang"
        assert options.additional_selects == [control]

    def test_from_mapping_snake_case(self):
        """snake_case names are accepted as-is."""
        options = I18nOptions.from_mapping({"initial_lang": "pt", "sync_query": True})
        assert options.initial_lang == "pt"
        assert options.sync_query is True

    def test_sync_query_only_disabled_by_false(self):
        """Any given value other than False enables URL sync."""
        assert I18nOptions.from_mapping({"syncQuery": 0}).sync_query is True
        assert I18nOptions.from_mapping({"syncQuery": None}).sync_query is True
        assert I18nOptions.from_mapping({"syncQuery": False}).sync_query is False

    def test_unknown_keys_ignored(self):
        """Unrecognized option names are dropped."""
        options = I18nOptions.from_mapping({"theme": "dark", "initialLang": "en"})
        assert options.initial_lang == "en"

    def test_non_list_additional_selects_ignored(self):
        """additionalSelects must be a list to be used."""
        options = I18nOptions.from_mapping({"additionalSelects": "not-a-list"})
        assert options.additional_selects == []
