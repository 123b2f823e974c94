"""Tests for infrastructure.i18n.loader module."""

from pathlib import Path

import pytest

from infrastructure.i18n import YAMLMessageLoader


class TestYAMLMessageLoader:
    """Tests for YAMLMessageLoader."""

    def test_loader_initialization(self, temp_messages_dir):
        """YAMLMessageLoader initializes with valid directory."""
        loader = YAMLMessageLoader(temp_messages_dir)
        assert loader.messages_dir == temp_messages_dir
        assert loader.use_cache is True
        assert loader.cache == {}

    def test_loader_initialization_nonexistent_directory(self, tmp_path):
        """YAMLMessageLoader raises ValueError for missing directory."""
        with pytest.raises(ValueError):
            YAMLMessageLoader(tmp_path / "nonexistent")

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("home.en.yml", "en"),
            ("pt.yml", "pt"),
            ("shared.pt-br.yml", "pt-br"),
            ("README.yml", None),
            ("home.english.yml", None),
        ],
    )
    def test_language_of(self, name, expected):
        """language_of() reads the trailing language code from file names."""
        assert YAMLMessageLoader.language_of(Path(name)) == expected

    def test_load_merges_domain_files(self, temp_messages_dir):
        """load() merges all files for a language in filename order."""
        loader = YAMLMessageLoader(temp_messages_dir)
        messages = loader.load("en")
        # nav.en.yml sorts after home.en.yml and overrides doc_title
        assert messages["doc_title"] == "Home page"
        assert messages["lang_label"] == "Language"

    def test_load_flattens_nested_keys(self, temp_messages_dir):
        """Nested mappings become dot-separated keys."""
        loader = YAMLMessageLoader(temp_messages_dir)
        assert loader.load("es")["hero.title"] == "Bienvenido"

    def test_load_bare_language_file(self, temp_messages_dir):
        """<language>.yml files are recognized."""
        loader = YAMLMessageLoader(temp_messages_dir)
        assert loader.load("pt") == {"doc_title": "Início"}

    def test_load_missing_language(self, temp_messages_dir):
        """load() raises FileNotFoundError for unknown languages."""
        loader = YAMLMessageLoader(temp_messages_dir)
        with pytest.raises(FileNotFoundError):
            loader.load("fr")

    def test_load_all(self, temp_messages_dir):
        """load_all() returns every language found."""
        loader = YAMLMessageLoader(temp_messages_dir)
        result = loader.load_all()
        assert sorted(result) == ["en", "es", "pt"]

    def test_load_all_empty_directory(self, tmp_path):
        """load_all() raises ValueError without message files."""
        loader = YAMLMessageLoader(tmp_path)
        with pytest.raises(ValueError):
            loader.load_all()

    def test_invalid_yaml(self, tmp_path):
        """Malformed YAML raises ValueError."""
        (tmp_path / "bad.en.yml").write_text("key: [unclosed", encoding="utf-8")
        loader = YAMLMessageLoader(tmp_path)
        with pytest.raises(ValueError):
            loader.load("en")

    def test_non_mapping_file_skipped(self, tmp_path):
        """A file holding a list contributes nothing."""
        (tmp_path / "list.en.yml").write_text("- a\n- b\n", encoding="utf-8")
        (tmp_path / "ok.en.yml").write_text("a: A\n", encoding="utf-8")
        loader = YAMLMessageLoader(tmp_path)
        assert loader.load("en") == {"a": "A"}

    def test_scalar_values_stringified(self, tmp_path):
        """Non-string scalars are stored as strings, empty values dropped."""
        (tmp_path / "x.en.yml").write_text("count: 3\nempty:\n", encoding="utf-8")
        loader = YAMLMessageLoader(tmp_path)
        assert loader.load("en") == {"count": "3"}

    def test_cache(self, temp_messages_dir):
        """Cached dictionaries are reused until cleared."""
        loader = YAMLMessageLoader(temp_messages_dir, use_cache=True)
        first = loader.load("es")
        (temp_messages_dir / "extra.es.yml").write_text("x: y\n", encoding="utf-8")
        assert loader.load("es") == first

        loader.clear_cache()
        assert loader.load("es")["x"] == "y"

    def test_cache_disabled(self, temp_messages_dir):
        """Without caching, files are re-read on every load."""
        loader = YAMLMessageLoader(temp_messages_dir, use_cache=False)
        loader.load("es")
        assert loader.cache == {}
