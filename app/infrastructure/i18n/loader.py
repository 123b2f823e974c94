"""Message loading interface and implementations.

Defines the contract for loading message dictionaries and provides a
YAML-based loader.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

import structlog
from infrastructure.i18n.models import Dictionary, LanguageCode

logger = structlog.get_logger()

LANGUAGE_PATTERN = re.compile(r"^[a-z]{2,3}(-[a-z0-9]+)?$")


class MessageLoader(ABC):
    """Abstract base for message loaders.

    Implementations define how message files are found and parsed for each
    language.
    """

    @abstractmethod
    def load(self, language: LanguageCode) -> Dictionary:
        """Load messages for one language.

        Args:
            language: Language to load messages for.

        Returns:
            Flat dictionary of message key -> message.

        Raises:
            FileNotFoundError: If no message files exist for the language.
            ValueError: If a message file is malformed.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[LanguageCode, Dictionary]:
        """Load messages for every available language.

        Returns:
            Dict mapping language to its dictionary.
        """
        pass


class YAMLMessageLoader(MessageLoader):
    """Loader for YAML message files.

    Expects files named ``<language>.yml`` or ``<domain>.<language>.yml``.
    Files for the same language are merged in filename order. Nested
    mappings are flattened into dot-separated keys::

        # home.es.yml
        doc_title: Inicio
        hero:
          title: Bienvenido   # -> "hero.title"

    Attributes:
        messages_dir: Directory containing YAML files.
        cache: Loaded dictionaries by language when caching is enabled.
    """

    def __init__(self, messages_dir: Path, use_cache: bool = True):
        """Initialize YAML message loader.

        Args:
            messages_dir: Directory with YAML message files.
            use_cache: Whether to keep loaded dictionaries in memory.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.messages_dir = Path(messages_dir)
        self.use_cache = use_cache
        self.cache: Dict[LanguageCode, Dictionary] = {}

        if not self.messages_dir.exists():
            raise ValueError(f"Messages directory not found: {self.messages_dir}")

        logger.info(
            "initialized_yaml_loader",
            messages_dir=str(self.messages_dir),
            use_cache=use_cache,
        )

    @staticmethod
    def language_of(path: Path) -> Optional[LanguageCode]:
        """Language code encoded in a file name, or None if not recognized."""
        language = path.stem.split(".")[-1].lower()
        return language if LANGUAGE_PATTERN.match(language) else None

    def load(self, language: LanguageCode) -> Dictionary:
        """Load and merge all YAML files for a language.

        Raises:
            FileNotFoundError: If no YAML files exist for the language.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and language in self.cache:
            logger.debug("loaded_from_cache", language=language)
            return dict(self.cache[language])

        files = sorted(
            path
            for path in self.messages_dir.glob("*.yml")
            if self.language_of(path) == language
        )
        if not files:
            raise FileNotFoundError(
                f"No message files found for language {language} in {self.messages_dir}"
            )

        dictionary: Dictionary = {}
        for path in files:
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(path), error=str(e))
                raise ValueError(f"Failed to parse {path}: {e}") from e
            if data:
                self._merge_yaml_data(dictionary, data, path)

        logger.info(
            "loaded_messages",
            language=language,
            file_count=len(files),
            key_count=len(dictionary),
        )

        if self.use_cache:
            self.cache[language] = dict(dictionary)
        return dictionary

    def load_all(self) -> Dict[LanguageCode, Dictionary]:
        """Load every language found in the directory.

        Raises:
            ValueError: If the directory holds no recognizable message files.
        """
        languages = {
            language
            for language in (self.language_of(p) for p in self.messages_dir.glob("*.yml"))
            if language
        }
        if not languages:
            raise ValueError(f"No message files found in {self.messages_dir}")

        return {language: self.load(language) for language in sorted(languages)}

    def _merge_yaml_data(
        self,
        dictionary: Dictionary,
        data: Any,
        source_file: Path,
        prefix: str = "",
    ) -> None:
        """Flatten YAML data into ``dictionary``."""
        if not isinstance(data, Mapping):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="mapping"
            )
            return

        for key, value in data.items():
            full_key = f"{prefix}{key}"
            if isinstance(value, Mapping):
                self._merge_yaml_data(dictionary, value, source_file, f"{full_key}.")
            elif value is None:
                logger.warning("empty_message", file=str(source_file), key=full_key)
            else:
                dictionary[full_key] = str(value)

    def clear_cache(self) -> None:
        """Clear all cached dictionaries."""
        self.cache.clear()
        logger.info("cleared_message_cache")
