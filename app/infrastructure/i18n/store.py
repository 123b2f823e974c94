"""Message storage and lookup with language fallback."""

from typing import Any, Dict, List, Mapping, Optional

from infrastructure.i18n.models import (
    DEFAULT_LANGUAGE,
    Dictionary,
    LanguageCode,
    MessageMap,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class MessageStore:
    """Per-language message dictionaries with additive merging.

    Lookups fall back from the requested language to the English baseline,
    then to the caller's default, then to the key itself.

    Attributes:
        baseline: Language consulted when a key is missing (default: "en").
    """

    def __init__(
        self,
        messages: Optional[MessageMap] = None,
        baseline: LanguageCode = DEFAULT_LANGUAGE,
    ):
        self.baseline = baseline
        self._messages: Dict[LanguageCode, Dictionary] = {}
        if messages:
            self.merge(messages)

    def merge(self, extra: Optional[MessageMap]) -> None:
        """Overlay messages onto the stored dictionaries.

        Creates a language's dictionary when absent, overwrites existing keys
        and adds new ones. Keys are never removed.

        Args:
            extra: Mapping of language -> {key: message}. None is ignored.
        """
        if not extra:
            return

        for language, messages in extra.items():
            dictionary = self._messages.setdefault(language, {})
            if messages:
                dictionary.update(messages)

        logger.debug(
            "messages_merged",
            languages=list(extra.keys()),
            key_count=sum(len(m or {}) for m in extra.values()),
        )

    def resolve(
        self,
        key: str,
        language: LanguageCode,
        fallback: Optional[str] = None,
    ) -> str:
        """Resolve a message key for a language.

        Args:
            key: Message key.
            language: Language to look up first.
            fallback: Value returned when no dictionary has the key.

        Returns:
            The message for ``language``, else the baseline message, else
            ``fallback`` when given, else ``key``.
        """
        dictionary = self._messages.get(language)
        if dictionary is None:
            dictionary = self._messages.get(self.baseline, {})
        if key in dictionary:
            return dictionary[key]

        baseline = self._messages.get(self.baseline, {})
        if key in baseline:
            return baseline[key]

        return fallback if fallback is not None else key

    def resolve_label(
        self,
        value: Any,
        language: LanguageCode,
        fallback: Any = None,
    ) -> Any:
        """Pick a translation from an inline per-language mapping.

        For a mapping, returns the entry for ``language``, else the baseline
        entry, else the entry under the mapping's first key. Any other value
        is returned unchanged unless it is None, in which case ``fallback``
        is returned.
        """
        if isinstance(value, Mapping):
            if language in value:
                return value[language]
            if self.baseline in value:
                return value[self.baseline]
            first_key = next(iter(value), None)
            if first_key:
                return value[first_key]
        return value if value is not None else fallback

    def languages(self) -> List[LanguageCode]:
        """Languages that have a dictionary, in insertion order."""
        return list(self._messages.keys())

    def dictionary(self, language: LanguageCode) -> Dictionary:
        """Copy of the dictionary for a language (empty if none)."""
        return dict(self._messages.get(language, {}))

    def has_key(self, key: str, language: LanguageCode) -> bool:
        """Check if ``language`` has its own entry for ``key``."""
        return key in self._messages.get(language, {})
