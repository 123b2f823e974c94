"""Page environment capabilities used for language detection and sync.

The runtime never talks to the page address, persisted storage or browser
locale directly. Each of those is a small protocol, and ``PageEnvironment``
wraps them so that any failure reads as "signal absent" and any failed write
is dropped.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Sequence, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from infrastructure.i18n.models import (
    DEFAULT_QUERY_PARAM,
    DEFAULT_STORAGE_KEY,
    LanguageCode,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class PageLocation(Protocol):
    """The page address, readable and replaceable without navigation."""

    def get_href(self) -> str: ...

    def replace_href(self, href: str) -> None: ...


class KeyValueStorage(Protocol):
    """Persisted string store (e.g. browser local storage)."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class LocaleSource(Protocol):
    """Browser locale preferences."""

    def preferred_languages(self) -> Sequence[str]: ...

    def language(self) -> Optional[str]: ...


class StaticLocation:
    """In-memory page address that records history replacements."""

    def __init__(self, href: str = "http://localhost/"):
        self.href = href
        self.history: List[str] = []

    def get_href(self) -> str:
        return self.href

    def replace_href(self, href: str) -> None:
        self.history.append(href)
        self.href = href


class MemoryStorage:
    """Dict-backed key/value storage."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


class JSONFileStorage:
    """Key/value storage persisted as a JSON object on disk.

    Attributes:
        path: JSON file holding the stored items.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except ValueError as e:
            logger.warning(
                "storage_file_unreadable", path=str(self.path), error=str(e)
            )
            data = {}
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)


class StaticLocale:
    """Fixed browser locale preferences."""

    def __init__(
        self,
        languages: Sequence[str] = (),
        language: Optional[str] = None,
    ):
        self.languages = list(languages)
        self._language = language

    def preferred_languages(self) -> Sequence[str]:
        return self.languages

    def language(self) -> Optional[str]:
        return self._language


def set_query_param(href: str, name: str, value: str) -> str:
    """Return ``href`` with query parameter ``name`` set to ``value``.

    The first occurrence keeps its position, further occurrences are
    dropped, and other parameters and the fragment are preserved.
    """
    parts = urlsplit(href)
    pairs: List[Tuple[str, str]] = []
    replaced = False
    for key, current in parse_qsl(parts.query, keep_blank_values=True):
        if key == name:
            if not replaced:
                pairs.append((name, value))
                replaced = True
            continue
        pairs.append((key, current))
    if not replaced:
        pairs.append((name, value))
    return urlunsplit(parts._replace(query=urlencode(pairs)))


class PageEnvironment:
    """Best-effort access to the page's language signals and side effects.

    Every read returns None when its source is missing or raises, and
    every write returns False instead of raising.

    Attributes:
        location: Page address capability, if any.
        storage: Persisted storage capability, if any.
        locale: Browser locale capability, if any.
        storage_key: Key holding the persisted language.
        query_param: Query parameter holding the language.
    """

    def __init__(
        self,
        location: Optional[PageLocation] = None,
        storage: Optional[KeyValueStorage] = None,
        locale: Optional[LocaleSource] = None,
        storage_key: str = DEFAULT_STORAGE_KEY,
        query_param: str = DEFAULT_QUERY_PARAM,
    ):
        self.location = location
        self.storage = storage
        self.locale = locale
        self.storage_key = storage_key
        self.query_param = query_param

    def query_language(self) -> Optional[LanguageCode]:
        """Lowercased language from the query string, if present."""
        if self.location is None:
            return None
        try:
            query = urlsplit(self.location.get_href()).query
            for key, value in parse_qsl(query, keep_blank_values=True):
                if key == self.query_param:
                    return value.lower() or None
        except Exception as e:
            logger.debug("query_read_failed", error=str(e))
        return None

    def stored_language(self) -> Optional[LanguageCode]:
        """Persisted language preference, if present."""
        if self.storage is None:
            return None
        try:
            return self.storage.get_item(self.storage_key) or None
        except Exception as e:
            logger.debug("storage_read_failed", key=self.storage_key, error=str(e))
            return None

    def browser_locale(self) -> Optional[str]:
        """First preferred browser locale, else the single locale, if any."""
        if self.locale is None:
            return None
        try:
            preferred = self.locale.preferred_languages()
            if preferred and preferred[0]:
                return preferred[0]
            return self.locale.language() or None
        except Exception as e:
            logger.debug("locale_read_failed", error=str(e))
            return None

    def persist_language(self, language: LanguageCode) -> bool:
        """Store the chosen language. Returns False if the write failed."""
        if self.storage is None:
            return False
        try:
            self.storage.set_item(self.storage_key, language)
            return True
        except Exception as e:
            logger.debug(
                "storage_write_failed",
                key=self.storage_key,
                language=language,
                error=str(e),
            )
            return False

    def replace_query_language(self, language: LanguageCode) -> bool:
        """Rewrite the query parameter in place. Returns False on failure."""
        if self.location is None:
            return False
        try:
            href = set_query_param(
                self.location.get_href(), self.query_param, language
            )
            self.location.replace_href(href)
            return True
        except Exception as e:
            logger.debug("query_write_failed", language=language, error=str(e))
            return False
