"""Data model for the page language runtime.

Defines the language/message types shared by the store, resolver, renderer
and synchronization controller, plus the options object accepted by init.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

LanguageCode = str
Dictionary = Dict[str, str]
MessageMap = Mapping[LanguageCode, Mapping[str, str]]

TranslateFn = Callable[..., str]
ChangeListener = Callable[[LanguageCode, TranslateFn], Any]
Disposer = Callable[[], None]

DEFAULT_LANGUAGE: LanguageCode = "en"
DEFAULT_SUPPORTED: Sequence[LanguageCode] = ("en", "es", "pt")
DEFAULT_STORAGE_KEY = "resonance-lang"
DEFAULT_QUERY_PARAM = "lang"
DEFAULT_SELECT_SELECTOR = ".lang-select"

LABEL_KEY = "lang_label"
LABEL_FALLBACK = "Language"

# camelCase option names accepted from page-level configuration
_OPTION_ALIASES = {
    "syncQuery": "sync_query",
    "initialLang": "initial_lang",
    "selectSelector": "select_selector",
    "additionalSelects": "additional_selects",
}


def normalize_supported(
    supported: Optional[Sequence[LanguageCode]],
    default: Sequence[LanguageCode] = DEFAULT_SUPPORTED,
) -> List[LanguageCode]:
    """Return an ordered, duplicate-free supported list.

    Falls back to ``default`` when ``supported`` is missing, empty, or not a
    list-like sequence of codes.
    """
    if not supported or isinstance(supported, str):
        return list(default)

    result: List[LanguageCode] = []
    for code in supported:
        if code and code not in result:
            result.append(code)
    return result or list(default)


@dataclass
class I18nOptions:
    """Options accepted by ``I18nRuntime.init``.

    Attributes:
        supported: Allowed language codes (default: runtime default set).
        sync_query: Whether language changes rewrite the URL query parameter.
            None keeps the runtime default.
        messages: Initial messages, language -> {key: message}.
        initial_lang: Explicit language, skips language detection.
        select: Primary language control reference.
        select_selector: Selector used to look up the primary control when
            ``select`` is not given.
        additional_selects: Further controls to bind.
    """

    supported: Optional[Sequence[LanguageCode]] = None
    sync_query: Optional[bool] = None
    messages: Optional[MessageMap] = None
    initial_lang: Optional[LanguageCode] = None
    select: Optional[Any] = None
    select_selector: Optional[str] = None
    additional_selects: List[Any] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "I18nOptions":
        """Build options from a plain mapping.

        Accepts snake_case field names and the camelCase names used by page
        configuration (``syncQuery``, ``initialLang``, ...). Unknown keys are
        ignored. A given ``sync_query`` only disables URL sync when it is
        exactly ``False``.

        Args:
            data: Mapping of option names to values.

        Returns:
            I18nOptions instance.
        """
        if not data:
            return cls()

        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for name, value in data.items():
            name = _OPTION_ALIASES.get(name, name)
            if name in known:
                values[name] = value

        if "sync_query" in values:
            values["sync_query"] = values["sync_query"] is not False
        if not isinstance(values.get("additional_selects"), (list, tuple)):
            values.pop("additional_selects", None)
        else:
            values["additional_selects"] = list(values["additional_selects"])
        return cls(**values)
