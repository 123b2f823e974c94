"""i18n system - page language runtime.

Resolves the active language from page signals, stores message
dictionaries, renders marked DOM nodes, and keeps URL, storage and language
controls in sync on every change.

Main components:
- models: language/message types, I18nOptions, defaults
- store: MessageStore with active -> "en" -> default -> key fallback
- environment: PageEnvironment and capability protocols (location, storage, locale)
- resolvers: LanguageResolver for the initial language
- dom: DomRenderer for data-i18n markup
- notifier: ChangeNotifier listener registry
- controls: ControlBinder for language selectors
- runtime: I18nRuntime public API
- loader: MessageLoader and YAMLMessageLoader
- factory: create_runtime wiring from settings
"""

from infrastructure.i18n.controls import ControlBinder, LanguageControl
from infrastructure.i18n.dom import DomDocument, DomElement, DomRenderer
from infrastructure.i18n.environment import (
    JSONFileStorage,
    KeyValueStorage,
    LocaleSource,
    MemoryStorage,
    PageEnvironment,
    PageLocation,
    StaticLocale,
    StaticLocation,
)
from infrastructure.i18n.factory import create_runtime
from infrastructure.i18n.loader import MessageLoader, YAMLMessageLoader
from infrastructure.i18n.models import (
    DEFAULT_LANGUAGE,
    DEFAULT_SUPPORTED,
    I18nOptions,
    LanguageCode,
)
from infrastructure.i18n.notifier import ChangeNotifier
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.i18n.runtime import I18nRuntime
from infrastructure.i18n.store import MessageStore

__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_SUPPORTED",
    "LanguageCode",
    "I18nOptions",
    "MessageStore",
    "PageEnvironment",
    "PageLocation",
    "KeyValueStorage",
    "LocaleSource",
    "StaticLocation",
    "MemoryStorage",
    "JSONFileStorage",
    "StaticLocale",
    "LanguageResolver",
    "DomDocument",
    "DomElement",
    "DomRenderer",
    "ChangeNotifier",
    "LanguageControl",
    "ControlBinder",
    "I18nRuntime",
    "MessageLoader",
    "YAMLMessageLoader",
    "create_runtime",
]
