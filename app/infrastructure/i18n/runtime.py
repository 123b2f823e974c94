"""Language runtime: active language state and change synchronization.

``I18nRuntime`` owns the active language, the message store, bound controls
and change listeners for one page. Every language change goes through
``set_language``, which persists the choice, rewrites the URL, updates
controls, re-renders the document and notifies listeners, in one
synchronous pass.

Usage:
    runtime = I18nRuntime(environment=env, document=doc)
    runtime.init({"messages": {"en": {"hello": "Hello"}, "es": {"hello": "Hola"}}})

    runtime.set_language("es")
    runtime.t("hello")  # "Hola"
"""

from typing import Any, List, Mapping, Optional, Sequence, Union

from infrastructure.i18n.controls import ControlBinder, LanguageControl
from infrastructure.i18n.dom import DomDocument, DomRenderer
from infrastructure.i18n.environment import PageEnvironment
from infrastructure.i18n.models import (
    DEFAULT_LANGUAGE,
    DEFAULT_SELECT_SELECTOR,
    DEFAULT_SUPPORTED,
    LABEL_FALLBACK,
    LABEL_KEY,
    ChangeListener,
    Disposer,
    I18nOptions,
    LanguageCode,
    MessageMap,
    normalize_supported,
)
from infrastructure.i18n.notifier import ChangeNotifier
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.i18n.store import MessageStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class I18nRuntime:
    """Language state and synchronization for a page.

    Attributes:
        environment: Best-effort access to URL, storage and browser locale.
        document: Document to render, or None for headless use.
        messages: Merged per-language dictionaries.
        resolver: Initial language detection.
        notifier: Change listener registry.
        controls: Bound language controls.
        renderer: DOM renderer, None without a document.
    """

    def __init__(
        self,
        environment: Optional[PageEnvironment] = None,
        document: Optional[DomDocument] = None,
        default_supported: Sequence[LanguageCode] = DEFAULT_SUPPORTED,
        default_select_selector: str = DEFAULT_SELECT_SELECTOR,
        sync_query: bool = True,
    ):
        """Initialize the runtime.

        Args:
            environment: Page signal accessor (default: no signals).
            document: Document to render (default: none).
            default_supported: Supported set used when init gets none.
            default_select_selector: Selector for the primary control.
            sync_query: Default URL-sync flag before init.
        """
        self.environment = environment or PageEnvironment()
        self.document = document
        self.messages = MessageStore()
        self.resolver = LanguageResolver(self.environment)
        self.notifier = ChangeNotifier()
        self.controls = ControlBinder()
        self.renderer = (
            DomRenderer(document, self.t, self.get_language)
            if document is not None
            else None
        )

        self.default_supported = normalize_supported(default_supported)
        self.default_select_selector = default_select_selector
        self._supported: List[LanguageCode] = list(self.default_supported)
        self.default_sync_query = sync_query
        self._sync_query = sync_query
        self._language: LanguageCode = DEFAULT_LANGUAGE

    @property
    def sync_query(self) -> bool:
        return self._sync_query

    def init(
        self,
        options: Union[I18nOptions, Mapping[str, Any], None] = None,
    ) -> "I18nRuntime":
        """Configure the runtime and render the page once.

        Can be called again: the supported set, URL-sync flag and active
        language are replaced, and messages are merged on top of the
        existing ones.

        Args:
            options: I18nOptions or an equivalent mapping.

        Returns:
            The runtime itself.
        """
        if not isinstance(options, I18nOptions):
            options = I18nOptions.from_mapping(options)

        self._supported = normalize_supported(options.supported, self.default_supported)
        self._sync_query = (
            options.sync_query
            if options.sync_query is not None
            else self.default_sync_query
        )
        self.messages.merge(options.messages)
        self._language = options.initial_lang or self.resolver.detect_initial(
            self._supported
        )
        self.controls.sync(self._language)
        if self.renderer is not None:
            self.renderer.sync_document_locale()

        primary = options.select
        if primary is None and self.document is not None:
            primary = self.document.query_selector(
                options.select_selector or self.default_select_selector
            )
        self.bind_control(primary)
        for control in options.additional_selects:
            self.bind_control(control)

        logger.info(
            "i18n_initialized",
            language=self._language,
            supported=self._supported,
            sync_query=self._sync_query,
            control_count=len(self.controls),
        )

        self.apply()
        return self

    def t(self, key: str, fallback: Optional[str] = None) -> str:
        """Resolve a message key in the active language."""
        return self.messages.resolve(key, self._language, fallback)

    def get_language(self) -> LanguageCode:
        return self._language

    def supported(self) -> List[LanguageCode]:
        """Copy of the supported language list."""
        return list(self._supported)

    def set_language(self, language: LanguageCode) -> None:
        """Switch the active language and propagate it.

        Unsupported languages are ignored without any side effect or
        notification.

        Args:
            language: Language code to activate.
        """
        if language not in self._supported:
            logger.debug(
                "language_rejected", language=language, supported=self._supported
            )
            return

        previous = self._language
        self._language = language
        self.environment.persist_language(language)
        if self._sync_query:
            self.environment.replace_query_language(language)
        self.controls.sync(language)

        logger.info("language_changed", language=language, previous=previous)
        self.apply()

    def bind_control(self, control: Optional[LanguageControl]) -> None:
        """Keep a control in sync with the active language.

        The control's value and accessible label are set immediately, and a
        user change to its value calls ``set_language``. Binding an already
        bound control does not wire it again. None is ignored.
        """
        if control is None:
            return
        self.controls.bind(
            control,
            self._language,
            self.t(LABEL_KEY, LABEL_FALLBACK),
            self.set_language,
        )

    def on_change(self, listener: ChangeListener) -> Disposer:
        """Subscribe to language changes.

        The listener is called right away with ``(language, t)`` and again
        after every change.

        Returns:
            Idempotent disposer that unsubscribes the listener.
        """
        return self.notifier.subscribe(listener, self._language, self.t)

    def register_messages(self, extra: Optional[MessageMap]) -> None:
        """Merge messages and re-render as if the language had changed."""
        self.messages.merge(extra)
        self.apply()

    def translate_label(self, value: Any, fallback: Any = None) -> Any:
        """Pick the active-language entry from an inline translation map."""
        return self.messages.resolve_label(value, self._language, fallback)

    def apply(self) -> None:
        """Render the document, sync its locale and notify listeners."""
        if self.renderer is not None:
            self.renderer.render()
            self.renderer.sync_document_locale()
        self.notifier.notify(self._language, self.t)
