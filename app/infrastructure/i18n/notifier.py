"""Language change listener registry.

Listeners are called synchronously with ``(language, translate)``. A
listener that raises is logged and skipped; the remaining listeners still
run.
"""

from typing import Callable, List

from infrastructure.i18n.models import (
    ChangeListener,
    Disposer,
    LanguageCode,
    TranslateFn,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def _noop() -> None:
    return None


class ChangeNotifier:
    """Observer registry for language changes."""

    def __init__(self):
        self._listeners: List[ChangeListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(
        self,
        listener: ChangeListener,
        language: LanguageCode,
        translate: TranslateFn,
    ) -> Disposer:
        """Register a listener and call it once with the current state.

        Args:
            listener: Callable taking ``(language, translate)``.
            language: Current active language.
            translate: Current message lookup.

        Returns:
            Disposer removing the listener. Calling it again is a no-op.
            Non-callable listeners are ignored and get a no-op disposer.
        """
        if not callable(listener):
            logger.warning("listener_not_callable", listener_type=type(listener).__name__)
            return _noop

        if listener not in self._listeners:
            self._listeners.append(listener)
        self._invoke(listener, language, translate)

        def dispose() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)
                logger.debug("listener_disposed", listener=_name(listener))

        return dispose

    def notify(self, language: LanguageCode, translate: TranslateFn) -> None:
        """Call every registered listener with the new state.

        Iterates over a snapshot, so listeners may subscribe or dispose
        while being notified.
        """
        listeners = list(self._listeners)
        logger.debug(
            "notifying_listeners", language=language, listener_count=len(listeners)
        )
        for listener in listeners:
            self._invoke(listener, language, translate)

    def clear(self) -> None:
        """Remove all listeners."""
        self._listeners.clear()

    @staticmethod
    def _invoke(
        listener: ChangeListener,
        language: LanguageCode,
        translate: TranslateFn,
    ) -> None:
        try:
            listener(language, translate)
        except Exception as e:
            logger.exception(
                "listener_failed",
                listener=_name(listener),
                language=language,
                error=str(e),
            )


def _name(listener: Callable) -> str:
    return getattr(listener, "__name__", type(listener).__name__)
