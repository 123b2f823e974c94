"""Language selector controls kept in sync with the active language."""

from typing import Any, Callable, List, Protocol

from infrastructure.i18n.models import LanguageCode
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LanguageControl(Protocol):
    """Select-like control with a value and change notifications."""

    value: str

    def set_attribute(self, name: str, value: str) -> None: ...

    def add_change_listener(self, callback: Callable[[str], Any]) -> None: ...


class ControlBinder:
    """Registry of bound controls.

    Membership is by identity. A control is wired to its change handler
    once, however many times it is bound.
    """

    def __init__(self):
        self._controls: List[LanguageControl] = []

    def __len__(self) -> int:
        return len(self._controls)

    def __contains__(self, control: object) -> bool:
        return any(bound is control for bound in self._controls)

    @property
    def controls(self) -> List[LanguageControl]:
        return list(self._controls)

    def bind(
        self,
        control: LanguageControl,
        language: LanguageCode,
        label: str,
        on_change: Callable[[str], Any],
    ) -> bool:
        """Bind a control, setting its value and accessible label.

        Args:
            control: Control to bind.
            language: Value to display.
            label: Accessible label (``aria-label`` and ``title``).
            on_change: Called with the control's new value on user changes.

        Returns:
            True if the control was newly registered, False if it was
            already bound (value and label are still refreshed).
        """
        is_new = control not in self
        if is_new:
            self._controls.append(control)

        control.value = language
        control.set_attribute("aria-label", label)
        control.set_attribute("title", label)

        if is_new:
            control.add_change_listener(on_change)
            logger.debug("control_bound", control_count=len(self._controls))
        return is_new

    def sync(self, language: LanguageCode) -> None:
        """Set every bound control's value."""
        for control in self._controls:
            control.value = language
