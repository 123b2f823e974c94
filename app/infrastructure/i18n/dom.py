"""DOM rendering of translated text, markup and attributes.

Elements opt in through data attributes:

    <h1 data-i18n="hero_title">Welcome</h1>
    <p data-i18n-html="hero_body">Read <a href="/docs">the docs</a></p>
    <span data-i18n="cta" data-i18n-fallback="Start">...</span>
    <input data-i18n="search" data-i18n-attr="placeholder,aria-label">

Only marked elements, the document title and the meta description are ever
written.
"""

from typing import Callable, Iterable, List, Optional, Protocol

from infrastructure.i18n.models import LanguageCode, TranslateFn
from infrastructure.logging import get_module_logger

logger = get_module_logger()

ATTR_KEY = "data-i18n"
ATTR_HTML = "data-i18n-html"
ATTR_FALLBACK = "data-i18n-fallback"
ATTR_TARGETS = "data-i18n-attr"

TITLE_KEY = "doc_title"
DESCRIPTION_KEY = "doc_description"
DESCRIPTION_SELECTOR = 'meta[name="description"]'

TEXT_DIRECTION = "ltr"


class DomElement(Protocol):
    """Mutable element node."""

    inner_html: str
    text_content: str

    def get_attribute(self, name: str) -> Optional[str]: ...

    def set_attribute(self, name: str, value: str) -> None: ...

    def has_attribute(self, name: str) -> bool: ...

    def query_selector_all(self, selector: str) -> Iterable["DomElement"]: ...


class DomDocument(Protocol):
    """Queryable document."""

    title: str

    @property
    def document_element(self) -> Optional[DomElement]: ...

    def query_selector(self, selector: str) -> Optional[DomElement]: ...

    def query_selector_all(self, selector: str) -> Iterable[DomElement]: ...


def split_targets(value: Optional[str]) -> List[str]:
    """Split a comma separated attribute list, dropping blanks."""
    return [name.strip() for name in (value or "").split(",") if name.strip()]


class DomRenderer:
    """Applies resolved messages to marked DOM nodes.

    Attributes:
        document: Document being rendered.
        translate: Message lookup, ``translate(key, fallback)``.
        get_language: Returns the active language.
    """

    def __init__(
        self,
        document: DomDocument,
        translate: TranslateFn,
        get_language: Callable[[], LanguageCode],
    ):
        self.document = document
        self.translate = translate
        self.get_language = get_language

    def render(self, root: Optional[DomElement] = None) -> None:
        """Translate marked nodes under ``root`` (default: whole document).

        The document title and meta description are always refreshed.
        """
        scope = root if root is not None else self.document
        html_count = self._render_html(scope)
        text_count = self._render_text(scope)
        attr_count = self._render_attributes(scope)
        self._render_document_fields()

        logger.debug(
            "dom_rendered",
            language=self.get_language(),
            html_nodes=html_count,
            text_nodes=text_count,
            attribute_nodes=attr_count,
        )

    def _render_html(self, scope) -> int:
        count = 0
        for element in scope.query_selector_all(f"[{ATTR_HTML}]"):
            key = element.get_attribute(ATTR_HTML)
            if not key:
                continue
            element.inner_html = self.translate(key, element.inner_html)
            count += 1
        return count

    def _render_text(self, scope) -> int:
        count = 0
        for element in scope.query_selector_all(f"[{ATTR_KEY}]"):
            if element.has_attribute(ATTR_HTML):
                continue
            key = element.get_attribute(ATTR_KEY)
            if not key:
                continue
            fallback = element.get_attribute(ATTR_FALLBACK) or element.text_content
            element.text_content = self.translate(key, fallback)
            count += 1
        return count

    def _render_attributes(self, scope) -> int:
        count = 0
        for element in scope.query_selector_all(f"[{ATTR_TARGETS}]"):
            targets = split_targets(element.get_attribute(ATTR_TARGETS))
            key = element.get_attribute(ATTR_KEY)
            if not targets or not key:
                continue
            value = self.translate(key, element.get_attribute(targets[0]))
            for name in targets:
                element.set_attribute(name, value)
            count += 1
        return count

    def _render_document_fields(self) -> None:
        self.document.title = self.translate(TITLE_KEY, self.document.title)
        description = self.document.query_selector(DESCRIPTION_SELECTOR)
        if description is not None:
            description.set_attribute(
                "content",
                self.translate(DESCRIPTION_KEY, description.get_attribute("content")),
            )

    def sync_document_locale(self) -> None:
        """Set the root element's ``lang`` and fixed ``dir`` attributes."""
        root = self.document.document_element
        if root is None:
            return
        root.set_attribute("lang", self.get_language())
        root.set_attribute("dir", TEXT_DIRECTION)
