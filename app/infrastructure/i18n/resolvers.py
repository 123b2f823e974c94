"""Initial language resolution from page signals.

Determines the starting language from the query string, the persisted
preference and the browser locale, in that order.
"""

from typing import Optional, Sequence

import structlog

from infrastructure.i18n.environment import PageEnvironment
from infrastructure.i18n.models import DEFAULT_LANGUAGE, LanguageCode

logger = structlog.get_logger().bind(component="i18n.resolver")


class LanguageResolver:
    """Resolves the initial language from page signals.

    Resolution order, first match wins:
    1. Query string parameter (lowercased), if supported
    2. Persisted preference, if supported
    3. Two-letter prefix of the browser locale, if supported
    4. "en", regardless of the supported set
    """

    def __init__(self, environment: Optional[PageEnvironment] = None):
        """Initialize language resolver.

        Args:
            environment: Page signal accessor. Without one, every signal
                reads as absent.
        """
        self.environment = environment or PageEnvironment()

    def detect_initial(self, supported: Sequence[LanguageCode]) -> LanguageCode:
        """Pick the initial language for a supported set.

        Args:
            supported: Activatable language codes.

        Returns:
            Resolved language code.
        """
        from_query = self.environment.query_language()
        if from_query and from_query in supported:
            logger.info("resolved_from_query", language=from_query)
            return from_query

        saved = self.environment.stored_language()
        if saved and saved in supported:
            logger.info("resolved_from_storage", language=saved)
            return saved

        base = self.browser_language()
        if base in supported:
            logger.info("resolved_from_browser", language=base)
            return base

        if DEFAULT_LANGUAGE not in supported:
            # Kept as a hard fallback; set_language will reject it later
            logger.warning(
                "default_language_not_supported",
                language=DEFAULT_LANGUAGE,
                supported=list(supported),
            )
        else:
            logger.info("resolved_default", language=DEFAULT_LANGUAGE)
        return DEFAULT_LANGUAGE

    def browser_language(self) -> LanguageCode:
        """Two-letter lowercase prefix of the browser locale (default "en")."""
        locale = self.environment.browser_locale() or DEFAULT_LANGUAGE
        return str(locale)[:2].lower()
