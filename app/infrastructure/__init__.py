"""Infrastructure modules for the page language runtime.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Language resolution, message store, DOM rendering and synchronization
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import configure_logging, get_module_logger

__all__ = [
    # Configuration
    "settings",
    # Logging
    "configure_logging",
    "get_module_logger",
]
