"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the page
language runtime using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Language runtime settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    supported = settings.i18n.supported_languages
    storage_key = settings.i18n.storage_key

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure import I18nSettings

__all__ = ["Settings", "I18nSettings", "settings"]
