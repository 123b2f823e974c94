"""Language runtime infrastructure settings."""

import json
from typing import Any, List, Optional

from pydantic import Field, field_validator
import structlog

from infrastructure.configuration.base import InfrastructureSettings

logger = structlog.stdlib.get_logger().bind(component="config.i18n")

DEFAULT_SUPPORTED_LANGUAGES = "en,es,pt"


class I18nSettings(InfrastructureSettings):
    """Configuration for the page language runtime.

    Environment Variables:
        I18N_SUPPORTED_LANGUAGES: Comma list or JSON list of language codes
            (default: en,es,pt)
        I18N_SYNC_QUERY: Rewrite the URL query parameter on language change
            (default: True)
        I18N_STORAGE_KEY: Storage key holding the last chosen language
            (default: resonance-lang)
        I18N_QUERY_PARAM: Query parameter carrying the language (default: lang)
        I18N_SELECT_SELECTOR: Selector of the primary language control
            (default: .lang-select)
        I18N_LOCALES_DIR: Optional directory of <domain>.<lang>.yml files

    Example:
        ```python
        from infrastructure.configuration import settings

        supported = settings.i18n.supported_languages
        if settings.i18n.sync_query:
            param = settings.i18n.query_param
        ```
    """

    supported_languages_raw: str = Field(
        default=DEFAULT_SUPPORTED_LANGUAGES,
        alias="I18N_SUPPORTED_LANGUAGES",
        description="Comma separated or JSON list of activatable language codes",
    )
    sync_query: bool = Field(
        default=True,
        alias="I18N_SYNC_QUERY",
        description="Rewrite the page query string when the language changes",
    )
    storage_key: str = Field(
        default="resonance-lang",
        alias="I18N_STORAGE_KEY",
        description="Persisted storage key for the chosen language",
    )
    query_param: str = Field(
        default="lang",
        alias="I18N_QUERY_PARAM",
        description="Query string parameter holding the language code",
    )
    select_selector: str = Field(
        default=".lang-select",
        alias="I18N_SELECT_SELECTOR",
        description="Selector used to find the primary language control",
    )
    locales_dir: Optional[str] = Field(
        default=None,
        alias="I18N_LOCALES_DIR",
        description="Directory with YAML message files to preload",
    )

    @field_validator("supported_languages_raw", mode="before")
    @classmethod
    def _normalize_supported(cls, v: Optional[Any]) -> Any:
        """Accept lists as well as strings for I18N_SUPPORTED_LANGUAGES."""
        if v is None:
            return DEFAULT_SUPPORTED_LANGUAGES
        if isinstance(v, (list, tuple)):
            return ",".join(str(item) for item in v)
        return v

    @property
    def supported_languages(self) -> List[str]:
        """Parsed, lowercased, de-duplicated supported language codes."""
        raw = self.supported_languages_raw.strip()
        if raw.startswith("["):
            try:
                items = json.loads(raw)
            except (json.JSONDecodeError, ValueError):
                logger.warning("invalid_supported_languages_json", value=raw[:80])
                items = []
        else:
            items = raw.split(",")

        languages: List[str] = []
        for item in items:
            code = str(item).strip().lower()
            if code and code not in languages:
                languages.append(code)

        if not languages:
            return DEFAULT_SUPPORTED_LANGUAGES.split(",")
        return languages
