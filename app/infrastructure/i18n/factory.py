"""Factory functions for creating the language runtime.

Wires the runtime's environment, defaults and preloaded messages from
application settings.
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

import structlog
from infrastructure.configuration import Settings, settings as default_settings
from infrastructure.i18n.dom import DomDocument
from infrastructure.i18n.environment import (
    KeyValueStorage,
    LocaleSource,
    PageEnvironment,
    PageLocation,
)
from infrastructure.i18n.loader import YAMLMessageLoader
from infrastructure.i18n.models import I18nOptions
from infrastructure.i18n.runtime import I18nRuntime

logger = structlog.get_logger()


def create_runtime(
    document: Optional[DomDocument] = None,
    location: Optional[PageLocation] = None,
    storage: Optional[KeyValueStorage] = None,
    locale: Optional[LocaleSource] = None,
    options: Union[I18nOptions, Mapping[str, Any], None] = None,
    settings: Optional[Settings] = None,
    messages_dir: Optional[Path] = None,
    initialize: bool = True,
) -> I18nRuntime:
    """Create and configure an I18nRuntime.

    Settings supply the storage key, query parameter, default supported set,
    URL-sync default and primary control selector. Messages found in
    ``messages_dir`` (or ``settings.i18n.locales_dir``) are loaded first so
    that ``options.messages`` overlay them.

    Args:
        document: Document to render.
        location: Page address capability.
        storage: Persisted storage capability.
        locale: Browser locale capability.
        options: Options passed to ``init``.
        settings: Settings instance (default: module singleton).
        messages_dir: Directory of YAML message files.
        initialize: Whether to call ``init`` before returning.

    Returns:
        I18nRuntime: Configured runtime

    Raises:
        ValueError: If the messages directory does not exist or is malformed.

    Usage:
        runtime = create_runtime(document=doc, location=loc, storage=store)
        runtime.set_language("pt")
    """
    i18n_settings = (settings or default_settings).i18n

    environment = PageEnvironment(
        location=location,
        storage=storage,
        locale=locale,
        storage_key=i18n_settings.storage_key,
        query_param=i18n_settings.query_param,
    )
    runtime = I18nRuntime(
        environment=environment,
        document=document,
        default_supported=i18n_settings.supported_languages,
        default_select_selector=i18n_settings.select_selector,
        sync_query=i18n_settings.sync_query,
    )

    if messages_dir is None and i18n_settings.locales_dir:
        messages_dir = Path(i18n_settings.locales_dir)
    if messages_dir is not None:
        loader = YAMLMessageLoader(messages_dir)
        runtime.messages.merge(loader.load_all())
        logger.info(
            "runtime_messages_preloaded",
            messages_dir=str(messages_dir),
            languages=runtime.messages.languages(),
        )

    if initialize:
        runtime.init(options)

    return runtime
