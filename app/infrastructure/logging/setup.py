"""Structlog configuration and logger setup.

Configures structlog once for the language runtime: console rendering while
developing, JSON lines in production, and no output at all under pytest.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.info("language_changed", language="es")

Dependencies:
    - infrastructure.configuration.Settings
"""

import inspect
import logging
import sys
from types import FrameType
from typing import Any, Dict, List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import Processor

from infrastructure.configuration import Settings, settings as default_settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _resolve_level(name: str) -> int:
    """Map a level name to its numeric value, INFO for unknown names."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _build_processors(prod_mode: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Under pytest only the level processor is installed and the root logger
    is raised above CRITICAL, so bound loggers keep working while emitting
    nothing.

    Args:
        settings: Source of LOG_LEVEL and production mode (default: the
            settings singleton).
        log_level: Level name overriding ``settings.LOG_LEVEL``.
        is_production: Overrides ``settings.is_production``; selects JSON
            instead of console output.

    Returns:
        Configured logger instance
    """
    settings = settings or default_settings

    if _is_test_environment():
        processors: List[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ]
        level = SILENT_LEVEL
        logging.root.setLevel(level)
    else:
        prod_mode = (
            is_production if is_production is not None else settings.is_production
        )
        processors = _build_processors(prod_mode)
        level = _resolve_level(log_level or settings.LOG_LEVEL)

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module(frame: Optional[FrameType]) -> Optional[str]:
    """Module name of the frame calling the public helper."""
    caller = frame.f_back if frame else None
    if caller is None:
        return None
    module = inspect.getmodule(caller)
    return module.__name__ if module else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to ``logger_name``.

    Args:
        name: Logger name. Detected from the caller when omitted.

    Returns:
        Bound logger
    """
    name = name or _caller_module(inspect.currentframe()) or "unknown"
    return logger.bind(logger_name=name)


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module.

    Binds ``component`` (last dotted part) and ``module_path``, e.g.
    ``{"component": "runtime", "module_path": "infrastructure.i18n.runtime"}``.
    """
    module_name = _caller_module(inspect.currentframe())
    if module_name is None:
        return logger.bind(component="unknown")

    context: Dict[str, Any] = {
        "component": module_name.rsplit(".", 1)[-1],
        "module_path": module_name,
    }
    return logger.bind(**context)
