"""structlog configuration for the translation engine.

configure_logging() runs once when this module is imported, so importing any
engine module yields configured loggers. Under pytest every record is
dropped to keep test output clean.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("translation_miss_recorded", key=key, language_code=code)
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from infrastructure.configuration import Settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _processors(prod_mode: bool) -> List[Processor]:
    """Processor chain: context, level, timestamp, call site, then a renderer.

    Production renders one JSON object per line; development renders
    colored key=value console output.
    """
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
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BoundLogger:
    """Configure structlog over the standard logging module.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL.
        is_production: JSON output when True, console output when False.
            Defaults to settings.is_production.
        settings: Settings to read defaults from. Loaded from the
            environment only when an override above is missing.

    Returns:
        Root structlog logger.
    """
    if _is_test_environment():
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)
        logging.root.setLevel(SILENT_LEVEL)
        return structlog.stdlib.get_logger()

    if settings is None and (log_level is None or is_production is None):
        settings = Settings()
    prod_mode = settings.is_production if is_production is None else is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    Binds ``component`` (last dotted segment) and ``module_path`` (full
    module name), e.g. ``component="cache"`` and
    ``module_path="infrastructure.i18n.cache"``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
