"""Structured logging for the translation engine (structlog).

Modules obtain their logger with get_module_logger() and log snake_case
event names with key/value context:

    logger = get_module_logger()
    logger.warning("translation_cache_full", size_bytes=size)

configure_logging() is applied on import; call it again to change the
level or the renderer.
"""

from infrastructure.logging.setup import configure_logging, get_module_logger

__all__ = ["configure_logging", "get_module_logger"]
