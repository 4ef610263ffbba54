"""Logging for recipe_examples modules.

Modules call ``get_logger(__name__)``; the CLI calls ``setup_logging`` when
``--log-level`` is given.
"""

from .logging_config import LoggingConfig, get_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_logger",
]
