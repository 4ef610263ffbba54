"""Logging setup for the extractor and the batch generator.

Log records go to stderr so that ``recipe-examples show`` can write YAML to
stdout untouched. A YAML file in ``logging.config.dictConfig`` format replaces
the built-in setup entirely.

Environment variables:
    RECIPE_EXAMPLES_LOGGING_CONFIG: dictConfig YAML file to load instead of the built-in setup
    RECIPE_EXAMPLES_LOG_LEVEL: Level for every recipe_examples component
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_PATH_ENV = "RECIPE_EXAMPLES_LOGGING_CONFIG"
LOG_LEVEL_ENV = "RECIPE_EXAMPLES_LOG_LEVEL"

# Parser diagnostics are noisy on partial sources, so they stay quiet unless asked for.
COMPONENT_LOG_LEVELS = {
    "recipe_examples.java": "WARNING",
    "recipe_examples.extraction": "INFO",
    "recipe_examples.generator": "INFO",
}


class LoggingConfig:
    """A dictConfig mapping for the recipe_examples loggers.

    The mapping is read from ``config_path`` (or the file named by
    RECIPE_EXAMPLES_LOGGING_CONFIG) when that file exists and built in
    otherwise. It is loaded once per instance.

    Example:
        >>> LoggingConfig(Path("logging.yml")).apply()
    """

    def __init__(self, config_path: Optional[Path] = None):
        if config_path is None and (env_path := os.environ.get(CONFIG_PATH_ENV)):
            config_path = Path(env_path)
        self.config_path = config_path
        self._config: Optional[Dict[str, Any]] = None

    def load_config(self) -> Dict[str, Any]:
        if self._config is None:
            if self.config_path is not None and self.config_path.exists():
                self._config = yaml.safe_load(self.config_path.read_text(encoding="utf-8"))
            else:
                self._config = build_default_config(os.environ.get(LOG_LEVEL_ENV))
        return self._config

    def apply(self):
        logging.config.dictConfig(self.load_config())


def build_default_config(level: Optional[str] = None) -> Dict[str, Any]:
    """Built-in setup: one stderr handler, one logger per component.

    Each component starts at its entry in COMPONENT_LOG_LEVELS; ``level``,
    when given, applies to all of them. Records that leave the package reach
    the root logger at WARNING.
    """
    loggers: Dict[str, Any] = {
        "recipe_examples": {"level": level or "INFO", "handlers": ["stderr"], "propagate": False},
    }
    for name, default in COMPONENT_LOG_LEVELS.items():
        loggers[name] = {"level": level or default}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "compact": {
                "format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
                "datefmt": "%H:%M:%S",
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "compact",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": loggers,
        "root": {"level": "WARNING", "handlers": ["stderr"]},
    }


_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None):
    """Configure logging, replacing any earlier configuration.

    Args:
        config_path: dictConfig YAML file. Defaults to RECIPE_EXAMPLES_LOGGING_CONFIG.
        level: Level forced onto the package logger and every component after
               the configuration is applied, e.g. from ``--log-level``.
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for name in ("recipe_examples", *COMPONENT_LOG_LEVELS):
            logging.getLogger(name).setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Module logger; the first call applies the default setup."""
    if _logging_config is None:
        setup_logging()
    return logging.getLogger(name)
