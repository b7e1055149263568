"""Global configuration: constants, settings and logging setup."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Basis attached to every not-required result
NOT_APPLICABLE_BASIS = "-"

# Appended to citations produced by a sub-evaluation of a composite-use part
DEEMING_SUFFIX = " (Art. 9 deeming applied)"

# Use codes that trigger composite-use decomposition
COMPOSITE_USE_PREFIXES = ("16_i", "16_ro")

# Joins distinct citations of an aggregated result
BASIS_SEPARATOR = ";\n"

# Prefixes each line of an aggregated message
MESSAGE_BULLET = "- "

SELECTION_REQUIRED_MESSAGE = "Select the building use classification."

# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, Any]] = {
    "FIRECODE_LOG_LEVEL": {"default": "WARNING", "description": "Logging level"},
    "FIRECODE_ARTICLES": {"default": "", "description": "Comma-separated enabled articles (empty = all)"},
    "FIRECODE_CONFIG": {"default": "", "description": "Path to a JSON settings file"},
}

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Runtime settings for the judgement engine."""

    log_level: str = "WARNING"
    """Level for applications to pass to :func:`configure_logging`."""

    enabled_articles: list[str] = Field(default_factory=list)
    """Article ids to evaluate in ``evaluate_all``; empty means every article."""


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load merged settings: defaults -> JSON file -> environment variables.

    Parameters
    ----------
    config_path:
        Optional JSON file.  Falls back to ``FIRECODE_CONFIG`` when *None*.
    """
    config: dict[str, str] = {key: str(info["default"]) for key, info in _CONFIG_KEYS.items()}

    path = config_path or os.environ.get("FIRECODE_CONFIG", "")
    if path:
        file = Path(path)
        if file.is_file():
            try:
                data = json.loads(file.read_text(encoding="utf-8"))
                for k, v in data.items():
                    if isinstance(v, list):
                        v = ",".join(str(item) for item in v)
                    config[k] = str(v)
            except (json.JSONDecodeError, OSError):
                logger.debug("Could not read settings file %s", file, exc_info=True)

    # Environment variables override all
    for key in _CONFIG_KEYS:
        env_val = os.environ.get(key)
        if env_val is not None:
            config[key] = env_val

    log_level = config["FIRECODE_LOG_LEVEL"].strip().upper()
    if log_level not in _LOG_LEVELS:
        logger.debug("Ignoring unknown log level %r", config["FIRECODE_LOG_LEVEL"])
        log_level = str(_CONFIG_KEYS["FIRECODE_LOG_LEVEL"]["default"])

    articles = [a.strip() for a in config["FIRECODE_ARTICLES"].split(",") if a.strip()]
    return Settings(
        log_level=log_level,
        enabled_articles=articles,
    )


def configure_logging(level: str | int = "WARNING") -> None:
    """Apply *level* to the ``firecode`` package logger.

    Intended for applications; the engine never changes logger levels itself.
    """
    pkg_logger = logging.getLogger("firecode")
    pkg_logger.setLevel(level)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
