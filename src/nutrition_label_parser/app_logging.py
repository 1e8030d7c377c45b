"""Logging configuration for the parser and its HTTP surface.

The package logger gets one stream handler. Sub-loggers such as
``services.label_parser`` can be given their own level, so parse traces can
be turned on without raising the level of the OCR adapter or the API.
"""

import logging
from collections.abc import Mapping

PACKAGE_LOGGER = "nutrition_label_parser"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_level(level: int | str) -> int:
    """Return a numeric level for a number or a name like ``"debug"``."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelNamesMapping().get(level.strip().upper())
    if resolved is None:
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_logging(
    level: int | str = logging.INFO,
    overrides: Mapping[str, int | str] | None = None,
) -> None:
    """Configure the package logger and optional per-module levels.

    Override keys are module paths relative to the package, for example
    ``{"services.label_parser": "DEBUG"}``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(level))
    for module, module_level in (overrides or {}).items():
        logging.getLogger(f"{PACKAGE_LOGGER}.{module}").setLevel(
            resolve_level(module_level)
        )
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
