"""Logging configuration for the SEO prompt engine.

All module loggers live under one ``seo_prompts`` tree. The stdout handler
is attached once to the tree root, so CLI flags such as ``--verbose`` can
change the level for every module at once.
"""

from __future__ import annotations

import logging
import sys

LOGGER_ROOT = "seo_prompts"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    module_name: str = LOGGER_ROOT,
) -> logging.Logger:
    """Return the logger for a module, configuring the tree root on first use.

    Args:
        level: Level applied when the root handler is first created.
        module_name: Module name; qualified under ``seo_prompts``.

    Returns:
        Logger named ``seo_prompts.<module_name>``.
    """
    root = logging.getLogger(LOGGER_ROOT)
    if not root.handlers:
        root.setLevel(level)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)

    if module_name == LOGGER_ROOT or module_name.startswith(LOGGER_ROOT + "."):
        return logging.getLogger(module_name)
    return logging.getLogger(f"{LOGGER_ROOT}.{module_name}")


def set_level(level: int) -> None:
    """Change the level of every seo_prompts logger."""
    setup_logging().setLevel(level)
