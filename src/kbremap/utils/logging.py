"""Logging for kbremap.

Everything is logged under the ``kbremap`` logger and written to stderr,
so diagnostics never end up in ``--dump`` or ``--list`` output, which a
user may paste into a shell.
"""

from __future__ import annotations

import logging
import sys

from kbremap.config.settings import LoggingConfig

PACKAGE_LOGGER = "kbremap"


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Attach stderr (and optionally file) handlers to the package logger.

    Safe to call more than once: handlers installed by an earlier call
    are closed and replaced. Unknown level names fall back to WARNING.
    """
    config = config or LoggingConfig()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(config.level))
    for stale in list(logger.handlers):
        logger.removeHandler(stale)
        stale.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.file:
        handlers.append(logging.FileHandler(config.file))

    formatter = logging.Formatter(config.format)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %d handler(s) at %s", len(handlers), config.level)
