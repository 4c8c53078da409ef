# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Operational log: syslog when available, stderr otherwise."""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Final

ROOT_LOGGER_NAME: Final[str] = "cuckoo"
SYSLOG_SOCKET: Final[Path] = Path("/dev/log")

_CONFIGURED_FLAG: Final[str] = "_cuckoo_configured"


def _syslog_handler(ident: str) -> logging.Handler | None:
    if not SYSLOG_SOCKET.exists():
        return None
    try:
        handler = logging.handlers.SysLogHandler(
            address=str(SYSLOG_SOCKET),
            facility=logging.handlers.SysLogHandler.LOG_USER,
        )
    except OSError:
        return None
    handler.setFormatter(logging.Formatter(f"{ident}[%(process)d]: %(message)s"))
    return handler


def configure_logging(ident: str, *, debug: bool = False) -> logging.Logger:
    """Attach the operational handler to the ``cuckoo`` logger tree once per process.

    Records go to syslog (facility ``USER``, tagged with ``ident`` and the pid)
    when the local syslog socket exists, and to stderr otherwise. Invoke mode
    must not write to stdout, so no handler ever targets it.

    Args:
        ident: Program name used to tag syslog records.
        debug: Lower the threshold to ``DEBUG`` when ``True``.

    Returns:
        logging.Logger: The configured ``cuckoo`` root logger.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if getattr(logger, _CONFIGURED_FLAG, False):
        return logger

    handler = _syslog_handler(ident)
    if handler is not None:
        level = logging.DEBUG if debug else logging.INFO
    else:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(f"{ident}: %(levelname)s: %(message)s"))
        level = logging.DEBUG if debug else logging.WARNING
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    setattr(logger, _CONFIGURED_FLAG, True)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "configure_logging"]
