# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic hook that records the arguments it was started with.

Drop it into a hook directory to see exactly what every hook receives.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from .logging import ROOT_LOGGER_NAME, configure_logging

LOGGER = logging.getLogger(f"{ROOT_LOGGER_NAME}.logargs")


def log_arguments(argv: Sequence[str | None]) -> None:
    """Write one record per argument, in order."""

    for index, value in enumerate(argv):
        if value is None:
            LOGGER.error("argv[%d] = <null>", index)
        else:
            LOGGER.info("argv[%d] = '%s'", index, value)


def main(argv: Sequence[str] | None = None) -> int:
    """Log every argument under the program's own name and report success."""

    args = list(sys.argv if argv is None else argv)
    ident = os.path.basename(args[0]) if args else "logargs"
    logger = configure_logging(ident)
    if logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)
    log_arguments(args)
    return 0


__all__ = ["log_arguments", "main"]
