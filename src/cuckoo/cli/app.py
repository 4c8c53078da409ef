# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process entry point: install through the installer name, intercept under any other."""

from __future__ import annotations

import locale
import logging
import os
import sys
from collections.abc import Sequence
from typing import NoReturn

import typer

from ..config import DEFAULT_INSTALLER_NAME, ConfigError, load_settings
from ..dispatch import InvocationMode, invoke
from ..errors import CuckooError
from ..installer import install
from ..logging import configure_logging
from ._install_cli_models import (
    DEBUG_OPTION,
    EMOJI_OPTION,
    TARGET_ARGUMENT,
    InstallCLIOptions,
    ProgramContext,
)
from .shared import USAGE_GUIDANCE, InstallReporter

LOGGER = logging.getLogger(__name__)

install_app = typer.Typer(
    name=DEFAULT_INSTALLER_NAME,
    add_completion=False,
    pretty_exceptions_enable=False,
)


@install_app.command(help=USAGE_GUIDANCE)
def install_command(
    ctx: typer.Context,
    target: TARGET_ARGUMENT,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Intercept the executable at ``target``.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    reporter = InstallReporter(use_emoji=emoji, debug_enabled=debug)
    try:
        context = ctx.obj if isinstance(ctx.obj, ProgramContext) else ProgramContext.current()
        options = InstallCLIOptions.from_cli(target, emoji=emoji, debug=debug)
        reporter.debug(f"program={context.program} target={options.target}")
        result = install(options.target, program=context.program, settings=context.settings)
    except CuckooError as exc:
        reporter.failed(exc)
        raise typer.Exit(code=exc.exit_code) from exc

    if result.already_installed:
        reporter.unchanged(result)
    else:
        reporter.installed(result)
    raise typer.Exit(code=0)


def _enable_collation() -> None:
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        LOGGER.debug("falling back to the C collation order")


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Run the program as selected by the base name it was invoked under.

    Args:
        argv: Full argument vector including ``argv[0]``; defaults to
            :data:`sys.argv`.

    Raises:
        SystemExit: Always, carrying the process exit status.
    """

    args = list(sys.argv if argv is None else argv)
    ident = os.path.basename(args[0]) or DEFAULT_INSTALLER_NAME
    try:
        settings = load_settings()
    except ConfigError as exc:
        configure_logging(ident).error("invalid configuration: %s", exc)
        raise SystemExit(1) from exc

    configure_logging(ident, debug=settings.debug)
    _enable_collation()

    if InvocationMode.detect(args[0], settings) is InvocationMode.INSTALL:
        try:
            context = ProgramContext.from_argv0(args[0], settings)
        except CuckooError as exc:
            LOGGER.error("%s", exc)
            raise SystemExit(exc.exit_code) from exc
        install_app(args=args[1:], prog_name=settings.installer_name, obj=context)
        raise SystemExit(0)  # pragma: no cover - Typer exits in standalone mode

    raise SystemExit(invoke(args, dict(os.environ), settings=settings))


__all__ = ["install_app", "main"]
