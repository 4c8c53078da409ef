# SPDX-License-Identifier: MIT
"""Data structures for the installer command."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import CuckooSettings, load_settings
from ..errors import UsageError
from ..paths import locate_program

TARGET_ARGUMENT = Annotated[
    str,
    typer.Argument(
        metavar="PATHNAME",
        help="Executable to intercept.",
        show_default=False,
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print debug details while installing."),
]


@dataclass(frozen=True, slots=True)
class ProgramContext:
    """Where the running program lives and the settings it was started with."""

    program: Path
    settings: CuckooSettings

    @classmethod
    def from_argv0(cls, argv0: str, settings: CuckooSettings | None = None) -> ProgramContext:
        """Build a context for the program invoked as ``argv0``."""

        return cls(
            program=locate_program(argv0).resolve(),
            settings=settings if settings is not None else load_settings(),
        )

    @classmethod
    def current(cls) -> ProgramContext:
        """Build a context for this process from :data:`sys.argv`."""

        return cls.from_argv0(sys.argv[0])


@dataclass(slots=True)
class InstallCLIOptions:
    """Capture CLI options for the installer."""

    target: Path
    emoji: bool
    debug: bool

    @classmethod
    def from_cli(cls, target: str, *, emoji: bool, debug: bool) -> InstallCLIOptions:
        """Return options parsed from CLI arguments.

        Raises:
            UsageError: If the target path is empty.
        """

        if not target.strip():
            raise UsageError("please provide the path to the executable to intercept")
        return cls(target=Path(target), emoji=emoji, debug=debug)


__all__ = [
    "DEBUG_OPTION",
    "EMOJI_OPTION",
    "InstallCLIOptions",
    "ProgramContext",
    "TARGET_ARGUMENT",
]
