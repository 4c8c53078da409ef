# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Console reporting for the installer command."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from rich.console import Console
from rich.text import Text

from ..errors import CuckooError, FilesystemIOError
from ..models import InstallResult

USAGE_GUIDANCE: Final[str] = (
    "Usage: cuckoo <pathname>\n"
    "  Creates a subdirectory and moves the executable found at <pathname> into it.\n"
    "  A symlink is then created at <pathname> that points to this executable.\n"
    "  When this executable is invoked through the symlink, it goes through the\n"
    "  subdirectory in alphabetical order, executing every executable it finds\n"
    "  there, with the same command line parameters and environment it was\n"
    "  invoked with through the symlink. This allows multiple executables to\n"
    "  be executed transparently each time the original <pathname> executable\n"
    "  would have been invoked before these changes were made."
)


@dataclass(slots=True)
class InstallReporter:
    """Render the outcome of one ``cuckoo <pathname>`` run."""

    use_emoji: bool = True
    debug_enabled: bool = False
    console: Console = field(default_factory=lambda: Console(highlight=False, soft_wrap=True))

    def _line(self, glyph: str, message: str, style: str) -> None:
        prefix = f"{glyph} " if self.use_emoji else ""
        self.console.print(Text(f"{prefix}{message}", style=style))

    def installed(self, result: InstallResult) -> None:
        """Report a completed relocation and where its hooks now live."""

        self._line("✅", f"Installed '{result.program}' to '{result.target}' successfully.", "green")
        self.console.print(Text(f"The script directory can be found at '{result.hook_dir}'"))
        self.debug(f"relocated={result.relocated}")

    def unchanged(self, result: InstallResult) -> None:
        self._line("ℹ️", f"'{result.target}' is already a symlink; nothing to do.", "cyan")

    def failed(self, exc: CuckooError) -> None:
        """Report ``exc``; validation failures are followed by the usage text.

        Filesystem failures are printed without the usage text.
        """

        self._line("❌", f"err: {exc}", "red")
        if not isinstance(exc, FilesystemIOError):
            self.console.print(Text(USAGE_GUIDANCE))

    def debug(self, message: str) -> None:
        if self.debug_enabled:
            text = Text("[debug] ", style="bold cyan")
            text.append(message, style="dim")
            self.console.print(text)


__all__ = ["InstallReporter", "USAGE_GUIDANCE"]
