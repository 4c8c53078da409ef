# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dataclasses describing resolved paths, discovered hooks and operation outcomes."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import LaunchFailedError


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """Absolute path split into its canonical directory and literal base name.

    ``name`` is empty when the path designates a directory, in which case
    ``absolute_path`` equals ``directory``.
    """

    absolute_path: Path
    directory: Path
    name: str
    is_symlink: bool = False


@dataclass(frozen=True, slots=True)
class HookEntry:
    """Executable discovered directly inside a hook directory."""

    full_path: Path
    sort_key: str


@dataclass(frozen=True, slots=True)
class HookSequence(Sequence[HookEntry]):
    """Hooks in the order they will be launched."""

    entries: tuple[HookEntry, ...] = ()

    def __getitem__(self, index):  # type: ignore[override]
        return self.entries[index]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[HookEntry]:
        return iter(self.entries)

    @property
    def names(self) -> tuple[str, ...]:
        """Return the hook base names in launch order."""

        return tuple(entry.sort_key for entry in self.entries)


@dataclass(frozen=True, slots=True)
class LaunchResult:
    """Exit status of one hook, plus the error when it never started."""

    exit_code: int
    launch_error: LaunchFailedError | None = None

    @property
    def launched(self) -> bool:
        return self.launch_error is None


@dataclass(frozen=True, slots=True)
class InstallResult:
    """Outcome reported by the installer.

    Attributes:
        program: Canonical path of the running program the link points at.
        target: Original location of the intercepted executable.
        hook_dir: Per-target hook directory.
        relocated: New home of the original executable, ``None`` for a no-op.
        already_installed: ``True`` when the target was already a symlink.
    """

    program: Path
    target: Path
    hook_dir: Path
    relocated: Path | None = None
    already_installed: bool = False


__all__ = ["HookEntry", "HookSequence", "InstallResult", "LaunchResult", "ResolvedPath"]
