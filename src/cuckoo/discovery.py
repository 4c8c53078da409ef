# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Discover hook executables in the per-target and common hook directories."""

from __future__ import annotations

import locale
import logging
import os
from pathlib import Path

from .config import CuckooSettings
from .errors import FilesystemIOError, NotADirectoryPathError
from .models import HookEntry, HookSequence, ResolvedPath
from .paths import hook_dir_for

LOGGER = logging.getLogger(__name__)


def hook_directories(resolved: ResolvedPath, settings: CuckooSettings) -> tuple[Path, Path]:
    """Return the ``(per_target, common)`` hook directories for an invoked name.

    Args:
        resolved: Location the program was invoked through.
        settings: Runtime settings providing the common hook root.

    Returns:
        tuple[Path, Path]: ``D/.N.d`` and ``<common_root>/N``.
    """

    return hook_dir_for(resolved), settings.common_root / resolved.name


def _is_hook(entry: os.DirEntry[str]) -> bool:
    try:
        if entry.is_dir():
            return False
    except OSError:
        return False
    return os.access(entry.path, os.X_OK)


def scan_directory(directory: Path) -> list[HookEntry]:
    """Return executables found directly inside ``directory``, in listing order.

    Subdirectories are skipped without being descended into. A missing
    directory contributes no entries.

    Raises:
        NotADirectoryPathError: If ``directory`` exists but is not a directory.
        FilesystemIOError: If the directory cannot be listed.
    """

    try:
        with os.scandir(directory) as entries:
            hooks = [
                HookEntry(full_path=Path(entry.path), sort_key=entry.name)
                for entry in entries
                if _is_hook(entry)
            ]
    except FileNotFoundError:
        LOGGER.debug("hook directory '%s' does not exist", directory)
        return []
    except NotADirectoryError as exc:
        raise NotADirectoryPathError(directory) from exc
    except OSError as exc:
        raise FilesystemIOError("scan", directory, cause=exc) from exc
    LOGGER.debug("found %d hook(s) in '%s'", len(hooks), directory)
    return hooks


def discover(per_target_dir: Path, common_dir: Path) -> HookSequence:
    """Merge the hooks of both directories into one collation-ordered sequence.

    Entries are sorted by base name using the process ``LC_COLLATE`` locale.
    Identical names from both directories are all kept, per-target first.

    Args:
        per_target_dir: Hidden directory dedicated to the invoked name.
        common_dir: Shared, externally provisioned directory for the same name.

    Returns:
        HookSequence: Hooks in launch order; empty when neither directory has any.
    """

    collected = scan_directory(per_target_dir) + scan_directory(common_dir)
    ordered = sorted(collected, key=lambda entry: locale.strxfrm(entry.sort_key))
    return HookSequence(entries=tuple(ordered))


__all__ = ["discover", "hook_directories", "scan_directory"]
