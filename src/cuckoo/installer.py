# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Relocate an executable into its hook directory and link the original name to us."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .config import CuckooSettings
from .errors import (
    FilesystemIOError,
    NotADirectoryPathError,
    NotExecutableError,
    RelinkError,
    UnsupportedTypeError,
)
from .models import InstallResult, ResolvedPath
from .paths import hook_dir_for, resolve

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InstallLayout:
    """Describe filesystem locations touched while installing one target."""

    target: Path
    hook_dir: Path
    relocated: Path


def install(target: str | os.PathLike[str], *, program: Path, settings: CuckooSettings) -> InstallResult:
    """Intercept ``target`` so that invoking it runs ``program`` instead.

    The executable is moved to ``D/.N.d/<ordinal>-N`` and a symbolic link to
    ``program`` takes its place. A target that is already a symbolic link is
    left alone and reported as installed.

    Args:
        target: Path of the executable to intercept.
        program: Path of the running cuckoo program; the link points at its
            canonical form.
        settings: Runtime settings providing the relocation ordinal.

    Returns:
        InstallResult: Paths involved in the installation.

    Raises:
        NotFoundError: If ``target`` does not exist.
        UnsupportedTypeError: If ``target`` is not a regular file.
        NotExecutableError: If the current process may not execute ``target``.
        NotADirectoryPathError: If the hook directory path is occupied.
        FilesystemIOError: If creating the directory or moving the file fails.
        RelinkError: If the file moved but the replacement link was not created.
    """

    resolved = resolve(target)
    program = program.resolve()
    if resolved.is_symlink:
        LOGGER.info("'%s' is already a symlink, nothing to do", resolved.absolute_path)
        return InstallResult(
            program=program,
            target=resolved.absolute_path,
            hook_dir=hook_dir_for(resolved),
            already_installed=True,
        )

    layout = _plan_layout(resolved, settings)
    _ensure_hook_dir(layout.hook_dir)
    _relocate(layout)
    _link_to_program(layout, program)
    LOGGER.info("installed '%s' over '%s', hooks in '%s'", program, layout.target, layout.hook_dir)
    return InstallResult(
        program=program,
        target=layout.target,
        hook_dir=layout.hook_dir,
        relocated=layout.relocated,
    )


def _plan_layout(resolved: ResolvedPath, settings: CuckooSettings) -> InstallLayout:
    """Validate the target and compute where everything will live."""

    if not resolved.name:
        raise UnsupportedTypeError(resolved.absolute_path, "directory")
    if not os.access(resolved.absolute_path, os.X_OK):
        raise NotExecutableError(resolved.absolute_path)

    hook_dir = hook_dir_for(resolved)
    return InstallLayout(
        target=resolved.absolute_path,
        hook_dir=hook_dir,
        relocated=hook_dir / settings.relocation_name(resolved.name),
    )


def _ensure_hook_dir(hook_dir: Path) -> None:
    if hook_dir.is_dir():
        return
    if hook_dir.exists() or hook_dir.is_symlink():
        raise NotADirectoryPathError(hook_dir)
    try:
        hook_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    except FileExistsError as exc:
        raise NotADirectoryPathError(hook_dir) from exc
    except OSError as exc:
        raise FilesystemIOError("create", hook_dir, cause=exc) from exc
    LOGGER.debug("created hook directory '%s'", hook_dir)


def _relocate(layout: InstallLayout) -> None:
    """Move the original executable into its hook directory without overwriting.

    The move is a hard link followed by an unlink. ``link`` fails with
    ``EEXIST`` when the destination exists, including one created concurrently,
    so an existing relocated file is never replaced.
    """

    try:
        os.link(layout.target, layout.relocated)
    except OSError as exc:
        raise FilesystemIOError("move", layout.target, layout.relocated, cause=exc) from exc
    try:
        os.unlink(layout.target)
    except OSError as exc:
        layout.relocated.unlink(missing_ok=True)
        raise FilesystemIOError("move", layout.target, layout.relocated, cause=exc) from exc


def _link_to_program(layout: InstallLayout, program: Path) -> None:
    try:
        layout.target.symlink_to(program)
    except OSError as exc:
        LOGGER.error(
            "'%s' was moved to '%s' but the symlink to '%s' could not be created",
            layout.target,
            layout.relocated,
            program,
        )
        raise RelinkError(layout.target, program, layout.relocated, cause=exc) from exc


__all__ = ["InstallLayout", "install"]
