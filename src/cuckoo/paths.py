# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for turning raw path strings into canonical, split paths."""

from __future__ import annotations

import errno
import os
import shutil
import stat
from os import PathLike
from pathlib import Path

from .errors import FilesystemIOError, NotFoundError, UnsupportedTypeError
from .models import ResolvedPath

_Pathish = str | PathLike[str] | Path

_MISSING_ERRNOS = frozenset({errno.ENOENT, errno.ENOTDIR, errno.ELOOP})


def _describe_mode(mode: int) -> str:
    if stat.S_ISFIFO(mode):
        return "named pipe"
    if stat.S_ISSOCK(mode):
        return "socket"
    if stat.S_ISCHR(mode):
        return "character device"
    if stat.S_ISBLK(mode):
        return "block device"
    return "special file"


def _inspect_failure(exc: OSError, original: _Pathish) -> NotFoundError | FilesystemIOError:
    if exc.errno in _MISSING_ERRNOS:
        return NotFoundError(original)
    return FilesystemIOError("inspect", original, cause=exc)


def _canonical_directory(directory: Path, original: _Pathish) -> Path:
    try:
        return directory.resolve(strict=True)
    except OSError as exc:
        raise _inspect_failure(exc, original) from exc


def resolve(path: _Pathish) -> ResolvedPath:
    """Return ``path`` as an absolute, canonical directory plus base name.

    A symbolic link keeps its literal base name and only its parent directory
    is canonicalised, so the link itself is never followed. Regular files and
    directories are canonicalised in full; a directory yields an empty name.

    Args:
        path: Absolute or relative path, possibly through symbolic links.

    Returns:
        ResolvedPath: Immutable split view of the canonical path.

    Raises:
        NotFoundError: If the path or its parent directory does not exist.
            A symlink loop counts as missing.
        FilesystemIOError: If the path cannot be inspected for any other reason,
            such as a directory the process may not search.
        UnsupportedTypeError: If the path is neither file, directory nor symlink.
    """

    raw = Path(os.fspath(path)).expanduser()
    try:
        mode = raw.lstat().st_mode
    except OSError as exc:
        raise _inspect_failure(exc, path) from exc

    if stat.S_ISLNK(mode):
        directory = _canonical_directory(raw.absolute().parent, path)
        name = raw.absolute().name
        return ResolvedPath(
            absolute_path=directory / name,
            directory=directory,
            name=name,
            is_symlink=True,
        )

    if stat.S_ISDIR(mode):
        directory = _canonical_directory(raw, path)
        return ResolvedPath(absolute_path=directory, directory=directory, name="")

    if stat.S_ISREG(mode):
        canonical = _canonical_directory(raw, path)
        return ResolvedPath(absolute_path=canonical, directory=canonical.parent, name=canonical.name)

    raise UnsupportedTypeError(path, _describe_mode(mode))


def hook_dir_for(resolved: ResolvedPath) -> Path:
    """Return the hidden per-target hook directory ``D/.N.d`` for ``resolved``."""

    return resolved.directory / f".{resolved.name}.d"


def locate_program(argv0: str) -> Path:
    """Return the absolute location the running program was invoked through.

    A bare name without a separator is looked up on ``PATH`` the way a shell
    would have found it. The final component is not resolved, so a symlink
    invocation keeps the symlink's own location. Neither is ``..`` collapsed
    textually: ``link/..`` means whatever the kernel made of it, so it is
    left for :func:`resolve` to canonicalise.

    Args:
        argv0: ``argv[0]`` as received by the process.

    Returns:
        Path: Absolute path, otherwise as given.

    Raises:
        NotFoundError: If a bare name cannot be found on ``PATH``.
    """

    candidate = argv0
    if os.sep not in argv0:
        found = shutil.which(argv0)
        if found is None:
            raise NotFoundError(argv0)
        candidate = found
    return Path(candidate).absolute()


__all__ = ["hook_dir_for", "locate_program", "resolve"]
