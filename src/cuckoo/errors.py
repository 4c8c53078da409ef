# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error taxonomy shared by the installer, discoverer and launcher."""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import Final

USAGE_EXIT_CODE: Final[int] = 2
LAUNCH_FAILED_EXIT_CODE: Final[int] = 127


class CuckooError(RuntimeError):
    """Base class for failures that terminate an install or invoke operation."""

    default_exit_code: int = 1

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        """Initialise the error with a message and optional exit status.

        Args:
            message: Human-readable description including the paths involved.
            exit_code: Explicit exit status; defaults to ``default_exit_code``.
        """

        super().__init__(message)
        self.exit_code = self.default_exit_code if exit_code is None else exit_code


class NotFoundError(CuckooError):
    """Raised when a path, or the directory containing it, does not exist."""

    default_exit_code = errno.ENOENT

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"'{path}' does not exist ({errno.ENOENT}: {os.strerror(errno.ENOENT)})")


class UnsupportedTypeError(CuckooError):
    """Raised when a filesystem object is not a file, directory or symlink we can use."""

    default_exit_code = errno.EINVAL

    def __init__(self, path: Path | str, kind: str) -> None:
        self.path = Path(path)
        self.kind = kind
        super().__init__(f"'{path}' is a {kind}, which is not supported here")


class NotExecutableError(CuckooError):
    """Raised when the install target cannot be executed by the current process."""

    default_exit_code = errno.EACCES

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"'{path}' is not executable ({errno.EACCES}: {os.strerror(errno.EACCES)})")


class NotADirectoryPathError(CuckooError):
    """Raised when something other than a directory occupies an expected directory path."""

    default_exit_code = errno.ENOTDIR

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"'{path}' exists, but is not a directory")


class FilesystemIOError(CuckooError):
    """Wrap an ``OSError`` raised while mutating or scanning the filesystem."""

    def __init__(
        self,
        operation: str,
        source: Path | str,
        destination: Path | str | None = None,
        *,
        cause: OSError,
    ) -> None:
        """Record the failed operation together with the paths it touched.

        Args:
            operation: Short verb phrase such as ``"move"`` or ``"create"``.
            source: Primary path involved in the operation.
            destination: Secondary path, when the operation involves two.
            cause: Underlying operating-system error.
        """

        self.operation = operation
        self.source = Path(source)
        self.destination = Path(destination) if destination is not None else None
        self.errno = cause.errno
        self.cause = cause
        reason = f"{cause.errno}: {os.strerror(cause.errno)}" if cause.errno else str(cause)
        if self.destination is None:
            message = f"failed to {operation} '{self.source}' ({reason})"
        else:
            message = f"failed to {operation} '{self.source}' to '{self.destination}' ({reason})"
        super().__init__(message, exit_code=cause.errno or None)


class RelinkError(FilesystemIOError):
    """Raised when the original was relocated but the replacement symlink is missing."""

    def __init__(self, target: Path, program: Path, relocated: Path, *, cause: OSError) -> None:
        self.relocated = relocated
        super().__init__("symlink", target, program, cause=cause)
        self.args = (
            f"{self.args[0]}; the original executable now lives at '{relocated}'. "
            f"Finish the installation with: ln -s '{program}' '{target}'",
        )


class LaunchFailedError(CuckooError):
    """Describe a hook that could not be started; carried in a launch result, not raised."""

    default_exit_code = LAUNCH_FAILED_EXIT_CODE

    def __init__(self, executable: Path | str, *, cause: OSError) -> None:
        self.executable = Path(executable)
        self.cause = cause
        reason = f"{cause.errno}: {os.strerror(cause.errno)}" if cause.errno else str(cause)
        super().__init__(f"unable to launch '{executable}' ({reason})")


class UsageError(CuckooError):
    """Raised when the installer is invoked with malformed arguments."""

    default_exit_code = USAGE_EXIT_CODE


__all__ = [
    "CuckooError",
    "FilesystemIOError",
    "LAUNCH_FAILED_EXIT_CODE",
    "LaunchFailedError",
    "NotADirectoryPathError",
    "NotExecutableError",
    "NotFoundError",
    "RelinkError",
    "USAGE_EXIT_CODE",
    "UnsupportedTypeError",
    "UsageError",
]
