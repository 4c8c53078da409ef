# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run a single hook as a child process and report how it ended."""

from __future__ import annotations

import logging

# Bandit: subprocess usage is intentional; hooks are executed directly from
# their absolute paths without shell expansion.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final

from .errors import LAUNCH_FAILED_EXIT_CODE, LaunchFailedError
from .models import LaunchResult

LOGGER = logging.getLogger(__name__)

SIGNAL_EXIT_BASE: Final[int] = 128


def exit_code_from_returncode(returncode: int) -> int:
    """Map a ``Popen.returncode`` onto a process exit status.

    Negative values mean the child was killed by that signal; they become
    ``128 + signal`` as a POSIX shell reports them.
    """

    if returncode < 0:
        return SIGNAL_EXIT_BASE - returncode
    return returncode


def launch(executable: Path, argv: Sequence[str], env: Mapping[str, str]) -> LaunchResult:
    """Run ``executable`` with the caller's arguments and environment and wait for it.

    ``argv[0]`` is replaced by ``executable`` so the hook sees its own path;
    every other argument and the whole environment pass through unchanged.
    Standard streams are inherited and no timeout applies.

    Args:
        executable: Absolute path of the hook to run.
        argv: Argument vector the intercepted program received.
        env: Environment the intercepted program received.

    Returns:
        LaunchResult: Exit status, or ``127`` plus the error when the hook
        could not be started.
    """

    command = [str(executable), *argv[1:]]
    LOGGER.debug("launching '%s' with %d argument(s)", executable, len(command) - 1)
    try:
        # Bandit: the executable comes from a trusted hook directory and is run
        # without a shell.
        completed = subprocess.run(  # nosec B603
            command,
            env=dict(env),
            check=False,
        )
    except OSError as exc:
        error = LaunchFailedError(executable, cause=exc)
        LOGGER.error("%s", error)
        return LaunchResult(exit_code=LAUNCH_FAILED_EXIT_CODE, launch_error=error)

    exit_code = exit_code_from_returncode(completed.returncode)
    if completed.returncode < 0:
        LOGGER.warning("'%s' was terminated by signal %d", executable, -completed.returncode)
    elif exit_code:
        LOGGER.info("'%s' exited with status %d", executable, exit_code)
    return LaunchResult(exit_code=exit_code)


__all__ = ["SIGNAL_EXIT_BASE", "exit_code_from_returncode", "launch"]
