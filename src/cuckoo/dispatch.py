# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Select the operating mode and run every discovered hook for an intercepted name."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from enum import StrEnum

from .config import CuckooSettings
from .discovery import discover, hook_directories
from .errors import CuckooError
from .launcher import launch
from .paths import locate_program, resolve

LOGGER = logging.getLogger(__name__)


class InvocationMode(StrEnum):
    """How the program was invoked, decided once from the base name of ``argv[0]``."""

    INSTALL = "install"
    INVOKE = "invoke"

    @classmethod
    def detect(cls, argv0: str, settings: CuckooSettings) -> InvocationMode:
        """Return ``INSTALL`` when invoked under the installer name, else ``INVOKE``.

        Args:
            argv0: ``argv[0]`` as received by the process.
            settings: Runtime settings naming the installer.

        Returns:
            InvocationMode: The mode for the lifetime of this process.
        """

        if os.path.basename(argv0) == settings.installer_name:
            return cls.INSTALL
        return cls.INVOKE


def invoke(argv: Sequence[str], env: Mapping[str, str], *, settings: CuckooSettings) -> int:
    """Run every hook registered for the name in ``argv[0]`` and aggregate their status.

    Hooks run one at a time in collation order. Every hook is attempted even
    after a failure; the first non-zero status is the result.

    Args:
        argv: Argument vector received through the intercepting symlink.
        env: Environment received through the intercepting symlink.
        settings: Runtime settings providing the common hook root.

    Returns:
        int: First non-zero hook status, ``0`` when all succeeded or none
        exist, or the error's exit code when the hooks could not be located.
    """

    try:
        resolved = resolve(locate_program(argv[0]))
        per_target_dir, common_dir = hook_directories(resolved, settings)
        hooks = discover(per_target_dir, common_dir)
    except CuckooError as exc:
        LOGGER.error("%s", exc)
        return exc.exit_code

    if not hooks:
        LOGGER.debug("no hooks found for '%s'", resolved.absolute_path)
        return 0

    result = 0
    for hook in hooks:
        outcome = launch(hook.full_path, argv, env)
        if result == 0 and outcome.exit_code != 0:
            result = outcome.exit_code
    return result


__all__ = ["InvocationMode", "invoke"]
