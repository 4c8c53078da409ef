# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from cuckoo.config import CuckooSettings
from cuckoo.logging import ROOT_LOGGER_NAME

HookFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def _reset_cuckoo_logger() -> Iterator[None]:
    """Undo ``configure_logging`` so every test starts with a propagating logger."""

    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    if hasattr(logger, "_cuckoo_configured"):
        delattr(logger, "_cuckoo_configured")


@pytest.fixture
def settings(tmp_path: Path) -> CuckooSettings:
    """Return settings whose common hook root lives inside ``tmp_path``."""

    return CuckooSettings(common_root=tmp_path / "etc" / "cuckoo")


@pytest.fixture
def make_hook() -> HookFactory:
    """Return a factory writing ``#!/bin/sh`` scripts into a directory."""

    def _make(directory: Path, name: str, body: str = "exit 0\n", *, mode: int = 0o755) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(f"#!/bin/sh\n{body}", encoding="utf-8")
        path.chmod(mode)
        return path

    return _make


@pytest.fixture
def program(tmp_path: Path) -> Path:
    """Return a stand-in for the installed cuckoo executable."""

    location = tmp_path / "opt" / "cuckoo"
    location.parent.mkdir(parents=True)
    location.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    location.chmod(0o755)
    return location
