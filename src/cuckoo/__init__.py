# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Transparent executable interception through ordered hook directories."""

from __future__ import annotations

from .discovery import discover
from .dispatch import InvocationMode, invoke
from .installer import install
from .launcher import launch
from .paths import resolve

__version__ = "0.3.0"

__all__ = [
    "InvocationMode",
    "discover",
    "install",
    "invoke",
    "launch",
    "resolve",
    "__version__",
]
