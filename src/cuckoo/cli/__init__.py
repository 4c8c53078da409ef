# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line entry points."""

from __future__ import annotations

from .app import install_app, main

__all__ = ["install_app", "main"]
