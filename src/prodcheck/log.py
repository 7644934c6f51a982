# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for prodcheck."""

from __future__ import annotations

import logging
import os
import sys

DEFAULT_LOG_LEVEL = os.getenv("PRODCHECK_LOG_LEVEL", "WARNING").upper()
LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR")


def resolve_log_level(level: str | None = None) -> int:
    """Map a level name to a logging constant, falling back to WARNING."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, effective_level, logging.WARNING)


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI use.

    Log records go to stderr; stdout is reserved for the report.
    """
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


__all__ = ["LOG_LEVEL_CHOICES", "resolve_log_level", "setup_logging"]
