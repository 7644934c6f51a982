# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe sequencing and report rendering."""

from .catalog import build_default_specs
from .report import print_report, render_report
from .runner import SmokeRunner, judge_http

__all__ = [
    "SmokeRunner",
    "build_default_specs",
    "judge_http",
    "print_report",
    "render_report",
]
