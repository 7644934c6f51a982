# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Process exit codes: the only machine-readable output of a run."""

from __future__ import annotations

from typing import NoReturn

from .models.report import AggregateReport

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def exit_code_for(report: AggregateReport) -> int:
    return EXIT_OK if report.overall_success else EXIT_FAILED


def terminate(report: AggregateReport) -> NoReturn:
    raise SystemExit(exit_code_for(report))


__all__ = ["EXIT_FAILED", "EXIT_OK", "EXIT_USAGE", "exit_code_for", "terminate"]
