# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Console rendering of an AggregateReport."""

from __future__ import annotations

import sys
from typing import TextIO

from ..config import FormatSettings
from ..models.probe import ProbeResult, ProbeSpec
from ..models.report import AggregateReport

PASS_MARK = "✓"
FAIL_MARK = "✗"


def banner(title: str, fmt: FormatSettings) -> str:
    return f"{fmt.yellow}═══ {title} ═══{fmt.reset}"


def progress_line(spec: ProbeSpec) -> str:
    return f"Testing {spec.name}..."


def result_line(result: ProbeResult, fmt: FormatSettings) -> str:
    if result.passed:
        icon = f"{fmt.green}{PASS_MARK}{fmt.reset}"
    else:
        icon = f"{fmt.red}{FAIL_MARK}{fmt.reset}"
    error = f" ({result.error_message})" if result.error_message else ""
    return f"{icon} {result.name}{error}"


def render_report(report: AggregateReport, fmt: FormatSettings | None = None) -> list[str]:
    """Results block, summary and verdict as a list of lines."""
    fmt = fmt or FormatSettings()
    lines = ["", banner("Results", fmt), ""]
    lines.extend(result_line(result, fmt) for result in report.results)
    lines.append("")
    lines.append(banner("Summary", fmt))
    lines.append(f"Passed: {report.passed_count}/{report.total_count}")
    if report.overall_success:
        lines.append(f"{fmt.green}{PASS_MARK} All tests passed!{fmt.reset}")
        lines.append(f"{fmt.green}Production build is working correctly!{fmt.reset}")
    else:
        lines.append(f"{fmt.red}{FAIL_MARK} Some tests failed{fmt.reset}")
    return lines


def print_report(report: AggregateReport, fmt: FormatSettings | None = None, stream: TextIO | None = None) -> None:
    out = stream or sys.stdout
    for line in render_report(report, fmt):
        out.write(line + "\n")
    out.flush()


__all__ = ["banner", "print_report", "progress_line", "render_report", "result_line"]
