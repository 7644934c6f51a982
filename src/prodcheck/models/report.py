# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Aggregate report for a smoke-test run."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .probe import ProbeResult


@dataclass(frozen=True)
class AggregateReport:
    """
    Results of one run, in probe declaration order.

    Build with ``from_results`` so the counts and verdict are derived from the
    results instead of being supplied independently.
    """

    results: tuple[ProbeResult, ...]
    passed_count: int
    total_count: int
    overall_success: bool

    @classmethod
    def from_results(cls, results: Iterable[ProbeResult]) -> AggregateReport:
        ordered = tuple(results)
        passed = sum(1 for result in ordered if result.passed)
        total = len(ordered)
        return cls(
            results=ordered,
            passed_count=passed,
            total_count=total,
            overall_success=passed == total,
        )

    @property
    def failed(self) -> tuple[ProbeResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [result.to_dict() for result in self.results],
            "passed_count": self.passed_count,
            "total_count": self.total_count,
            "overall_success": self.overall_success,
        }
