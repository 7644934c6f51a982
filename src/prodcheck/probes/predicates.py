# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pass criteria for HTTP probes.

A transport failure never satisfies any criterion, so ``StatusEquals(0)``
cannot accidentally pass an unreachable service.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models.probe import OutcomePredicate, ProbeOutcome


@dataclass(frozen=True)
class StatusInRange:
    """Status code within ``[low, high)``; defaults to any 2xx."""

    low: int = 200
    high: int = 300

    def __call__(self, outcome: ProbeOutcome) -> bool:
        return outcome.transport_ok and self.low <= outcome.status_code < self.high

    def describe(self) -> str:
        if (self.low, self.high) == (200, 300):
            return "status 2xx"
        return f"status in [{self.low}, {self.high})"


@dataclass(frozen=True)
class StatusEquals:
    code: int

    def __call__(self, outcome: ProbeOutcome) -> bool:
        return outcome.transport_ok and outcome.status_code == self.code

    def describe(self) -> str:
        return f"status {self.code}"


@dataclass(frozen=True)
class BodyContains:
    """Literal, case-sensitive substring match on the buffered body."""

    needle: str

    def __call__(self, outcome: ProbeOutcome) -> bool:
        return outcome.transport_ok and self.needle in outcome.body

    def describe(self) -> str:
        return f"body contains {self.needle!r}"


class AllOf:
    def __init__(self, *predicates: OutcomePredicate):
        if not predicates:
            raise ValueError("AllOf requires at least one predicate")
        self.predicates = predicates

    def __call__(self, outcome: ProbeOutcome) -> bool:
        return all(predicate(outcome) for predicate in self.predicates)

    def describe(self) -> str:
        return " and ".join(predicate.describe() for predicate in self.predicates)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AllOf) and self.predicates == other.predicates

    def __hash__(self) -> int:
        return hash(self.predicates)

    def __repr__(self) -> str:
        return f"AllOf{self.predicates!r}"


__all__ = ["AllOf", "BodyContains", "StatusEquals", "StatusInRange"]
