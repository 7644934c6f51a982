# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe definition and result models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from ..errors import ErrorCategory, FailureKind


@dataclass(frozen=True)
class ProbeTarget:
    """Where an HTTP probe is sent; ``body`` is serialized as JSON when present."""

    path: str
    method: str = "GET"
    body: Any = None


@dataclass(frozen=True)
class ProbeOutcome:
    """Raw observation of one HTTP probe. ``status_code`` is 0 when no response arrived."""

    status_code: int
    body: str = ""
    error_message: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE

    @property
    def transport_ok(self) -> bool:
        return self.error_message is None and self.status_code > 0

    @classmethod
    def transport_failure(cls, message: str, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR) -> ProbeOutcome:
        return cls(status_code=0, body="", error_message=message, error_category=category)


class OutcomePredicate(Protocol):
    """Pass criterion attached to an HTTP probe."""

    def __call__(self, outcome: ProbeOutcome) -> bool: ...

    def describe(self) -> str: ...


@dataclass(frozen=True)
class HttpProbeSpec:
    name: str
    target: ProbeTarget
    predicate: OutcomePredicate


@dataclass(frozen=True)
class CapabilityProbeSpec:
    name: str
    tools: tuple[str, ...] = ("ffmpeg", "ffprobe")


ProbeSpec = HttpProbeSpec | CapabilityProbeSpec


@dataclass(frozen=True)
class ProbeResult:
    name: str
    passed: bool
    error_message: str | None = None
    failure: FailureKind = FailureKind.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "passed", bool(self.passed))
        if self.passed:
            object.__setattr__(self, "failure", FailureKind.NONE)
        elif self.failure == FailureKind.NONE:
            object.__setattr__(self, "failure", FailureKind.ASSERTION)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "passed": self.passed,
            "error_message": self.error_message,
            "failure": self.failure.value,
        }
