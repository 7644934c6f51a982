# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for prodcheck."""

from .probe import (
    CapabilityProbeSpec,
    HttpProbeSpec,
    OutcomePredicate,
    ProbeOutcome,
    ProbeResult,
    ProbeSpec,
    ProbeTarget,
)
from .report import AggregateReport

__all__ = [
    "AggregateReport",
    "CapabilityProbeSpec",
    "HttpProbeSpec",
    "OutcomePredicate",
    "ProbeOutcome",
    "ProbeResult",
    "ProbeSpec",
    "ProbeTarget",
]
