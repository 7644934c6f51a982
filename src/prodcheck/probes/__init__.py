# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe implementations: HTTP prober, capability check and pass criteria."""

from .capability import AvailabilityChecker, CapabilityProbe, MediaToolChecker
from .http import Prober
from .predicates import AllOf, BodyContains, StatusEquals, StatusInRange

__all__ = [
    "AllOf",
    "AvailabilityChecker",
    "BodyContains",
    "CapabilityProbe",
    "MediaToolChecker",
    "Prober",
    "StatusEquals",
    "StatusInRange",
]
