# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
prodcheck package entrypoint.

This package smoke-tests a freshly built service: it probes a fixed list of
HTTP endpoints plus the media tools the service depends on, prints a report
and turns the overall verdict into a CI-friendly exit code. HTTP behavior is
abstracted behind an injectable client interface, and domain objects are
modeled with typed dataclasses.
"""

from .config import FormatSettings, HarnessConfigError, HarnessSettings, load_settings
from .exit_codes import exit_code_for, terminate
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import (
    AggregateReport,
    CapabilityProbeSpec,
    HttpProbeSpec,
    ProbeOutcome,
    ProbeResult,
    ProbeTarget,
)
from .probes import (
    AllOf,
    AvailabilityChecker,
    BodyContains,
    CapabilityProbe,
    MediaToolChecker,
    Prober,
    StatusEquals,
    StatusInRange,
)
from .runtime import ProdCheck
from .scan import SmokeRunner, build_default_specs, render_report
from .version import __version__

__all__ = [
    "AggregateReport",
    "AllOf",
    "AvailabilityChecker",
    "BodyContains",
    "CapabilityProbe",
    "CapabilityProbeSpec",
    "FormatSettings",
    "HarnessConfigError",
    "HarnessSettings",
    "HttpClient",
    "HttpProbeSpec",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "MediaToolChecker",
    "ProbeOutcome",
    "ProbeResult",
    "ProbeTarget",
    "ProdCheck",
    "Prober",
    "SmokeRunner",
    "StatusEquals",
    "StatusInRange",
    "StubHttpClient",
    "build_default_specs",
    "create_default_http_client",
    "exit_code_for",
    "load_settings",
    "render_report",
    "setup_logging",
    "terminate",
    "__version__",
]
