# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The fixed, ordered probe list for a production build."""

from __future__ import annotations

from ..models.probe import CapabilityProbeSpec, HttpProbeSpec, ProbeSpec, ProbeTarget
from ..probes.predicates import AllOf, BodyContains, StatusEquals, StatusInRange

HTML_DOCTYPE_MARKER = "<!doctype html>"


def build_default_specs() -> tuple[ProbeSpec, ...]:
    return (
        HttpProbeSpec("Health endpoint", ProbeTarget("/health"), StatusInRange()),
        HttpProbeSpec("Models API", ProbeTarget("/api/models"), StatusInRange()),
        HttpProbeSpec(
            "Client serving",
            ProbeTarget("/index.html"),
            AllOf(StatusInRange(), BodyContains(HTML_DOCTYPE_MARKER)),
        ),
        CapabilityProbeSpec("FFmpegUtils", tools=("ffmpeg", "ffprobe")),
        HttpProbeSpec("404 handling", ProbeTarget("/nonexistent"), StatusEquals(404)),
    )


__all__ = ["HTML_DOCTYPE_MARKER", "build_default_specs"]
