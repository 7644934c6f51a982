# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process capability check for the media tools the service shells out to."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Mapping
from typing import Protocol

from ..errors import FailureKind
from ..models.probe import CapabilityProbeSpec, ProbeResult

logger = logging.getLogger(__name__)


class AvailabilityChecker(Protocol):
    """Reports, per tool name, whether the tool is present and invocable."""

    def check_availability(self) -> Mapping[str, bool]: ...


class MediaToolChecker:
    """Runs ``<tool> -version`` for each configured binary."""

    def __init__(self, binaries: Mapping[str, str] | None = None):
        self.binaries = dict(binaries or {"ffmpeg": "ffmpeg", "ffprobe": "ffprobe"})

    def _is_invocable(self, binary: str) -> bool:
        resolved = shutil.which(binary)
        if resolved is None:
            logger.debug("%s not found on PATH", binary)
            return False
        try:
            result = subprocess.run(  # noqa: S603
                [resolved, "-version"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("%s could not be executed: %s", resolved, exc)
            return False
        return result.returncode == 0

    def check_availability(self) -> dict[str, bool]:
        return {name: self._is_invocable(binary) for name, binary in self.binaries.items()}


class CapabilityProbe:
    """Normalizes an AvailabilityChecker call into a ProbeResult; never raises."""

    def __init__(self, checker: AvailabilityChecker):
        self.checker = checker

    def run(self, spec: CapabilityProbeSpec) -> ProbeResult:
        try:
            availability = self.checker.check_availability()
        except Exception as exc:  # noqa: BLE001
            logger.debug("availability check for %s raised", spec.name, exc_info=True)
            return ProbeResult(
                name=spec.name,
                passed=False,
                error_message=str(exc) or type(exc).__name__,
                failure=FailureKind.COLLABORATOR,
            )

        if not isinstance(availability, Mapping):
            return ProbeResult(
                name=spec.name,
                passed=False,
                error_message=f"unexpected availability response: {availability!r}",
                failure=FailureKind.COLLABORATOR,
            )

        missing = [tool for tool in spec.tools if not availability.get(tool)]
        if missing:
            return ProbeResult(
                name=spec.name,
                passed=False,
                error_message=f"unavailable: {', '.join(missing)}",
                failure=FailureKind.ASSERTION,
            )
        return ProbeResult(name=spec.name, passed=True)
