# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level prodcheck facade wiring the prober, capability check and runner."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from contextlib import suppress

from .config import HarnessSettings, load_settings
from .http.client import HttpClient, create_default_http_client
from .models.probe import ProbeSpec
from .models.report import AggregateReport
from .probes.capability import AvailabilityChecker, CapabilityProbe, MediaToolChecker
from .probes.http import Prober
from .scan.runner import ResultCallback, SmokeRunner, SpecCallback

logger = logging.getLogger(__name__)


class ProdCheck:
    """
    Runs the smoke-test pass against one service instance.

    The HTTP client is created once and shared by every HTTP probe; it is
    closed when the facade is closed or used as a context manager.
    """

    def __init__(
        self,
        settings: HarnessSettings | None = None,
        *,
        http_client: HttpClient | None = None,
        checker: AvailabilityChecker | None = None,
        specs: Iterable[ProbeSpec] | None = None,
    ):
        self.settings = (settings or load_settings()).validate()
        self.http_client = http_client or create_default_http_client(self.settings)
        self.checker = checker or MediaToolChecker(
            {"ffmpeg": self.settings.ffmpeg_path, "ffprobe": self.settings.ffprobe_path}
        )
        self.prober = Prober(
            self.http_client,
            self.settings.base_url,
            timeout=self.settings.timeout,
            allow_redirects=self.settings.allow_redirects,
        )
        self.runner = SmokeRunner(self.prober, CapabilityProbe(self.checker), specs)

    def wait_for_startup(self) -> None:
        delay = self.settings.startup_delay
        if delay > 0:
            logger.debug("waiting %.2fs for %s to finish starting", delay, self.settings.base_url)
            time.sleep(delay)

    def run(
        self,
        *,
        on_start: SpecCallback | None = None,
        on_result: ResultCallback | None = None,
    ) -> AggregateReport:
        self.wait_for_startup()
        return self.runner.run(on_start=on_start, on_result=on_result)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> ProdCheck:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
