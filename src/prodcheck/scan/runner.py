# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Sequential execution of the probe list."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..errors import FailureKind
from ..models.probe import CapabilityProbeSpec, HttpProbeSpec, ProbeOutcome, ProbeResult, ProbeSpec
from ..models.report import AggregateReport
from ..probes.capability import CapabilityProbe
from ..probes.http import Prober
from .catalog import build_default_specs

logger = logging.getLogger(__name__)

SpecCallback = Callable[[ProbeSpec], None]
ResultCallback = Callable[[ProbeResult], None]


def judge_http(spec: HttpProbeSpec, outcome: ProbeOutcome) -> ProbeResult:
    """Apply the probe's pass criterion to an observed outcome."""
    if not outcome.transport_ok:
        return ProbeResult(
            name=spec.name,
            passed=False,
            error_message=outcome.error_message or "no response",
            failure=FailureKind.TRANSPORT,
        )
    if spec.predicate(outcome):
        return ProbeResult(name=spec.name, passed=True)
    return ProbeResult(
        name=spec.name,
        passed=False,
        error_message=f"expected {spec.predicate.describe()}, got status {outcome.status_code}",
        failure=FailureKind.ASSERTION,
    )


class SmokeRunner:
    """
    Runs each probe exactly once, one at a time, in declaration order.

    A failing probe never stops the run; every probe yields exactly one result.
    """

    def __init__(
        self,
        prober: Prober,
        capability_probe: CapabilityProbe,
        specs: Iterable[ProbeSpec] | None = None,
    ):
        self.prober = prober
        self.capability_probe = capability_probe
        self.specs: tuple[ProbeSpec, ...] = tuple(specs) if specs is not None else build_default_specs()

    def run_one(self, spec: ProbeSpec) -> ProbeResult:
        try:
            if isinstance(spec, CapabilityProbeSpec):
                return self.capability_probe.run(spec)
            if isinstance(spec, HttpProbeSpec):
                return judge_http(spec, self.prober.probe(spec.target))
            raise TypeError(f"unsupported probe spec: {type(spec).__name__}")
        except Exception as exc:  # noqa: BLE001
            logger.exception("Probe %s failed: %s", getattr(spec, "name", spec), exc)
            return ProbeResult(
                name=str(getattr(spec, "name", spec)),
                passed=False,
                error_message=str(exc) or type(exc).__name__,
                failure=FailureKind.COLLABORATOR,
            )

    def run(
        self,
        *,
        on_start: SpecCallback | None = None,
        on_result: ResultCallback | None = None,
    ) -> AggregateReport:
        results: list[ProbeResult] = []
        for index, spec in enumerate(self.specs):
            if on_start is not None:
                on_start(spec)
            result = self.run_one(spec)
            logger.info(
                "probe %d/%d %s: %s",
                index + 1,
                len(self.specs),
                result.name,
                "passed" if result.passed else f"failed ({result.failure.value})",
            )
            results.append(result)
            if on_result is not None:
                on_result(result)
        return AggregateReport.from_results(results)
