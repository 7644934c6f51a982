# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP prober: one request per probe, normalized into a ProbeOutcome."""

from __future__ import annotations

import json
import logging

from ..errors import ErrorCategory, categorize_exception
from ..http.client import HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..models.probe import ProbeOutcome, ProbeTarget

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class Prober:
    """Issues probe requests against ``base_url`` and never raises."""

    def __init__(
        self,
        http_client: HttpClient,
        base_url: str,
        *,
        timeout: float | None = None,
        allow_redirects: bool | None = None,
    ):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.allow_redirects = allow_redirects

    def build_request(self, target: ProbeTarget) -> HttpRequest:
        path = target.path if target.path.startswith("/") else f"/{target.path}"
        body = None if target.body is None else json.dumps(target.body)
        return HttpRequest(
            url=f"{self.base_url}{path}",
            method=target.method.upper(),
            headers=dict(JSON_HEADERS),
            body=body,
            timeout=self.timeout,
            allow_redirects=self.allow_redirects,
        )

    def probe(self, target: ProbeTarget) -> ProbeOutcome:
        try:
            request = self.build_request(target)
        except (TypeError, ValueError) as exc:
            return ProbeOutcome.transport_failure(f"could not encode request body: {exc}")

        try:
            response = self.http_client.request(request)
        except Exception as exc:  # noqa: BLE001
            logger.debug("HTTP client raised for %s %s", request.method, request.url, exc_info=True)
            return ProbeOutcome.transport_failure(str(exc) or type(exc).__name__, categorize_exception(exc))

        return self.to_outcome(response)

    @staticmethod
    def to_outcome(response: HttpResponse) -> ProbeOutcome:
        if not response.ok or response.status_code is None:
            try:
                category = ErrorCategory(response.error_category or ErrorCategory.UNKNOWN_ERROR)
            except ValueError:
                category = ErrorCategory.UNKNOWN_ERROR
            message = response.error_message or "request failed without a response"
            return ProbeOutcome.transport_failure(message, category)
        return ProbeOutcome(status_code=int(response.status_code), body=response.text or "")
