# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient keyed by request path or full URL."""

    def __init__(self, responses: dict[str, HttpResponse] | None = None, *, default: HttpResponse | None = None):
        self._responses = responses or {}
        self._default = default
        self.requests: list[HttpRequest] = []
        self.closed = False

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if request.url in self._responses:
            return self._responses[request.url]
        for key, response in self._responses.items():
            if key.startswith("/") and request.url.endswith(key):
                return response
        if self._default is not None:
            return self._default
        return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")

    def close(self) -> None:
        self.closed = True
