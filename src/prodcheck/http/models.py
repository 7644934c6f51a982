# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the prober."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None
    # None defers to the client-wide setting.
    allow_redirects: bool | None = None


@dataclass
class HttpResponse:
    """
    Tagged result of one HTTP exchange.

    ``ok`` is True whenever a response was received, whatever its status code.
    When ``ok`` is False the request never produced a response and
    ``error_message``/``error_type`` describe the transport failure.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_category: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)
