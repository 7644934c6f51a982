# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import HarnessSettings, load_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

DEFAULT_MAX_BODY_BYTES = 16 * 1024 * 1024


def read_capped(resp: httpx.Response, limit: int) -> tuple[bytes, bool]:
    """Buffer a streamed body up to ``limit`` bytes; the flag reports a cut."""
    buffer = bytearray()
    for chunk in resp.iter_bytes():
        room = limit - len(buffer)
        if len(chunk) > room:
            buffer.extend(chunk[:room])
            return bytes(buffer), True
        buffer.extend(chunk)
    return bytes(buffer), False


def decode_body(content: bytes, encoding: str | None) -> str:
    try:
        return content.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        return content.decode("utf-8", errors="replace")


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: HarnessSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
        )

    @property
    def max_body_bytes(self) -> int:
        return self.settings.max_body_bytes if self.settings.max_body_bytes > 0 else DEFAULT_MAX_BODY_BYTES

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        follow = request.allow_redirects if request.allow_redirects is not None else self.settings.allow_redirects
        limit = self.max_body_bytes

        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=timeout,
                follow_redirects=follow,
            ) as resp:
                content, truncated = read_capped(resp, limit)
                text = decode_body(content, resp.encoding)
        except Exception as exc:  # noqa: BLE001
            logger.debug("%s %s failed: %r", request.method, request.url, exc)
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                error_category=categorize_exception(exc).value,
            )

        if truncated:
            logger.warning("%s %s: body cut at %d bytes", request.method, request.url, limit)
        return HttpResponse(
            ok=True,
            status_code=resp.status_code,
            headers=dict(resp.headers),
            text=text,
            content=content,
            url=str(resp.url),
            meta={"body_truncated": truncated, "body_bytes_read": len(content)},
        )

    def close(self) -> None:
        self._client.close()
