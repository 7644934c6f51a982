# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from prodcheck.http.models import HttpResponse


class StaticChecker:
    def __init__(self, availability=None, error: Exception | None = None):
        self.availability = {"ffmpeg": True, "ffprobe": True} if availability is None else availability
        self.error = error
        self.calls = 0

    def check_availability(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.availability


def healthy_responses() -> dict[str, HttpResponse]:
    return {
        "/health": HttpResponse(ok=True, status_code=200, text='{"status":"ok"}'),
        "/api/models": HttpResponse(ok=True, status_code=200, text="[]"),
        "/index.html": HttpResponse(ok=True, status_code=200, text="<!doctype html><html></html>"),
        "/nonexistent": HttpResponse(ok=True, status_code=404, text="Not Found"),
    }


@pytest.fixture
def make_checker():
    return StaticChecker


@pytest.fixture
def responses():
    return healthy_responses()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "PORT",
        "NO_COLOR",
        "PRODCHECK_HOST",
        "PRODCHECK_STARTUP_DELAY",
        "PRODCHECK_HTTP_TIMEOUT",
        "PRODCHECK_COLOR",
        "PRODCHECK_FFMPEG_PATH",
        "PRODCHECK_FFPROBE_PATH",
        "PRODCHECK_HTTP_REDIRECTS",
        "PRODCHECK_HTTP_MAX_BODY_BYTES",
        "PRODCHECK_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)
