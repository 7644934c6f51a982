# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx

from prodcheck.config import HarnessSettings
from prodcheck.http import StubHttpClient, create_default_http_client
from prodcheck.http.httpx_client import HttpxClient
from prodcheck.http.models import HttpRequest, HttpResponse
from prodcheck.models import ProbeTarget
from prodcheck.probes import Prober
from prodcheck.runtime import ProdCheck


def _client(handler, **settings_kwargs) -> HttpxClient:
    settings = HarnessSettings(user_agent="UA/1.0", **settings_kwargs)
    return HttpxClient(settings, client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_httpx_client_buffers_body_and_status():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="<!doctype html><p>ok</p>", headers={"Content-Type": "text/html; charset=utf-8"})

    client = _client(handler)
    resp = client.request(HttpRequest(url="http://localhost:3123/index.html", headers={"Content-Type": "application/json"}))

    assert resp.ok is True
    assert resp.status_code == 200
    assert resp.text == "<!doctype html><p>ok</p>"
    assert resp.meta["body_truncated"] is False
    assert seen[0].headers["User-Agent"] == "UA/1.0"
    assert seen[0].headers["Content-Type"] == "application/json"


def test_httpx_client_error_status_is_still_a_response():
    client = _client(lambda request: httpx.Response(404, text="Not Found"))
    resp = client.request(HttpRequest(url="http://localhost:3123/nonexistent"))
    assert resp.ok is True
    assert resp.status_code == 404
    assert resp.error_message is None


def test_httpx_client_sends_body_and_method():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["body"] = request.content
        return httpx.Response(201)

    client = _client(handler)
    resp = client.request(HttpRequest(url="http://localhost:3123/api/models", method="POST", body='{"a": 1}'))
    assert resp.status_code == 201
    assert captured == {"method": "POST", "body": b'{"a": 1}'}


def test_httpx_client_truncates_large_bodies():
    client = _client(lambda request: httpx.Response(200, content=b"x" * 64), max_body_bytes=16)
    resp = client.request(HttpRequest(url="http://localhost:3123/health"))
    assert resp.ok is True
    assert resp.content == b"x" * 16
    assert resp.meta["body_truncated"] is True


def test_httpx_client_converts_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)

    client = _client(handler)
    resp = client.request(HttpRequest(url="http://localhost:3123/health"))
    assert resp.ok is False
    assert resp.status_code is None
    assert resp.error_message == "[Errno 111] Connection refused"
    assert resp.error_type == "ConnectError"
    assert resp.error_category == "CONNECTION_ERROR"


def test_httpx_client_passes_no_timeout_by_default(monkeypatch):
    calls = []

    class RecordingClient:
        def __init__(self, follow_redirects, timeout):
            calls.append({"follow_redirects": follow_redirects, "timeout": timeout})

        def close(self):
            calls.append({"closed": True})

    monkeypatch.setattr(httpx, "Client", RecordingClient)
    client = HttpxClient(HarnessSettings())
    client.close()
    assert calls[0] == {"follow_redirects": False, "timeout": None}
    assert calls[-1] == {"closed": True}


def test_create_default_http_client_uses_settings():
    settings = HarnessSettings(timeout=3.0)
    client = create_default_http_client(settings)
    try:
        assert isinstance(client, HttpxClient)
        assert client.settings is settings
    finally:
        client.close()


def test_stub_client_matches_by_path_and_records_requests():
    ok = HttpResponse(ok=True, status_code=200)
    client = StubHttpClient({"/health": ok})
    assert client.request(HttpRequest(url="http://localhost:3123/health")) is ok
    missing = client.request(HttpRequest(url="http://localhost:3123/other"))
    assert missing.ok is False
    assert [r.url for r in client.requests] == ["http://localhost:3123/health", "http://localhost:3123/other"]
    client.close()
    assert client.closed is True


def _redirecting_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/health":
        return httpx.Response(302, headers={"Location": "/healthz"})
    return httpx.Response(200, text="ok")


def test_redirect_setting_from_env_reaches_the_prober(monkeypatch):
    monkeypatch.setenv("PRODCHECK_HTTP_REDIRECTS", "yes")
    settings = HarnessSettings.from_env()
    transport_client = httpx.Client(transport=httpx.MockTransport(_redirecting_handler))
    harness = ProdCheck(settings, http_client=HttpxClient(settings, client=transport_client))

    outcome = harness.prober.probe(ProbeTarget("/health"))

    assert outcome.status_code == 200
    assert outcome.body == "ok"
    harness.close()


def test_redirects_not_followed_by_default():
    settings = HarnessSettings()
    client = HttpxClient(settings, client=httpx.Client(transport=httpx.MockTransport(_redirecting_handler)))
    outcome = Prober(client, settings.base_url).probe(ProbeTarget("/health"))
    assert outcome.status_code == 302


def test_request_level_redirect_flag_overrides_settings():
    client = _client(_redirecting_handler, allow_redirects=True)
    resp = client.request(HttpRequest(url="http://localhost:3123/health", allow_redirects=False))
    assert resp.status_code == 302
    followed = client.request(HttpRequest(url="http://localhost:3123/health"))
    assert followed.status_code == 200


def test_httpx_client_warns_when_body_is_cut(caplog):
    client = _client(lambda request: httpx.Response(200, content=b"y" * 40), max_body_bytes=10)
    with caplog.at_level("WARNING", logger="prodcheck.http.httpx_client"):
        resp = client.request(HttpRequest(url="http://localhost:3123/index.html"))
    assert resp.text == "y" * 10
    assert "body cut at 10 bytes" in caplog.text


def test_httpx_client_does_not_warn_for_full_body(caplog):
    client = _client(lambda request: httpx.Response(200, content=b"short"), max_body_bytes=10)
    with caplog.at_level("WARNING", logger="prodcheck.http.httpx_client"):
        resp = client.request(HttpRequest(url="http://localhost:3123/health"))
    assert resp.meta["body_truncated"] is False
    assert caplog.text == ""
