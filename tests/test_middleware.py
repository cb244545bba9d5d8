"""Tests for the CSP headers middleware."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, PlainTextResponse, Response
from starlette.routing import Route
from starlette.testclient import TestClient

from shield_csp.config.loader import CspSettings
from shield_csp.directive import Directive
from shield_csp.exceptions import InvalidCspPolicy
from shield_csp.keyword import Keyword
from shield_csp.middleware.csp_headers import CspHeadersMiddleware, csp_nonce
from shield_csp.nonce import load_generator
from shield_csp.policies.policy import Policy


class ApiPolicy(Policy):
    def configure(self) -> None:
        self.add_directive(Directive.DEFAULT, Keyword.NONE)
        self.add_directive(Directive.FRAME_ANCESTORS, Keyword.NONE)


def _page(request: Request) -> HTMLResponse:
    return HTMLResponse(f'<script nonce="{csp_nonce(request)}">app()</script>')


def _preset(request: Request) -> PlainTextResponse:
    return PlainTextResponse(
        "ok", headers={"Content-Security-Policy": "default-src 'self'"}
    )


def _make_client(**middleware_kwargs) -> TestClient:
    app = Starlette(routes=[Route("/", _page), Route("/preset", _preset)])
    app.add_middleware(CspHeadersMiddleware, **middleware_kwargs)
    return TestClient(app)


def _make_request() -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "query_string": b"",
        "headers": [],
        "root_path": "",
        "server": ("localhost", 8080),
        "client": ("127.0.0.1", 12345),
    }
    return Request(scope)


class TestCspHeadersMiddleware:
    def test_default_policy_applied(self):
        client = _make_client(settings=CspSettings())
        response = client.get("/")
        csp = response.headers["content-security-policy"]
        assert "default-src 'self'" in csp
        assert "object-src 'none'" in csp

    def test_header_nonce_matches_page(self):
        client = _make_client(settings=CspSettings())
        response = client.get("/")
        csp = response.headers["content-security-policy"]
        nonce = response.text.split('nonce="')[1].split('"')[0]
        assert len(nonce) == 32
        assert f"script-src 'self' 'nonce-{nonce}'" in csp
        assert f"style-src 'self' 'nonce-{nonce}'" in csp

    def test_new_nonce_per_request(self):
        client = _make_client(settings=CspSettings())
        first = client.get("/").headers["content-security-policy"]
        second = client.get("/").headers["content-security-policy"]
        assert first != second

    def test_disabled(self):
        client = _make_client(settings=CspSettings(enabled=False))
        response = client.get("/")
        assert "content-security-policy" not in response.headers
        assert "content-security-policy-report-only" not in response.headers

    def test_custom_policy(self):
        client = _make_client(policy=ApiPolicy, settings=CspSettings())
        response = client.get("/")
        assert response.headers["content-security-policy"] == "default-src 'none';frame-ancestors 'none'"

    def test_report_only_policy(self):
        client = _make_client(settings=CspSettings(report_only_policy="strict"))
        response = client.get("/")
        assert "content-security-policy" in response.headers
        assert response.headers["content-security-policy-report-only"].startswith("default-src 'none'")

    def test_report_uri_on_every_policy(self):
        settings = CspSettings(report_only_policy="strict", report_uri="/csp-report")
        response = _make_client(settings=settings).get("/")
        assert "report-uri /csp-report" in response.headers["content-security-policy"]
        assert "report-uri /csp-report" in response.headers["content-security-policy-report-only"]

    def test_endpoint_header_kept(self):
        client = _make_client(settings=CspSettings())
        response = client.get("/preset")
        assert response.headers["content-security-policy"] == "default-src 'self'"

    def test_invalid_policy_propagates(self):
        app = Starlette(routes=[Route("/", _page)])
        app.add_middleware(CspHeadersMiddleware, policy="collections.OrderedDict", settings=CspSettings())
        with pytest.raises(InvalidCspPolicy):
            TestClient(app).get("/")

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("CSP_POLICY", "balanced")
        response = _make_client().get("/")
        assert "'unsafe-inline'" in response.headers["content-security-policy"]


class TestDispatch:
    @pytest.mark.asyncio
    async def test_dispatch_sets_nonce_on_request(self):
        mw = CspHeadersMiddleware(app=None, policy=ApiPolicy, settings=CspSettings())
        request = _make_request()

        async def call_next(req):
            return Response(content="ok", status_code=200)

        result = await mw.dispatch(request, call_next)

        assert len(csp_nonce(request)) == 32
        assert result.headers["content-security-policy"] == "default-src 'none';frame-ancestors 'none'"


class TestNonceGeneratorResolution:
    def test_generator_loaded_once_across_requests(self):
        client = _make_client(settings=CspSettings())
        with patch("shield_csp.middleware.csp_headers.load_generator", wraps=load_generator) as loader:
            client.get("/")
            client.get("/")
            client.get("/")
        assert loader.call_count == 1

    def test_generator_reloaded_when_settings_change(self):
        mw = CspHeadersMiddleware(app=None)
        settings = CspSettings()
        first = mw.nonce_generator(settings)
        assert mw.nonce_generator(settings) is first
        assert mw.nonce_generator(CspSettings()) is not first


class TestCspNonceHelper:
    def test_empty_without_middleware(self):
        assert csp_nonce(_make_request()) == ""
