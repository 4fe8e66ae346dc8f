"""
Tests for the rate-limit and request-logging middleware.
"""
import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.middleware import RateLimitMiddleware, RequestLoggingMiddleware, format_duration
from app.core.rate_limit import ClientWindowStore, RateLimiter


def build_app(limit: int = 3):
    """Minimal application with a counting handler behind the middleware."""
    store = ClientWindowStore()
    application = FastAPI()
    application.add_middleware(RequestLoggingMiddleware)
    application.add_middleware(RateLimitMiddleware, limiter=RateLimiter(store, limit))
    calls = {"count": 0}

    @application.get("/ping")
    async def ping():
        calls["count"] += 1
        return {"pong": True}

    return application, store, calls


class TestRateLimitMiddleware:
    """Test request admission over HTTP."""

    def test_requests_within_window_pass(self):
        """With limit 3 the first four requests reach the handler."""
        application, _, calls = build_app(limit=3)
        client = TestClient(application)

        responses = [client.get("/ping") for _ in range(4)]

        assert [r.status_code for r in responses] == [200, 200, 200, 200]
        assert calls["count"] == 4

    def test_over_limit_returns_429_without_running_handler(self):
        """The fifth request is rejected before the handler runs."""
        application, _, calls = build_app(limit=3)
        client = TestClient(application)
        for _ in range(4):
            client.get("/ping")

        response = client.get("/ping")

        assert response.status_code == 429
        body = response.json()
        assert body["error"] == "Too many requests"
        assert body["retry_after"] > 0
        assert int(response.headers["Retry-After"]) == body["retry_after"]
        assert calls["count"] == 4

    def test_keys_on_client_address(self):
        """Requests are counted against the connection's host."""
        application, store, _ = build_app(limit=3)
        client = TestClient(application)

        client.get("/ping")

        assert "testclient" in store
        assert store.get("testclient").count == 1

    def test_unknown_routes_are_counted(self):
        """Rejected and unmatched paths still consume the window."""
        application, store, _ = build_app(limit=3)
        client = TestClient(application)

        assert client.get("/missing").status_code == 404
        assert store.get("testclient").count == 1


class TestRequestLoggingMiddleware:
    """Test request log levels."""

    def test_success_logs_info(self, caplog):
        application, _, _ = build_app(limit=10)
        client = TestClient(application)

        with caplog.at_level(logging.INFO, logger="app.api.middleware"):
            client.get("/ping")

        records = [r for r in caplog.records if r.name == "app.api.middleware"]
        assert records[-1].levelno == logging.INFO
        assert "GET /ping" in records[-1].getMessage()

    def test_client_error_logs_warning(self, caplog):
        application, _, _ = build_app(limit=10)
        client = TestClient(application)

        with caplog.at_level(logging.INFO, logger="app.api.middleware"):
            client.get("/missing")

        records = [r for r in caplog.records if r.name == "app.api.middleware"]
        assert records[-1].levelno == logging.WARNING

    def test_format_duration(self):
        assert format_duration(0.0000005) == "0.50µs"
        assert format_duration(0.25) == "250.00ms"
        assert format_duration(2) == "2.00s"
