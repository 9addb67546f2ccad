import io
import json
import urllib.error
import urllib.request

import pytest

from app.crm import create_app


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200):
        self._body = body
        self.status = status

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeCustomerApi:
    """Stands in for urllib.request.urlopen and records every outbound request."""

    def __init__(self):
        self.calls: list[str] = []
        self.status = 200
        self.body: bytes = b"[]"
        self.error: Exception | None = None

    def respond(self, payload=None, *, status: int = 200, raw: bytes | None = None) -> None:
        self.status = status
        self.body = raw if raw is not None else json.dumps(payload).encode("utf-8")

    def __call__(self, req, *args, **kwargs):
        self.calls.append(req.full_url)
        if self.error is not None:
            raise self.error
        if self.status >= 400:
            raise urllib.error.HTTPError(req.full_url, self.status, "error", None, io.BytesIO(self.body))
        return FakeResponse(self.body, self.status)


@pytest.fixture()
def api_env(monkeypatch):
    monkeypatch.setenv("API_ENDPOINT", "http://api.test")
    monkeypatch.delenv("NEXT_PUBLIC_API_ENDPOINT", raising=False)
    monkeypatch.setenv("ENV", "test")


@pytest.fixture()
def fake_api(monkeypatch):
    api = FakeCustomerApi()
    monkeypatch.setattr(urllib.request, "urlopen", api)
    return api


@pytest.fixture()
def app(api_env):
    return create_app()


@pytest.fixture()
def client(app, fake_api):
    return app.test_client()
