"""
Shared test fixtures for the command-center test suite.
"""

import json
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qs

import httpx
import pytest
from fastapi.testclient import TestClient

from command_center.core.config import Settings
from command_center.main import create_app

TEST_CONFIG = {
    "APP_NAME": "command-center-test",
    "APP_VERSION": "9.9.9",
    "ENV": "test",
    "LOG_LEVEL": "INFO",
    "GITHUB_TOKEN": "gh-test-token",
    "STRIPE_SECRET_KEY": "sk_test_123",
    "STRIPE_ACCOUNT_ID": "acct_test",
    "HF_TOKEN": "hf-test-token",
    "HF_USER": "tester",
    "CLOUDFLARE_API_TOKEN": "cf-test-token",
    "CLOUDFLARE_ACCOUNT_ID": "acc123",
    "DATABASE_URL": "sqlite://",
}


class FakeUpstream:
    """Canned upstream answers keyed by (method, url without query); records every request."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Tuple[int, Any, Optional[str]]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, url: str, json_body: Any = None, status: int = 200, text: Optional[str] = None):
        self.routes[(method.upper(), url)] = (status, json_body, text)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        found = self.routes.get((request.method, url))
        if found is None:
            return httpx.Response(404, json={"message": "Not Found"})
        status, body, text = found
        if text is not None:
            return httpx.Response(status, text=text)
        return httpx.Response(status, json=body)

    def calls(self, method: Optional[str] = None) -> List[httpx.Request]:
        return [r for r in self.requests if method is None or r.method == method]

    @staticmethod
    def json_body(request: httpx.Request) -> Dict[str, Any]:
        return json.loads(request.content.decode("utf-8"))

    @staticmethod
    def form_body(request: httpx.Request) -> Dict[str, str]:
        parsed = parse_qs(request.content.decode("utf-8"), keep_blank_values=True)
        return {k: v[0] for k, v in parsed.items()}


@pytest.fixture
def settings() -> Settings:
    return Settings(cfg=dict(TEST_CONFIG))


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def transport(upstream: FakeUpstream) -> httpx.MockTransport:
    return httpx.MockTransport(upstream.handle)


@pytest.fixture
def client(settings: Settings, transport: httpx.MockTransport):
    app = create_app(settings, transport=transport)
    with TestClient(app) as c:
        yield c
