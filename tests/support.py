# tests/support.py
"""Test doubles shared across test modules."""

from dataclasses import dataclass, field

import httpx

MOCK_BASE_URL = "http://testserver/api/v1"


@dataclass
class MockApi:
    """Canned API endpoint backed by httpx.MockTransport.

    Records every request so tests can inspect path, auth and body.
    """

    status: int = 200
    body: str = '{"status": "ok"}'
    requests: list[httpx.Request] = field(default_factory=list)

    def respond(self, status: int, body: str) -> None:
        self.status = status
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status,
            text=self.body,
            headers={"content-type": "application/json"},
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)
