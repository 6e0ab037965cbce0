"""Fake aiohttp sessions for adapter tests."""

import json
from typing import Any


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(
        self,
        status: int = 200,
        body: str = "",
        json_data: Any = None,
        reason: str = "OK",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status = status
        self.reason = reason
        self.headers = headers or {"Content-Type": "application/json"}
        self._body = body if json_data is None else json.dumps(json_data)

    async def text(self) -> str:
        return self._body

    async def json(self, content_type: str | None = "application/json") -> Any:  # noqa: ARG002
        return json.loads(self._body)

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *args: object) -> None:
        return None


class FakeSession:
    """Records requests and replies with queued responses or raises queued errors.

    Responses can be given per URL (``routes``); anything else is served from
    ``responses`` in order.
    """

    def __init__(
        self,
        responses: list[FakeResponse | BaseException] | None = None,
        routes: dict[str, FakeResponse | BaseException] | None = None,
    ) -> None:
        self.responses = list(responses or [])
        self.routes = dict(routes or {})
        self.calls: list[dict[str, Any]] = []

    def _respond(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if url in self.routes:
            outcome = self.routes[url]
        elif self.responses:
            outcome = self.responses.pop(0)
        else:
            raise AssertionError(f"Unexpected request: {method} {url}")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._respond("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._respond("POST", url, **kwargs)
