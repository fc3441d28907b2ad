"""Shared fixtures for maxbot unit tests."""

from collections.abc import Callable

import httpx
import pytest

from maxbot import MaxBotClient

TEST_TOKEN = "test-token"
TEST_BASE_URL = "https://api.test"


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, *responses: httpx.Response | Callable[[httpx.Request], httpx.Response]) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if callable(response):
            return response(request)
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def make_client():
    """Build a client whose HTTP calls go to the given MockTransport handler."""

    def _make(handler, **kwargs) -> MaxBotClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        kwargs.setdefault("base_url", TEST_BASE_URL)
        return MaxBotClient(TEST_TOKEN, http_client=http, **kwargs)

    return _make


@pytest.fixture
def recorder():
    """Factory for ``Recorder`` handlers."""
    return Recorder
