"""Shared fixtures: a controllable clock and a pipeline wired to a mock search proxy."""

from types import SimpleNamespace

import httpx
import pytest

from chat_websearch.cache import MemorySearchCache
from chat_websearch.client import SearchClient
from chat_websearch.config.websearch import ONE_WEEK_SECONDS, WebSearchConfig
from chat_websearch.injection import InMemoryPromptSlots, PromptInjector
from chat_websearch.pipeline import WebSearchPipeline

SEARCH_URL = "https://search.test/api/serpapi/search"


class FakeClock:
    """Epoch-millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config() -> WebSearchConfig:
    return WebSearchConfig(enabled=True)


@pytest.fixture
def make_pipeline(clock):
    """Build a pipeline whose network calls hit an in-process mock transport."""

    def _make(
        payload=None,
        *,
        status_code: int = 200,
        api_key: str = "test-key",
        handler=None,
        deadline_seconds: float | None = None,
    ) -> SimpleNamespace:
        calls: list[httpx.Request] = []

        def _respond(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(status_code, json=payload if payload is not None else {})

        cache = MemorySearchCache(ONE_WEEK_SECONDS, clock=clock)
        slots = InMemoryPromptSlots()
        client = SearchClient(
            SEARCH_URL, api_key, transport=httpx.MockTransport(handler or _respond)
        )
        pipeline = WebSearchPipeline(
            cache, client, PromptInjector(slots), deadline_seconds=deadline_seconds
        )
        return SimpleNamespace(pipeline=pipeline, cache=cache, slots=slots, calls=calls)

    return _make
