from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence

from chat_websearch.cache.interface import SearchCache
from chat_websearch.client.search_client import SearchClient
from chat_websearch.config.websearch import WebSearchConfig
from chat_websearch.detection.chat import ChatTurn, latest_user_message
from chat_websearch.detection.normalizer import normalize
from chat_websearch.detection.trigger import detect_query
from chat_websearch.errors import (
    EmptyExtractionError,
    NoCredentialError,
    NoInputError,
    NoTriggerError,
    PipelineStatus,
    SearchRequestError,
    WebSearchDisabled,
    WebSearchError,
)
from chat_websearch.extraction.extractor import extract
from chat_websearch.injection.injector import PromptInjector
from chat_websearch.pipeline.state import PipelineResult

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


class WebSearchPipeline:
    """Per-turn web search augmentation.

    Every run first clears the prompt slot, so an aborted run never leaves a
    previous turn's results in the prompt.
    """

    def __init__(
        self,
        cache: SearchCache,
        client: SearchClient,
        injector: PromptInjector,
        *,
        deadline_seconds: float | None = None,
    ) -> None:
        self._cache = cache
        self._client = client
        self._injector = injector
        self._deadline_seconds = deadline_seconds

    async def run(self, chat: Sequence[ChatTurn], config: WebSearchConfig) -> PipelineResult:
        started = time.monotonic()
        query: str | None = None
        try:
            logger.debug("Resetting the web search prompt slot")
            self._injector.clear(config.position, config.depth)
            query = self.resolve_query(chat, config)
            text, cached = await self.search(query, config, use_cache=True)
            content = self._injector.inject(
                query=query,
                text=text,
                template=config.insertion_template,
                position=config.position,
                depth=config.depth,
            )
            return PipelineResult(
                status=PipelineStatus.INJECTED,
                content=content,
                query=query,
                cached=cached,
                elapsed_ms=_elapsed_ms(started),
            )
        except WebSearchError as exc:
            logger.debug("Web search skipped (%s): %s", exc.status.value, exc)
            return PipelineResult(
                status=exc.status, query=query, elapsed_ms=_elapsed_ms(started)
            )
        except Exception:  # noqa: BLE001
            logger.exception("Error while processing the web search request")
            return PipelineResult(
                status=PipelineStatus.ERROR, query=query, elapsed_ms=_elapsed_ms(started)
            )
        finally:
            logger.info("Web search finished in %d ms", _elapsed_ms(started))

    def resolve_query(self, chat: Sequence[ChatTurn], config: WebSearchConfig) -> str:
        if not config.enabled:
            raise WebSearchDisabled("Web search is disabled")
        if not chat:
            raise NoInputError("Chat is empty")
        if not self._client.has_credential:
            raise NoCredentialError("No search provider API key configured")

        message = latest_user_message(chat)
        if not message:
            raise NoInputError("No user message found")

        normalized = normalize(message)
        if not normalized:
            raise NoInputError("Processed message is empty")
        logger.debug("Processed message: %s", normalized)

        query = detect_query(normalized, config.trigger_phrases, config.max_words)
        if query is None:
            raise NoTriggerError("No trigger phrase found")
        logger.info("Extracted query: %s", query)
        return query

    async def search(
        self, query: str, config: WebSearchConfig, *, use_cache: bool = True
    ) -> tuple[str, bool]:
        """Return ``(text, from_cache)`` for a query."""
        if use_cache:
            cached = self._cache.get(query, ttl_seconds=config.cache_lifetime_seconds)
            if cached is not None and cached.text:
                logger.debug("Cached result found for %r", query)
                return cached.text, True

        payload = await self._fetch(query)
        text = extract(payload, config.budget_chars)
        if text is None:
            raise EmptyExtractionError(f"Search produced no text for {query!r}")

        if use_cache:
            self._cache.put(query, text)
        return text, False

    async def _fetch(self, query: str) -> object:
        if self._deadline_seconds is None:
            return await self._client.search(query)
        try:
            return await asyncio.wait_for(
                self._client.search(query), timeout=self._deadline_seconds
            )
        except asyncio.TimeoutError as exc:
            raise SearchRequestError(
                f"Search request exceeded {self._deadline_seconds}s deadline"
            ) from exc

    async def test_query(self, sample_text: str, config: WebSearchConfig) -> str:
        """Search the raw sample text, bypassing the cache. Errors propagate."""
        if not sample_text:
            raise NoInputError("Test message is empty")
        text, _ = await self.search(sample_text, config, use_cache=False)
        logger.info("Test result for %r: %s", sample_text, text)
        return text

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.info("Web search cache cleared")
