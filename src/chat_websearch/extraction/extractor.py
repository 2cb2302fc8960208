from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from chat_websearch.extraction.answer_box import as_fragment, first_truthy, parse_answer_box

logger = logging.getLogger(__name__)

MAX_LISTED_RESULTS = 5


def _snippets(entries: Any) -> list[str | None]:
    if not isinstance(entries, list):
        return []
    return [
        as_fragment(entry.get("snippet")) if isinstance(entry, dict) else None
        for entry in entries[:MAX_LISTED_RESULTS]
    ]


def collect_fragments(payload: Any) -> list[str | None]:
    """Order: answer box, knowledge graph, organic results, related questions."""
    if not isinstance(payload, dict):
        return []

    fragments: list[str | None] = []

    answer_box = parse_answer_box(payload.get("answer_box"))
    if answer_box is not None:
        fragments.extend(answer_box.fragments())

    graph = payload.get("knowledge_graph")
    if isinstance(graph, dict) and graph:
        fragments.append(
            as_fragment(
                first_truthy(
                    graph.get("description"),
                    graph.get("snippet"),
                    graph.get("merchant_description"),
                    graph.get("title"),
                )
            )
        )

    fragments.extend(_snippets(payload.get("organic_results")))
    fragments.extend(_snippets(payload.get("related_questions")))
    return fragments


def assemble(fragments: Iterable[str | None], budget_chars: int) -> str:
    """Join fragments line by line until the text grows past the budget.

    The budget is checked after each fragment, so the result may overshoot it
    by one fragment. Fragments are never cut.
    """
    text = ""
    for fragment in fragments:
        if fragment:
            text += fragment + "\n"
        if len(text) > budget_chars:
            break
    return text


def extract(payload: Any, budget_chars: int) -> str | None:
    text = assemble(collect_fragments(payload), budget_chars)
    if not text:
        logger.debug("Search payload produced no text")
        return None
    logger.info("Extracted text (length = %d, budget = %d)", len(text), budget_chars)
    return text
