from __future__ import annotations

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def find_trigger(normalized_text: str, phrases: Sequence[str]) -> tuple[str, int] | None:
    """Return the first phrase, in list order, that occurs anywhere in the text."""
    for phrase in phrases:
        if not phrase:
            continue
        index = normalized_text.find(phrase)
        if index != -1:
            logger.debug("Trigger phrase %r found at index %d", phrase, index)
            return phrase, index
    return None


def detect_query(
    normalized_text: str, phrases: Sequence[str], max_words: int
) -> str | None:
    """Cut a search query out of normalized text.

    The query starts at the winning trigger phrase (which stays in the query)
    and keeps at most ``max_words`` space-separated tokens.
    """
    match = find_trigger(normalized_text, phrases)
    if match is None:
        return None
    _, index = match
    query = " ".join(normalized_text[index:].split(" ")[:max_words])
    return query or None
