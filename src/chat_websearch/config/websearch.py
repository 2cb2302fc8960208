from __future__ import annotations

import json
import tempfile
from enum import IntEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TRIGGER_PHRASES: tuple[str, ...] = (
    "tell me",
    "explain me",
    "can you",
    "how to",
    "how is",
    "how do you",
    "ways to",
    "who is",
    "who are",
    "who was",
    "who were",
    "who did",
    "what is",
    "what's",
    "what are",
    "what're",
    "what was",
    "what were",
    "what did",
    "what do",
    "where are",
    "where're",
    "where's",
    "where is",
    "where was",
    "where were",
    "where did",
    "where do",
    "where does",
    "where can",
    "how do i",
    "where do i",
    "how much",
    "definition of",
    "what happened",
    "why does",
    "why do",
    "why did",
    "why is",
    "why are",
    "why were",
    "when does",
    "when do",
    "when did",
    "when is",
    "when was",
    "when were",
    "how does",
    "meaning of",
)

DEFAULT_INSERTION_TEMPLATE = "***\nRelevant information from the web ({{query}}):\n{{text}}\n***"

ONE_WEEK_SECONDS = 60 * 60 * 24 * 7


class PromptPosition(IntEnum):
    """Where the host places extension prompt content.

    Values match the host's wire encoding, so they are persisted as-is.
    """

    AFTER_MAIN = 0
    IN_CHAT = 1
    BEFORE_MAIN = 2


class WebSearchConfig(BaseModel):
    """Immutable snapshot of the user-facing web search settings.

    The settings UI owns persistence and hands a fresh snapshot to every
    pipeline invocation. ``depth`` only matters when ``position`` is
    ``PromptPosition.IN_CHAT``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    enabled: bool = False
    trigger_phrases: tuple[str, ...] = Field(default=DEFAULT_TRIGGER_PHRASES)
    insertion_template: str = DEFAULT_INSERTION_TEMPLATE
    cache_lifetime_seconds: int = Field(default=ONE_WEEK_SECONDS, ge=0)
    position: PromptPosition = PromptPosition.AFTER_MAIN
    depth: int = Field(default=2, ge=0)
    max_words: int = Field(default=10, ge=1)
    budget_chars: int = Field(default=1500, ge=0)


def load_websearch_config(path: str | Path) -> WebSearchConfig:
    """Read a settings snapshot from disk; a missing file yields the defaults."""
    config_path = Path(path)
    if not config_path.exists():
        return WebSearchConfig()
    data = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Invalid web search config format in: {config_path}")
    return WebSearchConfig.model_validate(data)


def save_websearch_config(config: WebSearchConfig, path: str | Path) -> None:
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    # Unique temp name per writer, so concurrent saves never share a file.
    with tempfile.NamedTemporaryFile(
        "w",
        dir=config_path.parent,
        prefix=config_path.name + ".",
        suffix=".tmp",
        encoding="utf-8",
        delete=False,
    ) as tmp:
        json.dump(config.model_dump(mode="json"), tmp, ensure_ascii=True, indent=2)
    Path(tmp.name).replace(config_path)
