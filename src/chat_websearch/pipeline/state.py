from __future__ import annotations

from dataclasses import dataclass

from chat_websearch.errors import PipelineStatus


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of one per-turn run. ``content`` is what the prompt slot now holds."""

    status: PipelineStatus
    content: str = ""
    query: str | None = None
    cached: bool = False
    elapsed_ms: int = 0

    @property
    def injected(self) -> bool:
        return self.status is PipelineStatus.INJECTED
