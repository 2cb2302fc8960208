from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from chat_websearch.config.websearch import PromptPosition

SLOT_ID = "websearch"


@dataclass(frozen=True)
class PromptSlot:
    content: str
    position: PromptPosition
    depth: int


class PromptSlotSink(Protocol):
    """Host API for named prompt insertions. A write replaces the slot's content."""

    def set_slot(
        self, slot_id: str, content: str, position: PromptPosition, depth: int
    ) -> None:
        ...


class InMemoryPromptSlots:
    def __init__(self) -> None:
        self._slots: dict[str, PromptSlot] = {}
        self.writes: list[tuple[str, PromptSlot]] = []

    def set_slot(
        self, slot_id: str, content: str, position: PromptPosition, depth: int
    ) -> None:
        slot = PromptSlot(content=content, position=PromptPosition(position), depth=depth)
        self._slots[slot_id] = slot
        self.writes.append((slot_id, slot))

    def get(self, slot_id: str = SLOT_ID) -> PromptSlot | None:
        return self._slots.get(slot_id)

    def content(self, slot_id: str = SLOT_ID) -> str:
        slot = self._slots.get(slot_id)
        return slot.content if slot is not None else ""
