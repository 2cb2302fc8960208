from chat_websearch.injection.injector import PromptInjector
from chat_websearch.injection.slots import (
    SLOT_ID,
    InMemoryPromptSlots,
    PromptSlot,
    PromptSlotSink,
)

__all__ = [
    "SLOT_ID",
    "InMemoryPromptSlots",
    "PromptInjector",
    "PromptSlot",
    "PromptSlotSink",
]
