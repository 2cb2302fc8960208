from __future__ import annotations

import logging

from chat_websearch.config.websearch import PromptPosition
from chat_websearch.injection.slots import SLOT_ID, PromptSlotSink
from chat_websearch.prompting.template import MacroSubstituter, render_insertion

logger = logging.getLogger(__name__)


class PromptInjector:
    """Formats extracted text and writes it under one fixed prompt slot."""

    def __init__(
        self,
        sink: PromptSlotSink,
        macro_substituter: MacroSubstituter | None = None,
        slot_id: str = SLOT_ID,
    ) -> None:
        self._sink = sink
        self._macro_substituter = macro_substituter
        self._slot_id = slot_id

    def clear(self, position: PromptPosition, depth: int) -> None:
        self._sink.set_slot(self._slot_id, "", position, depth)

    def inject(
        self,
        *,
        query: str,
        text: str,
        template: str,
        position: PromptPosition,
        depth: int,
    ) -> str:
        content = render_insertion(template, query=query, text=text)
        if self._macro_substituter is not None:
            content = self._macro_substituter(content)
        self._sink.set_slot(self._slot_id, content, position, depth)
        logger.info("Prompt slot %r updated (%d chars)", self._slot_id, len(content))
        return content
