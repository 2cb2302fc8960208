from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ChatTurn:
    text: str
    is_user: bool = False
    is_system: bool = False


def find_last(items: Sequence[T], predicate: Callable[[T], bool]) -> T | None:
    """Return the first item matching ``predicate`` scanning from the end."""
    for item in reversed(items):
        if predicate(item):
            return item
    return None


def _is_user_turn(turn: ChatTurn) -> bool:
    return turn.is_user and not turn.is_system


def latest_user_message(chat: Sequence[ChatTurn]) -> str:
    """Text of the most recent non-system user turn, or an empty string."""
    turn = find_last(chat, _is_user_turn)
    return turn.text if turn is not None else ""
