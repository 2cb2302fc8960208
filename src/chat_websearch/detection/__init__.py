from chat_websearch.detection.chat import ChatTurn, find_last, latest_user_message
from chat_websearch.detection.normalizer import normalize
from chat_websearch.detection.trigger import detect_query, find_trigger

__all__ = [
    "ChatTurn",
    "detect_query",
    "find_last",
    "find_trigger",
    "latest_user_message",
    "normalize",
]
