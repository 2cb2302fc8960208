from chat_websearch.extraction.answer_box import (
    ANSWER_BOX_TYPES,
    AnswerBox,
    AnswerBoxVariant,
    UnknownAnswer,
    parse_answer_box,
)
from chat_websearch.extraction.extractor import assemble, collect_fragments, extract

__all__ = [
    "ANSWER_BOX_TYPES",
    "AnswerBox",
    "AnswerBoxVariant",
    "UnknownAnswer",
    "assemble",
    "collect_fragments",
    "extract",
    "parse_answer_box",
]
