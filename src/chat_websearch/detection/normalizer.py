from __future__ import annotations

import re

_PUNCTUATION = re.compile(r"[\\.,@#!?$%&;:{}=_`~\[\]]")
_DOUBLE_QUOTES = re.compile(r"[\"“”]")
_NEWLINES = re.compile(r"\n+")
_WHITESPACE = re.compile(r"\s+")


def normalize(raw: str) -> str:
    """Canonicalize chat text for trigger matching.

    Lowercases, drops punctuation and double quotes, folds line breaks and
    whitespace runs into single spaces, then trims.
    """
    text = raw.lower()
    text = _PUNCTUATION.sub("", text)
    text = _DOUBLE_QUOTES.sub("", text)
    text = text.replace("\r", "")
    text = _NEWLINES.sub(" ", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()
