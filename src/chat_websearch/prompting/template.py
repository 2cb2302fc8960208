from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

from chat_websearch.config.websearch import DEFAULT_INSERTION_TEMPLATE

MacroSubstituter = Callable[[str], str]

_INSERTION_PLACEHOLDER = re.compile(r"{{(query|text)}}", re.IGNORECASE)
_TEXT_PLACEHOLDER = re.compile(r"{{text}}", re.IGNORECASE)
_MACRO = re.compile(r"{{\s*([A-Za-z0-9_]+)\s*}}")


def ensure_text_placeholder(template: str) -> str:
    if not template:
        template = DEFAULT_INSERTION_TEMPLATE
    if not _TEXT_PLACEHOLDER.search(template):
        template += "\n{{text}}"
    return template


def render_insertion(template: str, *, query: str, text: str) -> str:
    """Fill ``{{query}}`` and ``{{text}}`` in a single pass.

    Substituted values are never re-scanned, so result text that happens to
    contain ``{{query}}`` stays literal.
    """
    values = {"query": query, "text": text}
    return _INSERTION_PLACEHOLDER.sub(
        lambda match: values[match.group(1).lower()],
        ensure_text_placeholder(template),
    )


def substitute_macros(text: str, variables: Mapping[str, Any]) -> str:
    # Keep unresolved macros as-is; the host may resolve them later.
    lookup = {str(key).lower(): value for key, value in variables.items()}

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1).lower()
        if name in lookup:
            return str(lookup[name])
        return match.group(0)

    return _MACRO.sub(_replace, text)


def macro_substituter(variables: Mapping[str, Any]) -> MacroSubstituter:
    return partial(substitute_macros, variables=dict(variables))
