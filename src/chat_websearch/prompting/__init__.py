from chat_websearch.prompting.template import (
    MacroSubstituter,
    ensure_text_placeholder,
    macro_substituter,
    render_insertion,
    substitute_macros,
)

__all__ = [
    "MacroSubstituter",
    "ensure_text_placeholder",
    "macro_substituter",
    "render_insertion",
    "substitute_macros",
]
