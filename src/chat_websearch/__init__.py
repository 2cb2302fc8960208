"""Web search context for chat prompts: trigger detection, cached extraction, prompt injection."""

__version__ = "0.1.0"
