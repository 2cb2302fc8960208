from chat_websearch.config.settings import Settings, get_settings
from chat_websearch.config.websearch import (
    DEFAULT_INSERTION_TEMPLATE,
    DEFAULT_TRIGGER_PHRASES,
    PromptPosition,
    WebSearchConfig,
    load_websearch_config,
    save_websearch_config,
)

__all__ = [
    "DEFAULT_INSERTION_TEMPLATE",
    "DEFAULT_TRIGGER_PHRASES",
    "PromptPosition",
    "Settings",
    "WebSearchConfig",
    "get_settings",
    "load_websearch_config",
    "save_websearch_config",
]
