from chat_websearch.cache import build_search_cache
from chat_websearch.client.search_client import SearchClient
from chat_websearch.config.settings import Settings, get_settings
from chat_websearch.errors import PipelineStatus
from chat_websearch.injection import InMemoryPromptSlots, PromptInjector, PromptSlotSink
from chat_websearch.pipeline.runner import WebSearchPipeline
from chat_websearch.pipeline.state import PipelineResult
from chat_websearch.prompting import MacroSubstituter, macro_substituter as build_macro_table


def build_macro_substituter(settings: Settings) -> MacroSubstituter | None:
    """Host macro pass from PROMPT_MACROS, or None when no macros are configured."""
    if not settings.prompt_macros:
        return None
    return build_macro_table(settings.prompt_macros)


def build_pipeline(
    sink: PromptSlotSink | None = None,
    macro_substituter: MacroSubstituter | None = None,
) -> WebSearchPipeline:
    settings = get_settings()
    return WebSearchPipeline(
        build_search_cache(),
        SearchClient.from_settings(settings),
        PromptInjector(
            sink or InMemoryPromptSlots(),
            macro_substituter or build_macro_substituter(settings),
        ),
        deadline_seconds=settings.search_timeout_seconds,
    )


__all__ = [
    "PipelineResult",
    "PipelineStatus",
    "WebSearchPipeline",
    "build_macro_substituter",
    "build_pipeline",
]
