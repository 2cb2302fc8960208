from __future__ import annotations

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from chat_websearch.config.websearch import WebSearchConfig
from chat_websearch.errors import WebSearchError
from chat_websearch.pipeline.runner import WebSearchPipeline


class WebContextInput(BaseModel):
    query: str = Field(description="The web search query to look up.")


def build_web_context_tool(
    pipeline: WebSearchPipeline, config: WebSearchConfig
) -> StructuredTool:
    """Expose the cached search + extraction path to tool-calling agents."""

    async def _search(query: str) -> str:
        try:
            text, _ = await pipeline.search(query, config, use_cache=True)
            return text
        except WebSearchError as exc:
            return f"web_context tool failed: {exc}"

    return StructuredTool.from_function(
        name="web_context",
        description="Look up condensed web search results (answer box, knowledge graph, top snippets)",
        coroutine=_search,
        args_schema=WebContextInput,
    )
