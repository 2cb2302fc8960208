from chat_websearch.tools.web_context import WebContextInput, build_web_context_tool

__all__ = ["WebContextInput", "build_web_context_tool"]
