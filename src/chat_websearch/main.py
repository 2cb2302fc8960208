from __future__ import annotations

import argparse
import asyncio
import json

from chat_websearch.config.settings import get_settings
from chat_websearch.config.websearch import load_websearch_config
from chat_websearch.detection.chat import ChatTurn
from chat_websearch.errors import WebSearchError
from chat_websearch.injection import InMemoryPromptSlots
from chat_websearch.logging_config import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Augment chat prompts with web search results")
    parser.add_argument("message", nargs="?", help="User message to run through the pipeline")
    parser.add_argument(
        "--config",
        help="Path to the web search settings JSON (defaults to WEBSEARCH_CONFIG_PATH)",
    )
    parser.add_argument(
        "--force-enable",
        action="store_true",
        help="Run even if the stored settings have web search disabled",
    )
    parser.add_argument(
        "--show-config", action="store_true", help="Print the active web search settings"
    )
    parser.add_argument(
        "--test-query",
        metavar="TEXT",
        help="Search TEXT as-is, bypassing the cache, and print the extracted text",
    )
    parser.add_argument(
        "--clear-cache", action="store_true", help="Remove all cached search results"
    )
    parser.add_argument("--server", action="store_true", help="Start the API server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument(
        "--port", type=int, default=8000, help="Port to run the server on"
    )
    parser.add_argument("--reload", action="store_true", help="Enable hot reloading")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)

    if args.server:
        import uvicorn

        print(
            f"Starting server on {args.host}:{args.port} (reload={'on' if args.reload else 'off'})"
        )
        if args.reload:
            # When reloading, pass the import string instead of the app object
            uvicorn.run(
                "chat_websearch.api:app", host=args.host, port=args.port, reload=True
            )
        else:
            from chat_websearch.api import app

            uvicorn.run(app, host=args.host, port=args.port)
        return

    config = load_websearch_config(args.config or settings.websearch_config_path)
    if args.force_enable:
        config = config.model_copy(update={"enabled": True})

    if args.show_config:
        print(json.dumps(config.model_dump(mode="json"), indent=2))
        return

    from chat_websearch.pipeline import build_pipeline

    if args.clear_cache:
        build_pipeline().clear_cache()
        print("Web search cache cleared")
        return

    if args.test_query:
        try:
            print(asyncio.run(build_pipeline().test_query(args.test_query, config)))
        except WebSearchError as exc:
            raise SystemExit(f"Test search failed ({exc.status.value}): {exc}") from exc
        return

    if not args.message:
        raise SystemExit(
            "Provide a message or use --test-query / --clear-cache / --show-config / --server"
        )

    slots = InMemoryPromptSlots()
    pipeline = build_pipeline(slots)
    result = asyncio.run(pipeline.run([ChatTurn(text=args.message, is_user=True)], config))
    print(f"[status] {result.status.value}")
    if result.query:
        print(f"[query] {result.query} (cached={'yes' if result.cached else 'no'})")
    if result.content:
        print(result.content)


if __name__ == "__main__":
    main()
