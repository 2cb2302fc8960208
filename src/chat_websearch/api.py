import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, FastAPI, HTTPException
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, ConfigDict, Field

from chat_websearch.config.settings import get_settings
from chat_websearch.config.websearch import (
    WebSearchConfig,
    load_websearch_config,
    save_websearch_config,
)
from chat_websearch.detection.chat import ChatTurn
from chat_websearch.errors import PipelineStatus, WebSearchError
from chat_websearch.logging_config import configure_logging
from chat_websearch.pipeline import WebSearchPipeline, build_pipeline

configure_logging(get_settings().log_level)

app = FastAPI(title="Chat WebSearch API", docs_url=None, redoc_url=None)
router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)

_ERROR_STATUS_CODES = {
    PipelineStatus.NO_INPUT: 400,
    PipelineStatus.NO_CREDENTIAL: 400,
    PipelineStatus.NETWORK_FAILURE: 502,
    PipelineStatus.EMPTY_EXTRACTION: 404,
}


@lru_cache
def get_pipeline() -> WebSearchPipeline:
    return build_pipeline()


def get_config_path() -> str:
    return get_settings().websearch_config_path


def _load_stored_config(config_path: str) -> WebSearchConfig:
    try:
        return load_websearch_config(config_path)
    except ValueError as exc:
        logger.error("Stored web search config at %s is invalid: %s", config_path, exc)
        raise HTTPException(
            status_code=500,
            detail=f"Stored web search config is invalid: {config_path}",
        ) from exc


def get_config(config_path: str = Depends(get_config_path)) -> WebSearchConfig:
    return _load_stored_config(config_path)


@app.get("/", include_in_schema=False)
async def root_redirect():
    return RedirectResponse(url="/api/docs")


@router.get("/docs", include_in_schema=False)
async def custom_swagger_ui_html():
    return get_swagger_ui_html(
        openapi_url=app.openapi_url,
        title=app.title + " - Swagger UI",
        swagger_js_url="https://cdn.jsdelivr.net/npm/swagger-ui-dist@5/swagger-ui-bundle.js",
        swagger_css_url="https://cdn.jsdelivr.net/npm/swagger-ui-dist@5/swagger-ui.css",
    )


class ChatTurnIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Hosts send the message body as ``mes``.
    text: str = Field(default="", alias="mes")
    is_user: bool = False
    is_system: bool = False

    def to_turn(self) -> ChatTurn:
        return ChatTurn(text=self.text, is_user=self.is_user, is_system=self.is_system)


class PromptRequest(BaseModel):
    chat: list[ChatTurnIn]
    config: WebSearchConfig | None = None


class PromptResponse(BaseModel):
    status: PipelineStatus
    content: str
    query: str | None = None
    cached: bool = False
    elapsed_ms: int = 0


class QueryTestRequest(BaseModel):
    text: str


class QueryTestResponse(BaseModel):
    text: str


@router.get("/health")
def health_check():
    return {"status": "ok"}


@router.get("/websearch/config", response_model=WebSearchConfig)
def read_config(config: WebSearchConfig = Depends(get_config)):
    return config


@router.put("/websearch/config", response_model=WebSearchConfig)
def update_config(
    config: WebSearchConfig, config_path: str = Depends(get_config_path)
):
    save_websearch_config(config, config_path)
    return config


@router.post("/websearch/prompt", response_model=PromptResponse)
async def build_prompt(
    request: PromptRequest,
    pipeline: WebSearchPipeline = Depends(get_pipeline),
    config_path: str = Depends(get_config_path),
):
    config = request.config
    if config is None:
        config = _load_stored_config(config_path)
    result = await pipeline.run([turn.to_turn() for turn in request.chat], config)
    return PromptResponse(
        status=result.status,
        content=result.content,
        query=result.query,
        cached=result.cached,
        elapsed_ms=result.elapsed_ms,
    )


@router.post("/websearch/test", response_model=QueryTestResponse)
async def run_test_query(
    request: QueryTestRequest,
    pipeline: WebSearchPipeline = Depends(get_pipeline),
    config: WebSearchConfig = Depends(get_config),
):
    try:
        text = await pipeline.test_query(request.text, config)
    except WebSearchError as exc:
        raise HTTPException(
            status_code=_ERROR_STATUS_CODES.get(exc.status, 500), detail=str(exc)
        ) from exc
    return QueryTestResponse(text=text)


@router.post("/websearch/cache/clear")
def clear_cache(pipeline: WebSearchPipeline = Depends(get_pipeline)):
    pipeline.clear_cache()
    return {"status": "cleared"}


app.include_router(router)
