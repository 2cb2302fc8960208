from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Search provider proxy
    serpapi_api_key: str = Field(default="", alias="SERPAPI_API_KEY")
    search_endpoint_url: str = Field(
        default="http://127.0.0.1:8000/api/serpapi/search",
        alias="SEARCH_ENDPOINT_URL",
    )
    search_timeout_seconds: float = Field(
        default=20, alias="SEARCH_TIMEOUT_SECONDS"
    )

    # Per-invocation settings snapshot, owned by the settings UI
    websearch_config_path: str = Field(
        default="websearch.json",
        alias="WEBSEARCH_CONFIG_PATH",
    )

    # Result cache persistence
    cache_backend: str = Field(
        default="file",
        alias="CACHE_BACKEND",
    )
    cache_dir: str = Field(
        default=".websearch_cache",
        alias="CACHE_DIR",
    )

    # Database configuration
    database_url: str = Field(
        default="sqlite:///./websearch_cache.db",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(
        default=False,
        alias="DATABASE_ECHO",
    )
    database_auto_migrate: bool = Field(
        default=True,
        alias="DATABASE_AUTO_MIGRATE",
    )

    # Host macros applied to the injected text, e.g. {"user": "Ann", "char": "Bot"}
    prompt_macros: dict[str, str] = Field(default_factory=dict, alias="PROMPT_MACROS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    return Settings()
