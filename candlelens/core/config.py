# candlelens/core/config.py
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from candlelens import __version__

DEFAULT_EMPTY_ANALYSIS_MESSAGE = "❗ AI did not return any analysis. Try a clearer chart."


def _split_csv(value: str) -> List[str]:
    return [v.strip() for v in (value or "").split(",") if v.strip()]


class Settings(BaseSettings):
    app_name: str = "CandleLens-API"
    app_version: str = __version__
    debug: bool = False

    # Vision provider
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4-turbo"
    openai_fallback_models: str = ""  # CSV, tried in order after openai_model
    openai_max_tokens: int = 1000
    openai_timeout_seconds: float = 45.0

    max_image_bytes: int = 10 * 1024 * 1024

    # Header selecting the pair-memory session; requests without it share one session
    session_header: str = "X-Session-Id"
    empty_analysis_message: str = DEFAULT_EMPTY_ANALYSIS_MESSAGE

    # CORS origins (CSV in env CORS_ORIGINS), defaults to localhost:5173
    cors_origins: str = "http://localhost:5173"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def model_chain(self) -> List[str]:
        chain = [self.openai_model] + _split_csv(self.openai_fallback_models)
        return [m for m in dict.fromkeys(chain) if m]

    @property
    def cors_origin_list(self) -> List[str]:
        return _split_csv(self.cors_origins)


@lru_cache
def get_settings() -> Settings:
    return Settings()
