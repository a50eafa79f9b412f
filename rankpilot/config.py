"""Pydantic Settings and logging configuration for the AI layer."""

import logging
from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings

# Resolve .env path relative to this file (rankpilot/config.py -> project root)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    # Gemini (primary provider)
    gemini_api_key: str = ""
    google_api_key: str = ""
    primary_llm: str = "gemini-2.0-flash"

    # OpenAI (fallback provider)
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    openai_base_url: str = ""
    # Set only when the fallback runs on Azure OpenAI
    azure_openai_endpoint: str = ""
    azure_openai_deployment: str = ""
    azure_openai_api_version: str = ""
    # Disable for OpenAI-compatible backends without response_format support
    openai_json_mode: bool = True

    # Generation
    generation_temperature: float = 0.1
    llm_timeout: int = 120

    # Response cache
    llm_cache_enabled: bool = True
    llm_cache_ttl_seconds: int = 3600
    llm_cache_max_size: int = 1000

    # SEO audit page fetching
    page_fetch_timeout: float = 15.0
    page_content_max_chars: int = 100_000

    # Logging
    log_level: str = "INFO"
    log_dir: str = "./tmp"

    model_config = {
        "env_file": str(_ENV_FILE),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def gemini_key(self) -> str:
        """Gemini key, accepting GOOGLE_API_KEY as used by the Google SDKs."""
        return self.gemini_api_key or self.google_api_key

    @property
    def uses_azure(self) -> bool:
        return bool(self.azure_openai_endpoint)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def setup_logging(settings: Settings | None = None):
    """Configure logging to stderr and the ./tmp/ directory."""
    settings = settings or get_settings()
    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_dir / "rankpilot.log"),
        ],
        force=True,
    )
