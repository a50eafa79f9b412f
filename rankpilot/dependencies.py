"""Dependency providers: build the generator once per process."""

from functools import lru_cache

from rankpilot.cache import TTLCache
from rankpilot.config import Settings, get_settings
from rankpilot.llm.cached import CachedGenerator
from rankpilot.llm.client import StructuredGenerator
from rankpilot.llm.failover import GenerationOrchestrator
from rankpilot.llm.gemini import GeminiStructuredClient
from rankpilot.llm.openai_fallback import OpenAIJsonClient


def build_generator(settings: Settings) -> StructuredGenerator:
    """Wire Gemini + OpenAI adapters into an orchestrator, cached if enabled."""
    orchestrator = GenerationOrchestrator(
        primary=GeminiStructuredClient(settings),
        fallback=OpenAIJsonClient(settings),
        temperature=settings.generation_temperature,
    )
    if not settings.llm_cache_enabled:
        return orchestrator
    cache = TTLCache(
        namespace="llm",
        max_size=settings.llm_cache_max_size,
        ttl_seconds=settings.llm_cache_ttl_seconds,
    )
    return CachedGenerator(orchestrator, cache)


@lru_cache()
def get_generator() -> StructuredGenerator:
    """Return the process-wide generator built from cached settings."""
    return build_generator(get_settings())
