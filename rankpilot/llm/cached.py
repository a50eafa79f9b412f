"""Caching wrapper for any structured generator: skips provider calls for repeated requests."""

import logging

from pydantic import BaseModel

from rankpilot.cache import TTLCache, cache_key
from rankpilot.llm.client import StructuredGenerator
from rankpilot.llm.schema import SchemaContract

logger = logging.getLogger(__name__)


class CachedGenerator(StructuredGenerator):
    """Wraps any StructuredGenerator and caches validated results.

    Keyed by contract name, schema text and both prompts. Failures are never
    cached. Callers get deep copies so no result object is shared between
    requests.
    """

    def __init__(self, inner: StructuredGenerator, cache: TTLCache):
        self._inner = inner
        self._cache = cache

    async def generate(self, system_prompt: str, user_prompt: str, contract: SchemaContract) -> BaseModel:
        ck = cache_key("generate", contract.name, contract.json_schema_text(), system_prompt, user_prompt)
        cached = self._cache.get(ck)
        if cached is not None:
            logger.debug("LLM cache hit (%s)", contract.name)
            return cached.model_copy(deep=True)
        result = await self._inner.generate(system_prompt, user_prompt, contract)
        self._cache.set(ck, result.model_copy(deep=True))
        return result
