"""Failover orchestrator: Gemini first, OpenAI only on transient unavailability."""

import logging
from typing import Callable

from pydantic import BaseModel

from rankpilot.llm.client import (
    DEFAULT_TEMPERATURE,
    GenerationRequest,
    StructuredGenerator,
    StructuredLLMClient,
)
from rankpilot.llm.errors import (
    AllProvidersFailedError,
    ClassifiedError,
    PrimaryProviderError,
    classify,
)
from rankpilot.llm.schema import SchemaContract

logger = logging.getLogger(__name__)


class GenerationOrchestrator(StructuredGenerator):
    """Two-attempt structured generation: primary, then at most one fallback.

    Only errors the classifier marks retryable reach the fallback. Terminal
    primary errors surface as PrimaryProviderError with the original message;
    any fallback failure surfaces as the generic AllProvidersFailedError.
    Every decision is logged.
    """

    def __init__(
        self,
        primary: StructuredLLMClient,
        fallback: StructuredLLMClient,
        *,
        classifier: Callable[[BaseException], ClassifiedError] = classify,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        self._primary = primary
        self._fallback = fallback
        self._classify = classifier
        self._temperature = temperature

    async def generate(self, system_prompt: str, user_prompt: str, contract: SchemaContract) -> BaseModel:
        if not system_prompt or not system_prompt.strip():
            raise ValueError("system_prompt must be a non-empty string")
        if not user_prompt or not user_prompt.strip():
            raise ValueError("user_prompt must be a non-empty string")

        request = GenerationRequest(
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            contract=contract,
            temperature=self._temperature,
        )

        try:
            return await self._primary.generate(request)
        except Exception as e:
            verdict = self._classify(e)
            if not verdict.retryable:
                logger.error(
                    "Primary provider (%s) failed for %s, not retrying: %s (%s: %s)",
                    self._primary.name, contract.name, verdict.reason, type(e).__name__, e,
                )
                raise PrimaryProviderError(str(e)) from e
            logger.warning(
                "Primary provider (%s) unavailable for %s (%s), falling back to %s",
                self._primary.name, contract.name, verdict.reason, self._fallback.name,
            )

        try:
            result = await self._fallback.generate(request)
        except Exception as e:
            logger.error(
                "Fallback provider (%s) also failed for %s (%s: %s)",
                self._fallback.name, contract.name, type(e).__name__, e,
            )
            raise AllProvidersFailedError() from None

        logger.info("Served %s from fallback provider (%s)", contract.name, self._fallback.name)
        return result
