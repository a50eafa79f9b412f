"""Gemini structured-output client using google-genai SDK."""

import logging
from google import genai
from google.genai import types
from pydantic import BaseModel

from rankpilot.llm.client import StructuredLLMClient, GenerationRequest
from rankpilot.config import Settings

logger = logging.getLogger(__name__)


class GeminiStructuredClient(StructuredLLMClient):
    """Primary provider: Gemini with native JSON schema enforcement.

    The SDK parses the response into the contract's pydantic model, so this
    adapter never touches raw text. Provider errors propagate unchanged so
    their status and message stay available for failure classification.
    """

    name = "gemini"

    def __init__(self, settings: Settings, model_name: str = ""):
        self._model_name = model_name or settings.primary_llm

        api_key = settings.gemini_key
        if not api_key:
            raise ValueError("No Gemini API key configured. Set GEMINI_API_KEY or GOOGLE_API_KEY in .env")

        self._client = genai.Client(
            api_key=api_key,
            # HttpOptions.timeout is in milliseconds
            http_options=types.HttpOptions(timeout=settings.llm_timeout * 1000),
        )

    async def generate(self, request: GenerationRequest) -> BaseModel:
        contract = request.contract
        config = types.GenerateContentConfig(
            temperature=request.temperature,
            response_mime_type="application/json",
            response_schema=contract.model,
        )
        response = await self._client.aio.models.generate_content(
            model=self._model_name,
            contents=request.combined_prompt(),
            config=config,
        )

        parsed = response.parsed
        if parsed is None:
            finish_reason = "unknown"
            if response.candidates:
                finish_reason = getattr(response.candidates[0], "finish_reason", "unknown")
            raise ValueError(
                f"Primary AI provider returned no output (finish_reason={finish_reason})."
            )

        if not isinstance(parsed, contract.model):
            parsed = contract.validate(parsed)
        logger.debug("Gemini produced %s with model %s", contract.name, self._model_name)
        return parsed
