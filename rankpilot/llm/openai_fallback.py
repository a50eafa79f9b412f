"""OpenAI fallback client: schema embedded in the prompt, validated after."""

import json
import logging
import httpx
from openai import AsyncOpenAI, AsyncAzureOpenAI
from pydantic import BaseModel

from rankpilot.llm.client import StructuredLLMClient, GenerationRequest
from rankpilot.config import Settings

logger = logging.getLogger(__name__)

SCHEMA_DIRECTIVE = (
    "CRITICAL: Your entire response MUST be a single, valid JSON object that "
    "strictly adheres to the following JSON Schema: {schema}"
)


def build_fallback_system_prompt(system_prompt: str, schema_text: str) -> str:
    return f"{system_prompt}\n\n" + SCHEMA_DIRECTIVE.format(schema=schema_text)


class OpenAIJsonClient(StructuredLLMClient):
    """Fallback provider: OpenAI chat completions in JSON-object mode.

    The contract is enforced twice: once as an instruction in the system
    prompt, once by validating the parsed response. Empty content, invalid
    JSON and schema mismatches all raise.
    """

    name = "openai"

    def __init__(self, settings: Settings):
        if not settings.openai_api_key:
            raise ValueError("No OpenAI API key configured. Set OPENAI_API_KEY in .env")
        self._json_mode = settings.openai_json_mode
        timeout = httpx.Timeout(settings.llm_timeout, connect=10)

        if settings.uses_azure:
            self._model_name = settings.azure_openai_deployment or settings.openai_model
            self._client = AsyncAzureOpenAI(
                api_key=settings.openai_api_key,
                azure_endpoint=settings.azure_openai_endpoint,
                api_version=settings.azure_openai_api_version,
                timeout=timeout,
            )
        else:
            self._model_name = settings.openai_model
            self._client = AsyncOpenAI(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url or None,
                timeout=timeout,
            )

    async def generate(self, request: GenerationRequest) -> BaseModel:
        contract = request.contract
        system = build_fallback_system_prompt(request.system_prompt, contract.json_schema_text())

        kwargs = {}
        if self._json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        response = await self._client.chat.completions.create(
            model=self._model_name,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": request.user_prompt},
            ],
            temperature=request.temperature,
            **kwargs,
        )

        text = response.choices[0].message.content if response.choices else None
        if not text or not text.strip():
            raise ValueError("OpenAI returned no content.")

        data = json.loads(text)
        result = contract.validate(data)
        logger.debug("OpenAI produced %s with model %s", contract.name, self._model_name)
        return result
