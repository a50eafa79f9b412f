"""Structured LLM client abstract base class and request dataclass."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from pydantic import BaseModel

from rankpilot.llm.schema import SchemaContract

DEFAULT_TEMPERATURE = 0.1


@dataclass(frozen=True)
class GenerationRequest:
    """One structured generation call: prompts, output contract, temperature."""
    system_prompt: str
    user_prompt: str
    contract: SchemaContract
    temperature: float = DEFAULT_TEMPERATURE

    def combined_prompt(self) -> str:
        """System and user text as a single prompt, for backends without roles."""
        return f"{self.system_prompt}\n\n{self.user_prompt}"


class StructuredLLMClient(ABC):
    """Abstract provider adapter returning schema-valid objects."""

    name: str = "llm"

    @abstractmethod
    async def generate(self, request: GenerationRequest) -> BaseModel:
        """Return an instance of ``request.contract.model`` or raise."""
        ...


class StructuredGenerator(ABC):
    """Public generation interface consumed by the SEO flows."""

    @abstractmethod
    async def generate(self, system_prompt: str, user_prompt: str, contract: SchemaContract) -> BaseModel:
        """Return a schema-valid result or raise a GenerationError."""
        ...
