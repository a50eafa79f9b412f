"""SchemaContract: one output-shape description shared by every provider.

The contract wraps a pydantic model. Gemini receives the model itself as its
``response_schema``; the OpenAI fallback receives the JSON Schema text
generated from the same model. Both paths validate through ``validate``, so
the two providers cannot drift apart.
"""

import json
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class SchemaContract(Generic[ModelT]):
    """Structural description of the expected generation output."""
    model: type[ModelT]

    def __post_init__(self):
        if not (isinstance(self.model, type) and issubclass(self.model, BaseModel)):
            raise TypeError(f"SchemaContract requires a pydantic model class, got {self.model!r}")

    @property
    def name(self) -> str:
        return self.model.__name__

    @property
    def fields(self) -> list[str]:
        """Field names in declaration order."""
        return list(self.model.model_fields)

    def json_schema(self) -> dict[str, Any]:
        return self.model.model_json_schema()

    def json_schema_text(self) -> str:
        """Compact JSON Schema text for embedding in a prompt."""
        return json.dumps(self.json_schema(), separators=(",", ":"), sort_keys=True)

    def validate(self, data: Any) -> ModelT:
        """Validate parsed data; raises pydantic.ValidationError on mismatch."""
        if isinstance(data, self.model):
            data = data.model_dump()
        return self.model.model_validate(data)
