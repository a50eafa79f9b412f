"""Pydantic schemas for the SEO URL audit flow."""

from typing import Literal

from pydantic import BaseModel, Field, HttpUrl


class AuditUrlInput(BaseModel):
    url: HttpUrl = Field(..., description="The URL to audit.")


class AuditItem(BaseModel):
    id: str = Field(..., description="A unique identifier for the audit item.")
    name: str = Field(
        ..., description='The name of the audit item (e.g., "Title Tags", "Mobile-Friendliness").',
    )
    score: float = Field(..., description="The score for this specific audit item (0-100).")
    details: str = Field(..., description="Detailed findings or suggestions for this item.")
    status: Literal["good", "warning", "error"] = Field(..., description="The status of the audit item.")


class AuditUrlOutput(BaseModel):
    overall_score: float = Field(..., description="The overall SEO score for the URL (0-100).")
    items: list[AuditItem] = Field(..., description="A list of detailed audit items.")
    summary: str = Field(..., description="A brief overall summary of the audit findings.")
