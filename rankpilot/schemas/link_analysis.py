"""Pydantic schemas for the backlink analysis flow."""

from pydantic import BaseModel, Field, HttpUrl


class LinkAnalysisInput(BaseModel):
    url: HttpUrl = Field(..., description="The URL to analyze for backlinks.")


class Backlink(BaseModel):
    referring_domain: str = Field(..., description="The domain of the page containing the backlink.")
    backlink_url: str = Field(..., description="The full URL of the page containing the backlink.")
    anchor_text: str = Field(..., description="The anchor text of the backlink.")
    domain_authority: float = Field(
        ..., ge=0, le=100,
        description="A simulated Domain Authority score (0-100) for the referring domain.",
    )


class BacklinkSummary(BaseModel):
    total_backlinks: int = Field(..., description="The total number of backlinks found.")
    referring_domains: int = Field(..., description="The number of unique referring domains.")


class LinkAnalysisOutput(BaseModel):
    backlinks: list[Backlink] = Field(..., description="An array of discovered backlinks.")
    summary: BacklinkSummary = Field(..., description="A summary of the backlink profile.")
