"""Pydantic schemas for the competitor analysis flow."""

from pydantic import BaseModel, Field, HttpUrl


class CompetitorAnalysisInput(BaseModel):
    your_url: HttpUrl = Field(..., description="The URL of your website.")
    competitor_urls: list[HttpUrl] = Field(..., min_length=1, description="Your competitors' URLs.")
    keywords: list[str] = Field(..., min_length=1, description="Keywords to compare.")


class RankInfo(BaseModel):
    rank: int | None = Field(
        None,
        description="The simulated search engine rank, or null if not in the top 100.",
    )
    reason: str | None = Field(
        None,
        description="A brief explanation for the rank, required when rank is null.",
    )


class CompetitorRank(RankInfo):
    url: str = Field(..., description="The full competitor URL this rank belongs to.")


class KeywordRanking(BaseModel):
    keyword: str
    your_rank: RankInfo | None = None
    competitor_ranks: list[CompetitorRank] = Field(default_factory=list)


class CompetitorAnalysisOutput(BaseModel):
    rankings: list[KeywordRanking] = Field(
        ..., description="Keyword ranking data for your site and competitors.",
    )
    content_gaps: list[str] = Field(
        ..., description="Keywords or topics that competitors rank for but you do not.",
    )
