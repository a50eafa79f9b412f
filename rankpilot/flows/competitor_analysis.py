"""Competitor keyword ranking and content gap flow."""

import logging

from rankpilot.llm.client import StructuredGenerator
from rankpilot.llm.schema import SchemaContract
from rankpilot.prompts.manager import PromptManager, get_prompt_manager
from rankpilot.schemas.competitor import CompetitorAnalysisInput, CompetitorAnalysisOutput

logger = logging.getLogger(__name__)

COMPETITOR_ANALYSIS_CONTRACT = SchemaContract(CompetitorAnalysisOutput)


def _bullets(items) -> str:
    return "\n".join(f"- {item}" for item in items)


async def analyze_competitors(
    your_url: str,
    competitor_urls: list[str],
    keywords: list[str],
    generator: StructuredGenerator,
    prompts: PromptManager | None = None,
) -> CompetitorAnalysisOutput:
    """Compare simulated rankings of ``your_url`` against competitors and list content gaps."""
    data = CompetitorAnalysisInput(
        your_url=your_url,
        competitor_urls=competitor_urls,
        keywords=keywords,
    )
    prompt = (prompts or get_prompt_manager()).render(
        "competitor_analysis",
        your_url=str(data.your_url),
        competitor_list=_bullets(str(u) for u in data.competitor_urls),
        keyword_list=_bullets(data.keywords),
    )
    logger.info(
        "Running competitor analysis for %s (%d competitors, %d keywords)",
        data.your_url, len(data.competitor_urls), len(data.keywords),
    )
    return await generator.generate(prompt.system, prompt.user, COMPETITOR_ANALYSIS_CONTRACT)
