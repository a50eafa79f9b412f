"""Backlink profile analysis flow."""

import logging

from rankpilot.llm.client import StructuredGenerator
from rankpilot.llm.schema import SchemaContract
from rankpilot.prompts.manager import PromptManager, get_prompt_manager
from rankpilot.schemas.link_analysis import LinkAnalysisInput, LinkAnalysisOutput

logger = logging.getLogger(__name__)

LINK_ANALYSIS_CONTRACT = SchemaContract(LinkAnalysisOutput)


async def analyze_links(
    url: str,
    generator: StructuredGenerator,
    prompts: PromptManager | None = None,
) -> LinkAnalysisOutput:
    """Simulate a backlink profile for ``url``."""
    data = LinkAnalysisInput(url=url)
    prompt = (prompts or get_prompt_manager()).render("link_analysis", url=str(data.url))
    logger.info("Running link analysis for %s", data.url)
    return await generator.generate(prompt.system, prompt.user, LINK_ANALYSIS_CONTRACT)
