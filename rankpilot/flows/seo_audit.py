"""SEO URL audit flow: fetch the page, then ask for a scored audit.

Page fetching is best-effort. When the page cannot be retrieved the audit
still runs, with the model told that content is unavailable.
"""

import logging

import httpx
from bs4 import BeautifulSoup

from rankpilot.config import Settings, get_settings
from rankpilot.llm.client import StructuredGenerator
from rankpilot.llm.schema import SchemaContract
from rankpilot.prompts.manager import PromptManager, get_prompt_manager
from rankpilot.schemas.seo_audit import AuditUrlInput, AuditUrlOutput

logger = logging.getLogger(__name__)

AUDIT_CONTRACT = SchemaContract(AuditUrlOutput)

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

CONTENT_UNAVAILABLE = (
    "Content not available. Please perform the audit based on the URL and general "
    "SEO best practices. For content-specific checks like H1 and Readability, state "
    "that the content could not be retrieved."
)


def extract_body_text(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    root = soup.body or soup
    return root.get_text(" ", strip=True)


async def fetch_page_text(
    url: str,
    http_client: httpx.AsyncClient,
    *,
    timeout: float,
    max_chars: int,
) -> str | None:
    """Return the page's body text truncated to ``max_chars``, or None if it cannot be fetched."""
    try:
        logger.info("Fetching content for %s", url)
        response = await http_client.get(
            url,
            headers={"User-Agent": BROWSER_USER_AGENT},
            timeout=timeout,
            follow_redirects=True,
        )
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning("Could not fetch content for %s: %s", url, e)
        return None

    text = extract_body_text(response.text)
    if not text:
        logger.info("No content fetched for %s", url)
        return None
    if len(text) > max_chars:
        logger.info("Content for %s is %d chars, truncating to %d", url, len(text), max_chars)
        text = text[:max_chars]
    return text


async def audit_url(
    url: str,
    generator: StructuredGenerator,
    http_client: httpx.AsyncClient | None = None,
    prompts: PromptManager | None = None,
    settings: Settings | None = None,
) -> AuditUrlOutput:
    """Audit ``url`` for technical and content SEO factors."""
    settings = settings or get_settings()
    data = AuditUrlInput(url=url)
    target = str(data.url)

    fetch_kwargs = {"timeout": settings.page_fetch_timeout, "max_chars": settings.page_content_max_chars}
    if http_client is None:
        async with httpx.AsyncClient() as client:
            content = await fetch_page_text(target, client, **fetch_kwargs)
    else:
        content = await fetch_page_text(target, http_client, **fetch_kwargs)

    prompt = (prompts or get_prompt_manager()).render(
        "seo_audit",
        url=target,
        content=content or CONTENT_UNAVAILABLE,
    )
    return await generator.generate(prompt.system, prompt.user, AUDIT_CONTRACT)
