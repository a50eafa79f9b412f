"""Tests for the SEO flows with a mocked generator.

Verifies:
- Each flow renders its prompt and passes its own contract
- Inputs are validated before any AI call
- The SEO audit fetches page text, truncates it, and degrades when fetching fails
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from pydantic import ValidationError

from rankpilot.config import Settings
from rankpilot.flows.competitor_analysis import COMPETITOR_ANALYSIS_CONTRACT, analyze_competitors
from rankpilot.flows.link_analysis import LINK_ANALYSIS_CONTRACT, analyze_links
from rankpilot.flows.seo_audit import (
    AUDIT_CONTRACT,
    CONTENT_UNAVAILABLE,
    audit_url,
    extract_body_text,
)
from rankpilot.llm.client import StructuredGenerator
from rankpilot.llm.errors import PrimaryProviderError

LINK_RESULT = {
    "backlinks": [
        {
            "referring_domain": "blog.example.org",
            "backlink_url": "https://blog.example.org/post",
            "anchor_text": "read more",
            "domain_authority": 42,
        }
    ],
    "summary": {"total_backlinks": 1, "referring_domains": 1},
}

AUDIT_RESULT = {
    "overall_score": 72,
    "items": [
        {"id": "title-tags", "name": "Title Tags", "score": 80, "details": "Good length.", "status": "good"},
        {"id": "h1-tags", "name": "H1 Tags", "score": 40, "details": "Two H1 tags.", "status": "warning"},
    ],
    "summary": "Fix duplicate H1 tags.",
}

PAGE_HTML = "<html><head><title>T</title></head><body><h1>Hello</h1><p>SEO world</p></body></html>"


def _generator(contract, payload):
    gen = MagicMock(spec=StructuredGenerator)
    gen.generate = AsyncMock(return_value=contract.validate(payload))
    return gen


def _http_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestLinkAnalysis:

    @pytest.mark.asyncio
    async def test_passes_contract_and_url(self):
        gen = _generator(LINK_ANALYSIS_CONTRACT, LINK_RESULT)
        result = await analyze_links("https://example.com", gen)

        system, user, contract = gen.generate.call_args.args
        assert contract is LINK_ANALYSIS_CONTRACT
        assert "backlink" in system.lower()
        assert "https://example.com/" in user
        assert result.summary.total_backlinks == 1

    @pytest.mark.asyncio
    async def test_invalid_url_rejected_before_generation(self):
        gen = _generator(LINK_ANALYSIS_CONTRACT, LINK_RESULT)
        with pytest.raises(ValidationError):
            await analyze_links("not a url", gen)
        gen.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_generation_errors_propagate(self):
        gen = MagicMock(spec=StructuredGenerator)
        gen.generate = AsyncMock(side_effect=PrimaryProviderError("invalid api key"))
        with pytest.raises(PrimaryProviderError):
            await analyze_links("https://example.com", gen)


class TestCompetitorAnalysis:

    @pytest.mark.asyncio
    async def test_lists_competitors_and_keywords(self):
        payload = {
            "rankings": [
                {
                    "keyword": "seo tools",
                    "your_rank": {"rank": None, "reason": "No content on this topic"},
                    "competitor_ranks": [{"url": "https://rival.com/", "rank": 4, "reason": "Strong page"}],
                }
            ],
            "content_gaps": ["comparison post of SEO tools"],
        }
        gen = _generator(COMPETITOR_ANALYSIS_CONTRACT, payload)
        result = await analyze_competitors(
            "https://example.com", ["https://rival.com", "https://other.io"], ["seo tools", "rank tracker"], gen,
        )

        system, user, contract = gen.generate.call_args.args
        assert contract is COMPETITOR_ANALYSIS_CONTRACT
        assert "- https://rival.com/" in user
        assert "- https://other.io/" in user
        assert "- rank tracker" in user
        assert result.rankings[0].your_rank.rank is None

    @pytest.mark.asyncio
    async def test_requires_keywords(self):
        gen = _generator(COMPETITOR_ANALYSIS_CONTRACT, {"rankings": [], "content_gaps": []})
        with pytest.raises(ValidationError):
            await analyze_competitors("https://example.com", ["https://rival.com"], [], gen)
        gen.generate.assert_not_awaited()


class TestSeoAudit:

    @pytest.mark.asyncio
    async def test_includes_fetched_page_text(self):
        seen = {}

        def handler(request):
            seen["ua"] = request.headers["user-agent"]
            return httpx.Response(200, text=PAGE_HTML)

        gen = _generator(AUDIT_CONTRACT, AUDIT_RESULT)
        async with _http_client(handler) as client:
            result = await audit_url("https://example.com", gen, http_client=client, settings=Settings())

        _, user, contract = gen.generate.call_args.args
        assert contract is AUDIT_CONTRACT
        assert "Hello SEO world" in user
        assert "Mozilla/5.0" in seen["ua"]
        assert result.items[1].status == "warning"

    @pytest.mark.asyncio
    async def test_truncates_long_content(self):
        body = "<html><body><p>" + "a" * 500 + "</p></body></html>"
        gen = _generator(AUDIT_CONTRACT, AUDIT_RESULT)
        async with _http_client(lambda request: httpx.Response(200, text=body)) as client:
            await audit_url(
                "https://example.com", gen, http_client=client,
                settings=Settings(page_content_max_chars=50),
            )

        _, user, _ = gen.generate.call_args.args
        assert "a" * 50 in user
        assert "a" * 51 not in user

    @pytest.mark.asyncio
    async def test_http_error_degrades_to_unavailable(self):
        gen = _generator(AUDIT_CONTRACT, AUDIT_RESULT)
        async with _http_client(lambda request: httpx.Response(500, text="oops")) as client:
            result = await audit_url("https://example.com", gen, http_client=client, settings=Settings())

        _, user, _ = gen.generate.call_args.args
        assert CONTENT_UNAVAILABLE in user
        assert result.overall_score == 72

    @pytest.mark.asyncio
    async def test_connection_error_degrades_to_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        gen = _generator(AUDIT_CONTRACT, AUDIT_RESULT)
        async with _http_client(handler) as client:
            await audit_url("https://example.com", gen, http_client=client, settings=Settings())

        _, user, _ = gen.generate.call_args.args
        assert CONTENT_UNAVAILABLE in user

    def test_extract_body_text_ignores_head(self):
        assert extract_body_text(PAGE_HTML) == "Hello SEO world"
