"""Run each SEO flow once against the live providers and sanity-check the output.

Uses the same generator wiring as the application (Gemini primary, OpenAI
fallback, response cache), so it doubles as a smoke test for API keys and
provider failover.
"""

import asyncio
import logging
import sys

from rankpilot.config import get_settings, setup_logging
from rankpilot.dependencies import build_generator
from rankpilot.flows.competitor_analysis import analyze_competitors
from rankpilot.flows.link_analysis import analyze_links
from rankpilot.flows.seo_audit import audit_url
from rankpilot.llm.errors import GenerationError

logger = logging.getLogger("demo_runner")

DEMO_URL = "https://www.python.org/"
DEMO_COMPETITORS = ["https://www.ruby-lang.org/", "https://go.dev/"]
DEMO_KEYWORDS = ["programming language", "learn to code", "open source language"]

AUDIT_ITEM_IDS = {
    "title-tags", "meta-descriptions", "h1-tags", "content-readability",
    "image-alts", "site-speed", "mobile-friendliness",
}


def check_links(result) -> list[str]:
    issues = []
    if not result.backlinks:
        issues.append("No backlinks returned")
    if result.summary.total_backlinks != len(result.backlinks):
        issues.append(
            f"total_backlinks={result.summary.total_backlinks} but {len(result.backlinks)} listed"
        )
    domains = {b.referring_domain for b in result.backlinks}
    if result.summary.referring_domains != len(domains):
        issues.append(
            f"referring_domains={result.summary.referring_domains} but {len(domains)} unique"
        )
    return issues


def check_competitors(result) -> list[str]:
    issues = []
    keywords = {r.keyword for r in result.rankings}
    missing = set(DEMO_KEYWORDS) - keywords
    if missing:
        issues.append(f"Missing rankings for: {', '.join(sorted(missing))}")
    for r in result.rankings:
        for rank in r.competitor_ranks:
            if rank.rank is None and not rank.reason:
                issues.append(f"{r.keyword}/{rank.url}: null rank without reason")
    return issues


def check_audit(result) -> list[str]:
    issues = []
    ids = {item.id for item in result.items}
    missing = AUDIT_ITEM_IDS - ids
    if missing:
        issues.append(f"Missing audit items: {', '.join(sorted(missing))}")
    if not 0 <= result.overall_score <= 100:
        issues.append(f"overall_score out of range: {result.overall_score}")
    if not result.summary:
        issues.append("Missing summary")
    return issues


async def main() -> int:
    settings = get_settings()
    setup_logging(settings)
    generator = build_generator(settings)

    demos = [
        ("Link Analysis", lambda: analyze_links(DEMO_URL, generator), check_links),
        ("Competitor Analysis",
         lambda: analyze_competitors(DEMO_URL, DEMO_COMPETITORS, DEMO_KEYWORDS, generator),
         check_competitors),
        ("SEO Audit", lambda: audit_url(DEMO_URL, generator, settings=settings), check_audit),
    ]

    results = []
    for i, (label, run, check) in enumerate(demos, 1):
        logger.info("=" * 80)
        logger.info("[%d/%d] %s", i, len(demos), label)
        try:
            output = await run()
        except GenerationError as e:
            logger.error("[%d/%d] FAILED: %s: %s", i, len(demos), label, e)
            results.append((label, "FAIL", [str(e)]))
            continue
        issues = check(output)
        verdict = "PASS" if not issues else "WARN"
        for issue in issues:
            logger.warning("  Issue: %s", issue)
        results.append((label, verdict, issues))

    logger.info("=" * 80)
    logger.info("SUMMARY")
    for label, verdict, issues in results:
        logger.info("  [%s] %s", verdict, label)
        for issue in issues[:3]:
            logger.info("       %s", issue)
    return 1 if any(v == "FAIL" for _, v, _ in results) else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
