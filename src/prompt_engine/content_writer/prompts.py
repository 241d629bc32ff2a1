"""Placeholder value sets for the article-creation templates.

Each builder returns the values one template receives. Keys are the
``{token}`` names used in config/templates/section_prompts.json.
"""

from __future__ import annotations

from src.common.models import ContentItem, CustomerProfile, KeywordNeed


def build_reference_values(item: ContentItem) -> dict[str, str]:
    """Values for the reference-URL collection prompt."""
    needs = "\n".join(f"{need.kind}: {need.keyword}" for need in item.needs_keywords)
    return {
        "target_keywords": f"ターゲットKW: {item.target_keywords}",
        "needs_keywords": needs,
    }


def build_customer_values(customer_prompt: str, company_name: str) -> dict[str, str]:
    return {
        "company_name": company_name,
        "customer_prompt": customer_prompt,
    }


def build_section_values(
    need: KeywordNeed,
    profile: CustomerProfile,
    customer_prompt: str,
    word_count: str,
) -> dict[str, str]:
    """Values for one section prompt.

    The headline falls back to the keyword when the sheet leaves it empty.
    The customer prompt is passed through verbatim.
    """
    return {
        "section_title": need.headline or need.keyword,
        "keyword": need.keyword,
        "needs_type": need.kind,
        "word_count": word_count,
        "target_audience": profile.target_audience,
        "customer_prompt": customer_prompt,
    }


def build_section_heading(index: int, need: KeywordNeed) -> str:
    return f"# セクション{index}: {need.kind}\n\n"


def build_summary_values(item: ContentItem, service_name: str) -> dict[str, str]:
    return {
        "company_name": service_name,
        "target_keywords": item.target_keywords,
    }


def build_introduction_values(item: ContentItem, profile: CustomerProfile) -> dict[str, str]:
    headlines = "\n".join(
        f"- {need.headline or need.keyword}" for need in item.needs_keywords
    )
    return {
        "target_keywords": item.target_keywords,
        "section_headlines": headlines,
        "target_audience": profile.target_audience,
    }


def build_title_values(item: ContentItem, profile: CustomerProfile) -> dict[str, str]:
    return {
        "target_keywords": item.target_keywords,
        "first_person": profile.first_person,
    }


def build_meta_description_values(item: ContentItem) -> dict[str, str]:
    return {"target_keywords": item.target_keywords}
