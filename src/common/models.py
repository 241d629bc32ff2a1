"""Shared Pydantic data models for the SEO prompt engine.

These models define the data contract between order intake (spreadsheet
extraction) and the prompt engine. All modules import from here.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

CONTENT_MARKER = "コンテンツ"


class CustomerProfile(BaseModel):
    """Customer information from the shared-items sheet."""
    client_id: str
    spid: str = ""
    order_id: str = ""
    company_name: str = ""
    first_person: str = ""  # voice the article speaks as
    target_audience: str = ""
    service_features: str = ""
    qualifications: str = ""


class KeywordNeed(BaseModel):
    """Secondary keyword paired with a suggested section headline."""
    kind: str  # e.g. "ニーズKW1"
    keyword: str = ""
    headline: str = ""


class ContentItem(BaseModel):
    """One planned article with its keyword set."""
    content_number: str  # e.g. "コンテンツ1"
    target_keywords: str = ""
    needs_keywords: list[KeywordNeed] = Field(default_factory=list)

    @property
    def content_key(self) -> str:
        """File-safe key for the per-content keyword file."""
        return re.sub(r"\s+", "_", self.content_number.lower())


class ArticleRule(BaseModel):
    """One row of the article-rules sheet."""
    name: str
    word_count: str = ""
    keyword_rules: str = ""
    points: str = ""


class ContentPlan(BaseModel):
    """Customer profile plus the ordered content items of one order sheet."""
    profile: CustomerProfile
    items: dict[str, ContentItem] = Field(default_factory=dict)
    article_rules: dict[str, ArticleRule] = Field(default_factory=dict)

    @property
    def client_id(self) -> str:
        return self.profile.client_id

    def find_item(self, content_number: str) -> ContentItem | None:
        """Find an item by exact key or by its number ("01" matches "コンテンツ1")."""
        if content_number in self.items:
            return self.items[content_number]

        wanted = _content_ordinal(content_number)
        if wanted is None:
            return None
        for key, item in self.items.items():
            if _content_ordinal(key) == wanted:
                return item
        return None

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data: str | bytes) -> ContentPlan:
        return cls.model_validate_json(data)


def _content_ordinal(value: str) -> int | None:
    text = value.strip()
    if text.startswith(CONTENT_MARKER):
        text = text[len(CONTENT_MARKER):].strip()
    if text.isdigit():
        return int(text)
    return None
