"""Data models for the content writer module."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from src.common.models import ContentItem
from src.prompt_engine.template_engine.models import PromptDocument


class SectionTemplate(str, Enum):
    """Template names in the section template store."""
    REFERENCE_COLLECTION = "reference_url_collection"
    CUSTOMER_UNDERSTANDING = "customer_understanding"
    SECTION_CREATION = "section_creation"
    SUMMARY_SECTION = "summary_section"
    INTRODUCTION = "introduction"
    TITLE_GENERATION = "title_generation"
    META_DESCRIPTION = "meta_description"


GUIDE_DOCUMENT_NAME = "article_creation_guide.md"
MANIFEST_NAME = "article_prompts.json"


@dataclass
class ComposerConfig:
    """Defaults used when composing article prompts."""
    word_count: str = "800-900"  # per section
    default_service_name: str = "サービス名"
    default_company_name: str = "企業名未設定"


@dataclass
class ArticlePromptSet:
    """Ordered prompt documents for one content item."""
    client_id: str
    content_number: str
    item: ContentItem
    generated_at: datetime
    documents: list[PromptDocument] = field(default_factory=list)

    @property
    def document_names(self) -> list[str]:
        return [doc.name for doc in self.documents]

    def to_manifest(self) -> dict:
        """Manifest describing the set; ordinals start at 1 in composition order."""
        return {
            "metadata": {
                "client_id": self.client_id,
                "content_number": self.content_number,
                "timestamp": self.generated_at.isoformat(),
                "description": "SEO記事作成用プロンプト集合",
            },
            "keyword_info": self.item.model_dump(),
            "steps": [
                {
                    "ordinal": i,
                    "name": doc.name,
                    "template": doc.template_name,
                    "empty": doc.is_empty,
                }
                for i, doc in enumerate(self.documents, start=1)
            ],
        }
