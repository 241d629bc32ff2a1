"""Prompt composer — ContentPlan entry to ordered article-creation prompts.

Documents are composed in a fixed order, which is also their ordinal when
listed in the manifest:

    1. reference_collection.md
    2. customer_understanding.md
    3. section_1.md ... section_N.md   (one per needs keyword, sheet order)
    4. summary_section.md
    5. introduction.md
    6. title_generation.md
    7. meta_description.md
    8. article_creation_guide.md

Usage:
    composer = PromptComposer(TemplateEngine(library))
    prompt_set = composer.compose(client_id, "01", item, profile, customer_prompt, generated_at)
"""

from __future__ import annotations

from datetime import date, datetime

from src.common.logging import setup_logging
from src.common.models import ArticleRule, ContentItem, CustomerProfile
from src.prompt_engine.template_engine.models import PromptDocument
from src.prompt_engine.template_engine.renderer import GuideRenderer, TemplateEngine

from .models import GUIDE_DOCUMENT_NAME, ArticlePromptSet, ComposerConfig, SectionTemplate
from .prompts import (
    build_customer_values,
    build_introduction_values,
    build_meta_description_values,
    build_reference_values,
    build_section_heading,
    build_section_values,
    build_summary_values,
    build_title_values,
)

logger = setup_logging(module_name="content_writer")


class PromptComposer:
    """Composes the article-creation prompt set for one content item.

    Composition is deterministic: the only time-dependent input is the
    explicitly passed ``generated_at``.
    """

    def __init__(
        self,
        engine: TemplateEngine,
        guide_renderer: GuideRenderer | None = None,
        config: ComposerConfig | None = None,
    ):
        self.engine = engine
        self.guide_renderer = guide_renderer or GuideRenderer()
        self.config = config or ComposerConfig()

    def compose(
        self,
        client_id: str,
        content_number: str,
        item: ContentItem,
        profile: CustomerProfile,
        customer_prompt: str,
        generated_at: datetime,
        rules: dict[str, ArticleRule] | None = None,
    ) -> ArticlePromptSet:
        """Compose every document for an item, in manifest order."""
        service_name = profile.first_person or self.config.default_service_name
        company_name = profile.company_name or self.config.default_company_name

        documents = [
            self.engine.compose(
                SectionTemplate.REFERENCE_COLLECTION.value,
                build_reference_values(item),
                "reference_collection.md",
            ),
            self.engine.compose(
                SectionTemplate.CUSTOMER_UNDERSTANDING.value,
                build_customer_values(customer_prompt, company_name),
                "customer_understanding.md",
            ),
        ]
        documents.extend(self.compose_sections(item, profile, customer_prompt))
        documents.extend([
            self.engine.compose(
                SectionTemplate.SUMMARY_SECTION.value,
                build_summary_values(item, service_name),
                "summary_section.md",
            ),
            self.engine.compose(
                SectionTemplate.INTRODUCTION.value,
                build_introduction_values(item, profile),
                "introduction.md",
            ),
            self.engine.compose(
                SectionTemplate.TITLE_GENERATION.value,
                build_title_values(item, profile),
                "title_generation.md",
            ),
            self.engine.compose(
                SectionTemplate.META_DESCRIPTION.value,
                build_meta_description_values(item),
                "meta_description.md",
            ),
            self.compose_guide(
                client_id, content_number, item, profile, generated_at.date(), rules
            ),
        ])

        logger.info(
            "Composed %d prompts for %s %s", len(documents), client_id, item.content_number
        )
        return ArticlePromptSet(
            client_id=client_id,
            content_number=content_number,
            item=item,
            generated_at=generated_at,
            documents=documents,
        )

    def compose_sections(
        self,
        item: ContentItem,
        profile: CustomerProfile,
        customer_prompt: str,
    ) -> list[PromptDocument]:
        """One section prompt per needs keyword, numbered from 1."""
        return [
            self.engine.compose(
                SectionTemplate.SECTION_CREATION.value,
                build_section_values(need, profile, customer_prompt, self.config.word_count),
                f"section_{i}.md",
                heading=build_section_heading(i, need),
            )
            for i, need in enumerate(item.needs_keywords, start=1)
        ]

    def compose_guide(
        self,
        client_id: str,
        content_number: str,
        item: ContentItem,
        profile: CustomerProfile,
        created_on: date,
        rules: dict[str, ArticleRule] | None = None,
    ) -> PromptDocument:
        body = self.guide_renderer.render(
            "article_creation_guide",
            {
                "client_id": client_id,
                "content_number": content_number,
                "item": item,
                "company_name": profile.company_name or self.config.default_company_name,
                "service_name": profile.first_person or "サービス名未設定",
                "word_count": self.config.word_count,
                "rules": list((rules or {}).values()),
                "created_on": created_on.isoformat(),
            },
        )
        return PromptDocument(name=GUIDE_DOCUMENT_NAME, body=body)


def render_customer_prompt(
    profile: CustomerProfile,
    created_on: date,
    guide_renderer: GuideRenderer | None = None,
) -> str:
    """Customer-understanding prompt written at setup time."""
    renderer = guide_renderer or GuideRenderer()
    return renderer.render(
        "customer_prompt",
        {
            "profile": profile,
            "company_name": profile.company_name or "企業名未設定",
            "service_name": profile.first_person or "サービス名未設定",
            "created_on": created_on.isoformat(),
        },
    )
