"""Modification dispatcher — prior article text to revision prompts.

Shares the TemplateEngine with the article composer but keeps its own
template library (article_modification_prompts.json).

Usage:
    dispatcher = ModificationDispatcher(TemplateEngine(modification_library))
    documents = dispatcher.dispatch("all", article_text, profile)
"""

from __future__ import annotations

from datetime import date

from src.common.logging import setup_logging
from src.common.models import CustomerProfile
from src.prompt_engine.template_engine.models import PromptDocument
from src.prompt_engine.template_engine.renderer import GuideRenderer, TemplateEngine

from .models import GUIDE_DOCUMENT_NAME, ModificationResult, ModificationType, parse_selector

logger = setup_logging(module_name="article_modifier")

DEFAULT_SERVICE_NAME = "サービス名"


class ModificationDispatcher:
    """Composes one modification prompt per selected type."""

    def __init__(
        self,
        engine: TemplateEngine,
        word_count: str = "800-900",
        guide_renderer: GuideRenderer | None = None,
    ):
        self.engine = engine
        self.word_count = word_count
        self.guide_renderer = guide_renderer or GuideRenderer()

    def dispatch(
        self,
        selector: str,
        article_content: str,
        profile: CustomerProfile,
    ) -> list[PromptDocument]:
        """Compose documents for a selector ("all" or a single type).

        A type whose template is missing from the library yields an empty
        document.

        Raises:
            UnknownModificationTypeError: If the selector is not recognized.
        """
        types = parse_selector(selector)
        documents = [self.compose(t, article_content, profile) for t in types]
        for doc in documents:
            if doc.is_empty:
                logger.warning("Modification template missing or empty: %s", doc.template_name)
        return documents

    def compose(
        self,
        modification_type: ModificationType,
        article_content: str,
        profile: CustomerProfile,
    ) -> PromptDocument:
        values = self.build_values(modification_type, article_content, profile)
        return self.engine.compose(
            modification_type.value, values, modification_type.document_name
        )

    def build_values(
        self,
        modification_type: ModificationType,
        article_content: str,
        profile: CustomerProfile,
    ) -> dict[str, str]:
        # article text goes last so its own braces are never substituted
        values = {"service_name": profile.first_person or DEFAULT_SERVICE_NAME}
        if modification_type is ModificationType.AI_EXPRESSION_ELIMINATION:
            values["word_count"] = self.word_count
        values["article_content"] = article_content
        return values

    def modify(
        self,
        client_id: str,
        content_number: str,
        selector: str,
        article_content: str,
        profile: CustomerProfile,
    ) -> ModificationResult:
        """Dispatch and wrap the documents with their selection metadata."""
        types = parse_selector(selector)
        documents = self.dispatch(selector, article_content, profile)
        logger.info(
            "Composed %d modification prompts for %s content %s",
            len(documents),
            client_id,
            content_number,
        )
        return ModificationResult(
            client_id=client_id,
            content_number=content_number,
            selector=selector,
            types=types,
            documents=documents,
        )

    def compose_guide(
        self,
        result: ModificationResult,
        article_path: str,
        content_label: str,
        created_on: date,
    ) -> PromptDocument:
        body = self.guide_renderer.render(
            "modification_guide",
            {
                "type_label": result.label,
                "client_id": result.client_id,
                "content_number": result.content_number,
                "content_label": content_label,
                "article_path": article_path,
                "document_names": [doc.name for doc in result.documents],
                "created_on": created_on.isoformat(),
            },
        )
        return PromptDocument(name=GUIDE_DOCUMENT_NAME, body=body)
