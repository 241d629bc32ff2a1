"""Data models for the article modifier module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from src.common.errors import UnknownModificationTypeError
from src.prompt_engine.template_engine.models import PromptDocument

ALL_SELECTOR = "all"
GUIDE_DOCUMENT_NAME = "modification_guide.md"


class ModificationType(str, Enum):
    """Revision strategies. Each value is also its template name."""
    AI_EXPRESSION_ELIMINATION = "ai_expression_elimination"
    CONTENT_STRATEGY_ADJUSTMENT = "content_strategy_adjustment"
    SERVICE_SPECIFIC_POSITIONING = "service_specific_positioning"
    QUALITY_VALIDATION = "quality_validation"

    @property
    def label(self) -> str:
        return TYPE_LABELS[self]

    @property
    def document_name(self) -> str:
        return f"{self.value}.md"


TYPE_LABELS: dict[ModificationType, str] = {
    ModificationType.AI_EXPRESSION_ELIMINATION: "AI表現排除・自然文化",
    ModificationType.CONTENT_STRATEGY_ADJUSTMENT: "コンテンツ戦略調整",
    ModificationType.SERVICE_SPECIFIC_POSITIONING: "サービス特化ポジショニング",
    ModificationType.QUALITY_VALIDATION: "品質検証・最終チェック",
}
ALL_LABEL = "包括的記事修正"

_ALIASES: dict[str, ModificationType] = {
    "service_positioning": ModificationType.SERVICE_SPECIFIC_POSITIONING,
}


def parse_selector(selector: str) -> list[ModificationType]:
    """Resolve a selector to the types it covers, in enumeration order.

    Accepts the enum values, their hyphenated spellings, the short
    ``service-positioning`` alias and ``all``.

    Raises:
        UnknownModificationTypeError: For any other value.
    """
    normalized = selector.strip().lower().replace("-", "_")
    if normalized == ALL_SELECTOR:
        return list(ModificationType)
    if normalized in _ALIASES:
        return [_ALIASES[normalized]]
    try:
        return [ModificationType(normalized)]
    except ValueError:
        raise UnknownModificationTypeError(selector) from None


@dataclass
class ModificationResult:
    """Modification prompts composed for one article."""
    client_id: str
    content_number: str
    selector: str
    types: list[ModificationType] = field(default_factory=list)
    documents: list[PromptDocument] = field(default_factory=list)

    @property
    def label(self) -> str:
        if len(self.types) == 1:
            return self.types[0].label
        return ALL_LABEL
