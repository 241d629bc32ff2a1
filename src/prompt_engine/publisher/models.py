"""Data models for the publisher module."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.common.models import ContentPlan
from src.prompt_engine.article_modifier.models import ModificationResult
from src.prompt_engine.content_writer.models import ArticlePromptSet


@dataclass
class SetupResult:
    """Result of ingesting an order workbook."""
    client_id: str
    plan: ContentPlan
    written_keys: list[str] = field(default_factory=list)


@dataclass
class CreateResult:
    """Result of composing and saving an article prompt set."""
    prompt_set: ArticlePromptSet
    output_prefix: str
    written_keys: list[str] = field(default_factory=list)


@dataclass
class ModifyResult:
    """Result of composing and saving modification prompts."""
    modification: ModificationResult
    output_prefix: str
    written_keys: list[str] = field(default_factory=list)


def content_prefix(client_id: str, content_number: str) -> str:
    """Output key prefix: {client_id}/content_{content_number}"""
    return f"{client_id}/content_{content_number}"
