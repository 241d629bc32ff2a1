# Article Modifier — revision prompts for drafted articles
"""
Article modifier module: composes modification prompts (AI-expression
elimination, content-strategy adjustment, service positioning, quality
validation) for an already-drafted article.
"""

from .dispatcher import ModificationDispatcher
from .models import (
    ALL_LABEL,
    ALL_SELECTOR,
    ModificationResult,
    ModificationType,
    parse_selector,
)

__all__ = [
    "ALL_LABEL",
    "ALL_SELECTOR",
    "ModificationDispatcher",
    "ModificationResult",
    "ModificationType",
    "parse_selector",
]
