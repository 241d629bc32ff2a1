# Content Writer — article-creation prompt composition
"""
Content Writer module for composing the article-creation prompt set of one
content item from the stored ContentPlan and the template library.
"""

from .composer import PromptComposer, render_customer_prompt
from .models import (
    GUIDE_DOCUMENT_NAME,
    MANIFEST_NAME,
    ArticlePromptSet,
    ComposerConfig,
    SectionTemplate,
)

__all__ = [
    "GUIDE_DOCUMENT_NAME",
    "MANIFEST_NAME",
    "ArticlePromptSet",
    "ComposerConfig",
    "PromptComposer",
    "SectionTemplate",
    "render_customer_prompt",
]
