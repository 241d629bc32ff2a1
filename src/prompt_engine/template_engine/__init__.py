# Template Engine Module
# {token} prompt templates + Jinja2 guide documents

from .library import TemplateLibrary, read_template_store
from .models import PromptDocument, TemplateDefinition
from .renderer import GuideRenderer, TemplateEngine, substitute

__all__ = [
    "GuideRenderer",
    "PromptDocument",
    "TemplateDefinition",
    "TemplateEngine",
    "TemplateLibrary",
    "read_template_store",
    "substitute",
]
