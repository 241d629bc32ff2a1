"""
Data models for the template engine.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TemplateDefinition:
    """A named text body with {token} placeholders."""
    name: str
    body: str


@dataclass(frozen=True)
class PromptDocument:
    """One composed output document."""
    name: str  # file name, e.g. "section_1.md"
    body: str
    template_name: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.body
