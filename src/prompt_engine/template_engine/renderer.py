"""
Template rendering.

Two renderers live here:

- ``TemplateEngine`` composes library templates with ``{token}``
  placeholders. Each supplied value replaces only the first occurrence of
  its token; tokens without a value stay in the output as literal text.
- ``GuideRenderer`` renders the packaged Jinja2 guide documents (customer
  prompt, article creation guide, modification guide).
"""

from pathlib import Path
from typing import Any, Mapping, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .library import TemplateLibrary
from .models import PromptDocument


def substitute(body: str, values: Mapping[str, str]) -> str:
    """
    Replace the first occurrence of each ``{name}`` with its value.

    Values are applied in mapping order. Placeholders with no value are
    left untouched.

    Args:
        body: Template body
        values: Placeholder name to replacement text

    Returns:
        Substituted text
    """
    for name, value in values.items():
        body = body.replace("{" + name + "}", str(value), 1)
    return body


class TemplateEngine:
    """
    Composes PromptDocuments from a TemplateLibrary.

    Usage:
        engine = TemplateEngine(library)
        doc = engine.compose("summary_section", {"company_name": "..."}, "summary_section.md")
    """

    def __init__(self, library: TemplateLibrary):
        self.library = library

    def render(self, template_name: str, values: Mapping[str, str]) -> str:
        """Substitute values into a named template ("" if the template is missing)."""
        return substitute(self.library.body(template_name), values)

    def compose(
        self,
        template_name: str,
        values: Mapping[str, str],
        document_name: Optional[str] = None,
        heading: str = "",
    ) -> PromptDocument:
        """
        Compose one document.

        Args:
            template_name: Library template to expand
            values: Placeholder values (may be partial)
            document_name: Output file name. Defaults to "{template_name}.md"
            heading: Optional text placed before the composed body

        Returns:
            Immutable PromptDocument
        """
        body = self.render(template_name, values)
        return PromptDocument(
            name=document_name or f"{template_name}.md",
            body=heading + body,
            template_name=template_name,
        )


class GuideRenderer:
    """
    Renders the fixed guide documents using Jinja2 templates.

    Usage:
        renderer = GuideRenderer()
        markdown = renderer.render("customer_prompt", {"profile": profile, ...})
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        """
        Initialize the guide renderer.

        Args:
            templates_dir: Path to templates directory.
                          Defaults to ./templates relative to this file.
        """
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, guide_name: str, context: dict[str, Any]) -> str:
        """
        Render a guide template.

        Args:
            guide_name: Template name without extension (e.g., "customer_prompt")
            context: Template variables

        Returns:
            Rendered markdown string
        """
        template = self.env.get_template(f"{guide_name}.md.jinja2")
        return template.render(**context)
