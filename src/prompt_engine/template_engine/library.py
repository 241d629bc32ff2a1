"""
Template library loaded from a JSON template store.

Store format::

    {
      "section_creation": {"template": "...{section_title}...", "description": "..."},
      ...
    }
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from src.common.errors import TemplateLoadError
from src.common.logging import setup_logging

from .models import TemplateDefinition

logger = setup_logging(module_name="template_engine")


class TemplateLibrary:
    """
    Immutable mapping of template name to TemplateDefinition.

    Usage:
        library = TemplateLibrary.load(Path("config/templates/section_prompts.json"))
        body = library.body("section_creation")
    """

    def __init__(self, templates: Optional[Mapping[str, str]] = None):
        definitions = {
            name: TemplateDefinition(name=name, body=body)
            for name, body in (templates or {}).items()
        }
        self._templates = MappingProxyType(definitions)

    @classmethod
    def load(cls, path: Path) -> "TemplateLibrary":
        """
        Load a library from a JSON store.

        An unreadable or malformed store degrades to an empty library; the
        failure is logged as a warning.

        Args:
            path: Path to the JSON template store

        Returns:
            Loaded (possibly empty) TemplateLibrary
        """
        try:
            raw = read_template_store(path)
        except TemplateLoadError as e:
            logger.warning("%s", e)
            return cls()
        library = cls.from_store(raw)
        logger.info("Loaded %d templates from %s", len(library), path)
        return library

    @classmethod
    def from_store(cls, raw: Mapping) -> "TemplateLibrary":
        """Build a library from the parsed store; entries without a template string are skipped."""
        templates = {}
        for name, entry in raw.items():
            if isinstance(entry, Mapping) and isinstance(entry.get("template"), str):
                templates[name] = entry["template"]
            else:
                logger.warning("Template entry %r has no template text, skipping", name)
        return cls(templates)

    def get(self, name: str) -> Optional[TemplateDefinition]:
        return self._templates.get(name)

    def body(self, name: str) -> str:
        """Template body, or "" when the template is not in the library."""
        definition = self._templates.get(name)
        return definition.body if definition else ""

    @property
    def names(self) -> list[str]:
        return list(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[TemplateDefinition]:
        return iter(self._templates.values())

    def __len__(self) -> int:
        return len(self._templates)


def read_template_store(path: Path) -> dict:
    """
    Read and parse a JSON template store.

    Raises:
        TemplateLoadError: If the file is missing, not UTF-8, or not a JSON object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TemplateLoadError(f"テンプレートの読み込みに失敗: {path}: {e}") from e

    if not isinstance(data, dict):
        raise TemplateLoadError(f"テンプレートの読み込みに失敗: {path}: not a JSON object")
    return data
