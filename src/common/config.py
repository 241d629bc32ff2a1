"""Project configuration and paths.

Settings are always built from an explicit project root. The root itself
comes from the caller (``--root``) or the ``SEO_SYSTEM_ROOT`` environment
variable; an optional ``config/settings.yaml`` under the root overrides
defaults.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

ROOT_ENV_VAR = "SEO_SYSTEM_ROOT"
SETTINGS_RELATIVE_PATH = Path("config") / "settings.yaml"


class WorkbookSettings(BaseModel):
    """Sheet names of the order workbook."""
    customer_sheet: str = "共有事項"
    keyword_sheet: str = "KW情報"
    rules_sheet: str = "記事ルール"


class Settings(BaseModel):
    """Top-level application settings."""
    project_root: Path
    templates_dir: Path
    customers_dir: Path
    output_dir: Path
    section_templates_file: str = "section_prompts.json"
    modification_templates_file: str = "article_modification_prompts.json"
    default_word_count: str = "800-900"
    workbook: WorkbookSettings = Field(default_factory=WorkbookSettings)

    @property
    def section_templates_path(self) -> Path:
        return self.templates_dir / self.section_templates_file

    @property
    def modification_templates_path(self) -> Path:
        return self.templates_dir / self.modification_templates_file

    @classmethod
    def for_root(cls, project_root: Path | str, **overrides) -> Settings:
        """Build settings with the standard directory layout under a root."""
        root = Path(project_root)
        data = {
            "project_root": root,
            "templates_dir": root / "config" / "templates",
            "customers_dir": root / "customers",
            "output_dir": root / "output",
        }
        data.update(overrides)
        return cls(**data)

    @classmethod
    def load(cls, project_root: Path | str) -> Settings:
        """Load settings for a root, applying config/settings.yaml if present.

        Relative directory values in the YAML file are resolved against the
        project root.
        """
        root = Path(project_root)
        settings_path = root / SETTINGS_RELATIVE_PATH
        overrides: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                overrides = yaml.safe_load(f) or {}
            for key in ("templates_dir", "customers_dir", "output_dir"):
                if key in overrides:
                    p = Path(overrides[key])
                    overrides[key] = p if p.is_absolute() else root / p
        return cls.for_root(root, **overrides)


def resolve_project_root(explicit: str | Path | None = None) -> Path:
    """Resolve the project root from an explicit value or the environment.

    Raises:
        ValueError: If neither an explicit root nor SEO_SYSTEM_ROOT is set.
    """
    if explicit:
        return Path(explicit).resolve()
    load_dotenv(Path.cwd() / ".env")
    root = os.getenv(ROOT_ENV_VAR, "")
    if not root:
        raise ValueError(f"{ROOT_ENV_VAR} not set and no --root given")
    return Path(root).resolve()
