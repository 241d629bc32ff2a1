# Common utilities and shared modules
"""
Shared components used by order intake and the prompt engine:
- Data models (Pydantic schemas)
- Workspace storage
- Error types
- Logging configuration
- Project configuration
"""

from .config import Settings, WorkbookSettings, resolve_project_root
from .errors import (
    MissingClientDataError,
    MissingSheetError,
    PromptEngineError,
    TemplateLoadError,
    UnknownModificationTypeError,
    WorkbookLoadError,
)
from .logging import setup_logging
from .workspace import ClientStore, LocalWorkspace, WorkspaceRepository

__all__ = [
    "Settings",
    "WorkbookSettings",
    "resolve_project_root",
    "PromptEngineError",
    "MissingSheetError",
    "MissingClientDataError",
    "UnknownModificationTypeError",
    "TemplateLoadError",
    "WorkbookLoadError",
    "setup_logging",
    "ClientStore",
    "LocalWorkspace",
    "WorkspaceRepository",
]
