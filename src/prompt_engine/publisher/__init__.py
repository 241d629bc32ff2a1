# Publisher — setup/create/modify pipeline
"""
Publisher module wiring extraction, composition and dispatch together and
saving the results to the client and output workspaces.
"""

from .models import CreateResult, ModifyResult, SetupResult, content_prefix
from .pipeline import PromptPipeline

__all__ = [
    "CreateResult",
    "ModifyResult",
    "PromptPipeline",
    "SetupResult",
    "content_prefix",
]
