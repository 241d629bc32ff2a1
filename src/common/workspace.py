"""Workspace storage for client data and generated prompt documents.

A workspace is a flat key/blob store. Keys are ``/``-separated relative
paths; the local implementation maps them onto files under a root
directory. ``ClientStore`` lays out the per-client files on top of it:

    {client_id}/content_plan.json
    {client_id}/customer_prompt.md
    {client_id}/keywords/{content_key}.json
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Optional, Protocol

from .errors import MissingClientDataError
from .logging import setup_logging
from .models import ContentItem, ContentPlan

logger = setup_logging(module_name="workspace")

PLAN_FILENAME = "content_plan.json"
CUSTOMER_PROMPT_FILENAME = "customer_prompt.md"
KEYWORDS_DIRNAME = "keywords"


class WorkspaceRepository(Protocol):
    """Named-blob storage consumed by the engine."""

    def read(self, key: str) -> Optional[bytes]:
        ...

    def write(self, key: str, data: bytes) -> None:
        ...

    def list(self, prefix: str = "") -> list[str]:
        ...

    def delete(self, key: str) -> None:
        ...


class LocalWorkspace:
    """WorkspaceRepository backed by a directory on the local filesystem."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def _path_for(self, key: str) -> Path:
        parts = PurePosixPath(key).parts
        if not parts or key.startswith("/") or ".." in parts:
            raise ValueError(f"Invalid workspace key: {key!r}")
        return self.root.joinpath(*parts)

    def read(self, key: str) -> Optional[bytes]:
        path = self._path_for(key)
        if not path.is_file():
            return None
        return path.read_bytes()

    def write(self, key: str, data: bytes) -> None:
        path = self._path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)

    def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""
        self._path_for(key).unlink(missing_ok=True)

    def list(self, prefix: str = "") -> list[str]:
        """Return all file keys under the root that start with prefix, sorted."""
        if not self.root.exists():
            return []
        keys = [
            p.relative_to(self.root).as_posix()
            for p in self.root.rglob("*")
            if p.is_file()
        ]
        return sorted(k for k in keys if k.startswith(prefix))

    def read_text(self, key: str) -> Optional[str]:
        data = self.read(key)
        return None if data is None else data.decode("utf-8")

    def write_text(self, key: str, text: str) -> None:
        self.write(key, text.encode("utf-8"))


class ClientStore:
    """Per-client persistence of content plans and customer prompts."""

    def __init__(self, workspace: WorkspaceRepository):
        self.workspace = workspace

    def save_plan(self, plan: ContentPlan, customer_prompt: str) -> list[str]:
        """Persist a plan, its customer prompt and one keyword file per item.

        Keyword files of items no longer in the plan are deleted, so the
        client directory always mirrors the latest plan.

        Returns:
            Keys written, in write order.
        """
        client_id = plan.client_id
        if not client_id:
            raise MissingClientDataError("G-IDが取得できません")

        written = []
        prompt_key = f"{client_id}/{CUSTOMER_PROMPT_FILENAME}"
        self.workspace.write(prompt_key, customer_prompt.encode("utf-8"))
        written.append(prompt_key)

        for item in plan.items.values():
            key = f"{client_id}/{KEYWORDS_DIRNAME}/{item.content_key}.json"
            self.workspace.write(key, item.model_dump_json(indent=2).encode("utf-8"))
            written.append(key)

        for stale in self.list_keyword_files(client_id):
            if stale not in written:
                self.workspace.delete(stale)
                logger.info("Removed stale keyword file: %s", stale)

        plan_key = f"{client_id}/{PLAN_FILENAME}"
        self.workspace.write(plan_key, plan.to_json().encode("utf-8"))
        written.append(plan_key)

        logger.info("Saved content plan for %s (%d items)", client_id, len(plan.items))
        return written

    def load_plan(self, client_id: str) -> ContentPlan:
        data = self.workspace.read(f"{client_id}/{PLAN_FILENAME}")
        if data is None:
            raise MissingClientDataError(f"クライアントデータが見つかりません: {client_id}")
        return ContentPlan.from_json(data)

    def load_customer_prompt(self, client_id: str) -> str:
        data = self.workspace.read(f"{client_id}/{CUSTOMER_PROMPT_FILENAME}")
        if data is None:
            raise MissingClientDataError(f"顧客プロンプトが見つかりません: {client_id}")
        return data.decode("utf-8")

    def load_content_item(self, client_id: str, content_number: str) -> ContentItem:
        """Look up one content item from the stored plan."""
        return self.find_content_item(self.load_plan(client_id), content_number)

    @staticmethod
    def find_content_item(plan: ContentPlan, content_number: str) -> ContentItem:
        """Look up one content item in an already loaded plan.

        Raises:
            MissingClientDataError: If the plan has no such item.
        """
        item = plan.find_item(content_number)
        if item is None:
            raise MissingClientDataError(
                f"コンテンツ{content_number}のデータが見つかりません: {plan.client_id}"
            )
        return item

    def list_keyword_files(self, client_id: str) -> list[str]:
        return self.workspace.list(f"{client_id}/{KEYWORDS_DIRNAME}/")

