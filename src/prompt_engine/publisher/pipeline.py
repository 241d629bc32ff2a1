"""Prompt pipeline — order workbook to saved prompt documents.

Orchestrates the three workflows:
setup:  workbook → SpreadsheetExtractor → ContentPlan → ClientStore
create: ClientStore → PromptComposer → output workspace
modify: ClientStore + article text → ModificationDispatcher → output workspace

Every workflow composes all of its documents before writing any of them.

Usage:
    pipeline = PromptPipeline.from_settings(Settings.load(root))
    pipeline.setup(Path("発注書.xlsx"))
    pipeline.create_article("G0016169", "01")
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Callable

from src.common.config import Settings
from src.common.logging import setup_logging
from src.common.workspace import ClientStore, LocalWorkspace, WorkspaceRepository
from src.order_intake.excel_analyzer.extractor import SpreadsheetExtractor
from src.order_intake.excel_analyzer.schema import WorkbookSchema
from src.prompt_engine.article_modifier.dispatcher import ModificationDispatcher
from src.prompt_engine.article_modifier.models import parse_selector
from src.prompt_engine.content_writer.composer import PromptComposer, render_customer_prompt
from src.prompt_engine.content_writer.models import MANIFEST_NAME, ComposerConfig
from src.prompt_engine.template_engine.library import TemplateLibrary
from src.prompt_engine.template_engine.renderer import GuideRenderer, TemplateEngine

from .models import CreateResult, ModifyResult, SetupResult, content_prefix

logger = setup_logging(module_name="publisher.pipeline")


class PromptPipeline:
    """End-to-end pipeline from order workbook to prompt documents.

    Steps:
    1. setup: extract the ContentPlan and save plan, customer prompt, keyword files
    2. create_article: compose the article prompt set of one content item
    3. modify_article: compose modification prompts for a drafted article
    """

    def __init__(
        self,
        clients: ClientStore,
        output: WorkspaceRepository,
        extractor: SpreadsheetExtractor,
        composer: PromptComposer,
        dispatcher: ModificationDispatcher,
        guide_renderer: GuideRenderer | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.clients = clients
        self.output = output
        self.extractor = extractor
        self.composer = composer
        self.dispatcher = dispatcher
        self.guide_renderer = guide_renderer or GuideRenderer()
        self.clock = clock

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        clock: Callable[[], datetime] = datetime.now,
    ) -> PromptPipeline:
        """Wire the pipeline from explicit settings."""
        guide_renderer = GuideRenderer()
        section_library = TemplateLibrary.load(settings.section_templates_path)
        modification_library = TemplateLibrary.load(settings.modification_templates_path)

        return cls(
            clients=ClientStore(LocalWorkspace(settings.customers_dir)),
            output=LocalWorkspace(settings.output_dir),
            extractor=SpreadsheetExtractor(WorkbookSchema.from_settings(settings.workbook)),
            composer=PromptComposer(
                TemplateEngine(section_library),
                guide_renderer,
                ComposerConfig(word_count=settings.default_word_count),
            ),
            dispatcher=ModificationDispatcher(
                TemplateEngine(modification_library),
                word_count=settings.default_word_count,
                guide_renderer=guide_renderer,
            ),
            guide_renderer=guide_renderer,
            clock=clock,
        )

    def setup(self, excel_path: Path) -> SetupResult:
        """Ingest an order workbook and persist the client's plan."""
        plan = self.extractor.analyze_excel(excel_path)
        customer_prompt = render_customer_prompt(
            plan.profile, self.clock().date(), self.guide_renderer
        )
        keys = self.clients.save_plan(plan, customer_prompt)
        logger.info("Setup complete: %s (%d files)", plan.client_id, len(keys))
        return SetupResult(client_id=plan.client_id, plan=plan, written_keys=keys)

    def create_article(self, client_id: str, content_number: str) -> CreateResult:
        """Compose and save the article prompt set for one content item.

        Raises:
            MissingClientDataError: If the client or content item is unknown.
        """
        plan = self.clients.load_plan(client_id)
        item = self.clients.find_content_item(plan, content_number)
        customer_prompt = self.clients.load_customer_prompt(client_id)

        prompt_set = self.composer.compose(
            client_id,
            content_number,
            item,
            plan.profile,
            customer_prompt,
            self.clock(),
            rules=plan.article_rules,
        )

        prefix = content_prefix(client_id, content_number)
        blobs = [(f"{prefix}/{doc.name}", doc.body) for doc in prompt_set.documents]
        blobs.append((
            f"{prefix}/{MANIFEST_NAME}",
            json.dumps(prompt_set.to_manifest(), ensure_ascii=False, indent=2),
        ))
        keys = self._write_all(blobs)

        logger.info("Article prompts saved: %s (%d files)", prefix, len(keys))
        return CreateResult(prompt_set=prompt_set, output_prefix=prefix, written_keys=keys)

    def modify_article(
        self,
        client_id: str,
        content_number: str,
        article_path: Path,
        selector: str = "ai_expression_elimination",
    ) -> ModifyResult:
        """Compose and save modification prompts for a drafted article.

        Raises:
            UnknownModificationTypeError: If the selector is not recognized.
            MissingClientDataError: If the client or content item is unknown.
            FileNotFoundError: If the article file does not exist.
        """
        parse_selector(selector)
        plan = self.clients.load_plan(client_id)
        item = self.clients.find_content_item(plan, content_number)

        article_path = Path(article_path)
        if not article_path.is_file():
            raise FileNotFoundError(f"記事ファイルが見つかりません: {article_path}")
        article_content = article_path.read_text(encoding="utf-8")

        result = self.dispatcher.modify(
            client_id, content_number, selector, article_content, plan.profile
        )
        guide = self.dispatcher.compose_guide(
            result, str(article_path), item.content_number, self.clock().date()
        )

        prefix = content_prefix(client_id, content_number)
        blobs = [(f"{prefix}/modification/{doc.name}", doc.body) for doc in result.documents]
        blobs.append((f"{prefix}/{guide.name}", guide.body))
        keys = self._write_all(blobs)

        logger.info("Modification prompts saved: %s/modification (%d files)", prefix, len(keys))
        return ModifyResult(modification=result, output_prefix=prefix, written_keys=keys)

    def _write_all(self, blobs: list[tuple[str, str]]) -> list[str]:
        for key, text in blobs:
            self.output.write(key, text.encode("utf-8"))
            logger.debug("Wrote %s", key)
        return [key for key, _ in blobs]
