"""End-to-end tests: order workbook → client data → prompt documents.

Runs the setup, create and modify workflows against temporary workspaces
and drives the three CLI entry points.
"""

import json
import logging
from pathlib import Path

import pytest
import yaml

from src.common.errors import MissingClientDataError, UnknownModificationTypeError
from src.common.workspace import ClientStore, LocalWorkspace
from src.order_intake.excel_analyzer import main as setup_main
from src.prompt_engine.article_modifier import main as modify_main
from src.prompt_engine.content_writer import main as create_main
from src.prompt_engine.publisher import PromptPipeline

TEMPLATES_DIR = Path(__file__).parent.parent.parent / "config" / "templates"


class ReadCountingWorkspace(LocalWorkspace):
    """LocalWorkspace that records every key it reads."""

    def __init__(self, root):
        super().__init__(root)
        self.reads = []

    def read(self, key):
        self.reads.append(key)
        return super().read(key)


# === Fixtures ===


@pytest.fixture
def pipeline(settings, fixed_now) -> PromptPipeline:
    return PromptPipeline.from_settings(settings, clock=lambda: fixed_now)


@pytest.fixture
def ready_pipeline(pipeline, order_xlsx) -> PromptPipeline:
    pipeline.setup(order_xlsx)
    return pipeline


@pytest.fixture
def article_file(tmp_path) -> Path:
    path = tmp_path / "article.md"
    path.write_text("# 経費精算を効率化する方法\n\n本文です。", encoding="utf-8")
    return path


@pytest.fixture
def cli_root(tmp_path) -> Path:
    """Project root whose settings.yaml points at the repository templates."""
    root = tmp_path / "cli_system"
    (root / "config").mkdir(parents=True)
    with open(root / "config" / "settings.yaml", "w", encoding="utf-8") as f:
        yaml.safe_dump({"templates_dir": str(TEMPLATES_DIR)}, f, allow_unicode=True)
    return root


# === Test: Setup ===


class TestSetup:
    def test_writes_client_files(self, pipeline, order_xlsx, settings):
        result = pipeline.setup(order_xlsx)

        assert result.client_id == "G0016169"
        assert len(result.plan.items) == 2
        client_dir = settings.customers_dir / "G0016169"
        assert (client_dir / "content_plan.json").exists()
        assert (client_dir / "customer_prompt.md").exists()
        assert sorted(p.name for p in (client_dir / "keywords").iterdir()) == [
            "コンテンツ1.json",
            "コンテンツ2.json",
        ]

    def test_customer_prompt_dated_by_clock(self, ready_pipeline, settings):
        text = (settings.customers_dir / "G0016169" / "customer_prompt.md").read_text(encoding="utf-8")
        assert "**作成日**: 2026-02-07" in text
        assert "株式会社ファインドA" in text

    def test_setup_is_repeatable(self, pipeline, order_xlsx, settings):
        pipeline.setup(order_xlsx)
        path = settings.customers_dir / "G0016169" / "content_plan.json"
        first = path.read_text(encoding="utf-8")
        pipeline.setup(order_xlsx)
        assert path.read_text(encoding="utf-8") == first

    def test_missing_file(self, pipeline, tmp_path):
        with pytest.raises(FileNotFoundError):
            pipeline.setup(tmp_path / "missing.xlsx")


# === Test: Create ===


class TestCreateArticle:
    def test_writes_documents_and_manifest(self, ready_pipeline, settings):
        result = ready_pipeline.create_article("G0016169", "01")

        out_dir = settings.output_dir / "G0016169" / "content_01"
        assert result.output_prefix == "G0016169/content_01"
        for name in result.prompt_set.document_names:
            assert (out_dir / name).exists()
        assert len(result.written_keys) == 10

        manifest = json.loads((out_dir / "article_prompts.json").read_text(encoding="utf-8"))
        assert len(manifest["steps"]) == 9
        assert manifest["metadata"]["timestamp"] == "2026-02-07T12:00:00"
        assert manifest["keyword_info"]["content_number"] == "コンテンツ1"

    def test_customer_prompt_flows_into_sections(self, ready_pipeline, settings):
        ready_pipeline.create_article("G0016169", "01")
        section = (settings.output_dir / "G0016169" / "content_01" / "section_1.md").read_text(encoding="utf-8")
        assert "顧客理解プロンプト" in section

    def test_plan_read_once(self, ready_pipeline, settings, article_file):
        workspace = ReadCountingWorkspace(settings.customers_dir)
        ready_pipeline.clients = ClientStore(workspace)

        ready_pipeline.create_article("G0016169", "01")
        assert workspace.reads.count("G0016169/content_plan.json") == 1

        workspace.reads.clear()
        ready_pipeline.modify_article("G0016169", "01", article_file, "all")
        assert workspace.reads.count("G0016169/content_plan.json") == 1

    def test_second_content(self, ready_pipeline):
        result = ready_pipeline.create_article("G0016169", "02")
        assert result.prompt_set.item.target_keywords == "請求書 電子化"
        assert len(result.prompt_set.documents) == 8

    def test_unknown_client(self, pipeline):
        with pytest.raises(MissingClientDataError):
            pipeline.create_article("G9999999", "01")

    def test_unknown_content(self, ready_pipeline, settings):
        with pytest.raises(MissingClientDataError):
            ready_pipeline.create_article("G0016169", "09")
        assert not (settings.output_dir / "G0016169" / "content_09").exists()


# === Test: Modify ===


class TestModifyArticle:
    def test_all_types(self, ready_pipeline, article_file, settings):
        result = ready_pipeline.modify_article("G0016169", "01", article_file, "all")

        out_dir = settings.output_dir / "G0016169" / "content_01"
        names = sorted(p.name for p in (out_dir / "modification").iterdir())
        assert names == [
            "ai_expression_elimination.md",
            "content_strategy_adjustment.md",
            "quality_validation.md",
            "service_specific_positioning.md",
        ]
        guide = (out_dir / "modification_guide.md").read_text(encoding="utf-8")
        assert "包括的記事修正" in guide
        assert str(article_file) in guide
        assert len(result.written_keys) == 5

    def test_default_type(self, ready_pipeline, article_file, settings):
        ready_pipeline.modify_article("G0016169", "01", article_file)
        names = [p.name for p in (settings.output_dir / "G0016169" / "content_01" / "modification").iterdir()]
        assert names == ["ai_expression_elimination.md"]

    def test_unknown_selector_writes_nothing(self, ready_pipeline, article_file, settings):
        with pytest.raises(UnknownModificationTypeError):
            ready_pipeline.modify_article("G0016169", "01", article_file, "rewrite")
        assert not settings.output_dir.exists()

    def test_missing_article(self, ready_pipeline, tmp_path):
        with pytest.raises(FileNotFoundError):
            ready_pipeline.modify_article("G0016169", "01", tmp_path / "nope.md", "all")


# === Test: CLI ===


class TestCLI:
    def test_full_flow(self, cli_root, order_xlsx, article_file, capsys):
        setup_main.main([str(order_xlsx), "--root", str(cli_root)])
        create_main.main(["G0016169", "01", "--root", str(cli_root)])
        modify_main.main(["G0016169", "01", str(article_file), "all", "--root", str(cli_root)])

        out = capsys.readouterr().out
        assert "Setup complete: G0016169" in out
        assert "Generated 9 prompts" in out
        assert "包括的記事修正" in out
        assert (cli_root / "output" / "G0016169" / "content_01" / "modification_guide.md").exists()

    def test_root_from_env(self, cli_root, order_xlsx, monkeypatch):
        monkeypatch.setenv("SEO_SYSTEM_ROOT", str(cli_root))
        setup_main.main([str(order_xlsx)])
        assert (cli_root / "customers" / "G0016169" / "content_plan.json").exists()

    def test_setup_missing_file_exits(self, cli_root, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            setup_main.main([str(tmp_path / "missing.xlsx"), "--root", str(cli_root)])
        assert exc_info.value.code == 1

    def test_create_unknown_client_exits(self, cli_root):
        with pytest.raises(SystemExit) as exc_info:
            create_main.main(["G9999999", "01", "--root", str(cli_root)])
        assert exc_info.value.code == 1

    def test_modify_unknown_type_exits(self, cli_root, order_xlsx, article_file):
        setup_main.main([str(order_xlsx), "--root", str(cli_root)])
        with pytest.raises(SystemExit) as exc_info:
            modify_main.main(["G0016169", "01", str(article_file), "rewrite", "--root", str(cli_root)])
        assert exc_info.value.code == 1

    @pytest.mark.parametrize("filename,content", [
        ("発注書.xlsx", b"not a zip archive"),
        ("発注書.xls", b"\xd0\xcf\x11\xe0legacy"),
    ])
    def test_setup_unreadable_workbook_exits(self, cli_root, tmp_path, caplog, filename, content):
        path = tmp_path / filename
        path.write_bytes(content)
        with caplog.at_level(logging.INFO, logger="seo_prompts"):
            with pytest.raises(SystemExit) as exc_info:
                setup_main.main([str(path), "--root", str(cli_root)])
        assert exc_info.value.code == 1
        assert "Setup failed" in caplog.text
        assert "Usage" in caplog.text
        assert not (cli_root / "customers").exists()
