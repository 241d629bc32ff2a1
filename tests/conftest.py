"""Shared test fixtures for the SEO prompt engine."""

import sys
from datetime import datetime
from pathlib import Path

import openpyxl
import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import Settings
from src.common.models import ContentItem, ContentPlan, CustomerProfile, KeywordNeed
from src.prompt_engine.template_engine.library import TemplateLibrary

TEMPLATES_DIR = PROJECT_ROOT / "config" / "templates"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 7, 12, 0, 0)


@pytest.fixture
def customer_rows() -> list[tuple]:
    """Rows of a 共有事項 sheet."""
    return [
        ("項目", "内容"),
        ("SPID", "SP-0001"),
        ("G-ID", "G0016169"),
        ("受注ID", "2026-0101_株式会社ファインドA"),
        ("一人称", "経費精算クラウド"),
        ("お客様ビジネスのターゲットは？", "中小企業の経理担当者"),
        ("お客様サービスの特徴", "AIとプロ人材による経費精算代行"),
        ("資格の有無", "税理士在籍"),
    ]


@pytest.fixture
def keyword_rows() -> list[tuple]:
    """Rows of a KW情報 sheet with two content blocks."""
    return [
        ("コンテンツ1", "", "経費精算 効率化"),
        ("", "ニーズKW1", "経費精算 ツール", "経費精算ツールの選び方"),
        ("", "ニーズKW2", "経費精算 代行", "経費精算を代行に任せるメリット"),
        (None, None, None, None),
        ("コンテンツ2", "", "請求書 電子化"),
        ("", "ニーズKW1", "請求書 電子化 手順", "請求書電子化の進め方"),
    ]


@pytest.fixture
def rules_rows() -> list[tuple]:
    """Rows of a 記事ルール sheet (header first)."""
    return [
        ("項目", "文字数", "KWルール", "備考", "ポイント"),
        ("本文", "3000文字以上", "ターゲットKWを全て使用", "", "AI感を排除"),
        ("タイトル", "35文字以内", "KWを前半に", "", "一人称定型を付与"),
        (None, "孤立セル"),
    ]


@pytest.fixture
def order_workbook(customer_rows, keyword_rows, rules_rows) -> dict[str, list[tuple]]:
    """In-memory order workbook in the shape load_workbook returns."""
    return {
        "共有事項": customer_rows,
        "KW情報": keyword_rows,
        "記事ルール": rules_rows,
    }


@pytest.fixture
def order_xlsx(tmp_path, order_workbook) -> Path:
    """Write the order workbook to a real .xlsx file."""
    wb = openpyxl.Workbook()
    wb.remove(wb.active)
    for name, rows in order_workbook.items():
        ws = wb.create_sheet(name)
        for row in rows:
            ws.append(list(row))
    path = tmp_path / "発注書.xlsx"
    wb.save(path)
    return path


@pytest.fixture
def sample_profile() -> CustomerProfile:
    return CustomerProfile(
        client_id="G0016169",
        spid="SP-0001",
        order_id="2026-0101_株式会社ファインドA",
        company_name="株式会社ファインドA",
        first_person="経費精算クラウド",
        target_audience="中小企業の経理担当者",
        service_features="AIとプロ人材による経費精算代行",
        qualifications="税理士在籍",
    )


@pytest.fixture
def sample_item() -> ContentItem:
    return ContentItem(
        content_number="コンテンツ1",
        target_keywords="経費精算 効率化",
        needs_keywords=[
            KeywordNeed(kind="ニーズKW1", keyword="経費精算 ツール", headline="経費精算ツールの選び方"),
            KeywordNeed(kind="ニーズKW2", keyword="経費精算 代行", headline=""),
        ],
    )


@pytest.fixture
def sample_plan(sample_profile, sample_item) -> ContentPlan:
    return ContentPlan(
        profile=sample_profile,
        items={sample_item.content_number: sample_item},
    )


@pytest.fixture
def section_library() -> TemplateLibrary:
    return TemplateLibrary.load(TEMPLATES_DIR / "section_prompts.json")


@pytest.fixture
def modification_library() -> TemplateLibrary:
    return TemplateLibrary.load(TEMPLATES_DIR / "article_modification_prompts.json")


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings rooted in a temp dir, using the repository's template stores."""
    return Settings.for_root(tmp_path / "system", templates_dir=TEMPLATES_DIR)
