"""Spreadsheet extractor — order workbook to ContentPlan.

Reads three sheets of an order workbook (発注書):

- customer sheet (共有事項): label/value rows → CustomerProfile
- keyword sheet (KW情報): content blocks → ContentItem + KeywordNeed
- rules sheet (記事ルール, optional): one ArticleRule per row

Usage:
    extractor = SpreadsheetExtractor()
    plan = extractor.extract(load_workbook("発注書.xlsx"))
"""

from __future__ import annotations

from pathlib import Path

from src.common.errors import MissingSheetError
from src.common.logging import setup_logging
from src.common.models import (
    ArticleRule,
    ContentItem,
    ContentPlan,
    CustomerProfile,
    KeywordNeed,
)

from .schema import DEFAULT_SCHEMA, WorkbookSchema
from .workbook import Row, Workbook, cell_text, is_blank, load_workbook

logger = setup_logging(module_name="excel_analyzer")


class SpreadsheetExtractor:
    """Extracts a ContentPlan from an order workbook.

    The extractor has no side effects; the same workbook always yields an
    equal plan.
    """

    def __init__(self, schema: WorkbookSchema = DEFAULT_SCHEMA):
        self.schema = schema

    def extract(self, workbook: Workbook) -> ContentPlan:
        """Build the full content plan.

        Raises:
            MissingSheetError: If the customer or keyword sheet is absent.
        """
        profile = self.extract_customer_info(workbook)
        items = self.extract_keyword_info(workbook)
        rules = self.extract_article_rules(workbook)
        return ContentPlan(profile=profile, items=items, article_rules=rules)

    def analyze_excel(self, excel_path: Path | str) -> ContentPlan:
        """Load an .xlsx file and extract its content plan."""
        logger.info("Analyzing order workbook: %s", excel_path)
        plan = self.extract(load_workbook(excel_path))
        logger.info(
            "Analysis complete - G-ID: %s, company: %s, contents: %d",
            plan.profile.client_id,
            plan.profile.company_name,
            len(plan.items),
        )
        return plan

    # --- Customer info ---

    def extract_customer_info(self, workbook: Workbook) -> CustomerProfile:
        rows = self._require_sheet(workbook, self.schema.customer_sheet)
        sheet = self.schema.customer

        values = {
            field_name: self._find_value(rows, label)
            for field_name, label in sheet.labels.items()
        }
        values["company_name"] = extract_company_name(values.get("order_id", ""))
        return CustomerProfile(**values)

    def _find_value(self, rows: list[Row], label: str) -> str:
        """Value cell of the first row whose label cell equals label exactly."""
        sheet = self.schema.customer
        for row in rows:
            if cell_text(row, sheet.label_column) == label:
                return cell_text(row, sheet.value_column)
        return ""

    # --- Keyword info ---

    def extract_keyword_info(self, workbook: Workbook) -> dict[str, ContentItem]:
        """Scan content blocks in row order.

        A marker row opens a new item (replacing any earlier item with the
        same label); needs-keyword rows append to the open item. Everything
        else, including rows before the first marker, is skipped.
        """
        rows = self._require_sheet(workbook, self.schema.keyword_sheet)
        sheet = self.schema.keywords

        items: dict[str, ContentItem] = {}
        current: ContentItem | None = None

        for row in rows[sheet.skip_rows:]:
            if is_blank(row):
                continue

            marker = cell_text(row, sheet.marker_column)
            if marker.startswith(sheet.content_marker):
                current = ContentItem(
                    content_number=marker,
                    target_keywords=cell_text(row, sheet.keyword_column),
                )
                items[marker] = current
                logger.debug("Content block: %s", marker)
                continue

            if current is None:
                continue

            kind = cell_text(row, sheet.kind_column)
            if sheet.needs_marker in kind:
                current.needs_keywords.append(
                    KeywordNeed(
                        kind=kind,
                        keyword=cell_text(row, sheet.keyword_column),
                        headline=cell_text(row, sheet.headline_column),
                    )
                )

        return items

    # --- Article rules ---

    def extract_article_rules(self, workbook: Workbook) -> dict[str, ArticleRule]:
        """Rules sheet is optional; a missing sheet yields no rules."""
        rows = workbook.get(self.schema.rules_sheet)
        if rows is None:
            return {}

        sheet = self.schema.rules
        rules: dict[str, ArticleRule] = {}
        for row in list(rows)[sheet.skip_rows:]:
            name = cell_text(row, sheet.name_column)
            if not name:
                continue
            rules[name] = ArticleRule(
                name=name,
                word_count=cell_text(row, sheet.word_count_column),
                keyword_rules=cell_text(row, sheet.keyword_rules_column),
                points=cell_text(row, sheet.points_column),
            )
        return rules

    @staticmethod
    def _require_sheet(workbook: Workbook, name: str) -> list[Row]:
        rows = workbook.get(name)
        if rows is None:
            raise MissingSheetError(name)
        return list(rows)


def extract_company_name(order_id: str) -> str:
    """Company name is the last "_" segment of the order id."""
    if "_" in order_id:
        return order_id.split("_")[-1]
    return ""
