"""Layout of the order workbook: sheet names, row labels and column positions.

Every fixed column index the extractor reads lives here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.common.config import WorkbookSettings


@dataclass(frozen=True)
class CustomerSheetSchema:
    """Key-value sheet: label in column 0, value in column 1."""
    label_column: int = 0
    value_column: int = 1
    # CustomerProfile field -> row label
    labels: dict[str, str] = field(default_factory=lambda: {
        "spid": "SPID",
        "client_id": "G-ID",
        "order_id": "受注ID",
        "first_person": "一人称",
        "target_audience": "お客様ビジネスのターゲットは？",
        "service_features": "お客様サービスの特徴",
        "qualifications": "資格の有無",
    })


@dataclass(frozen=True)
class KeywordSheetSchema:
    """Content blocks: a marker row followed by needs-keyword rows."""
    content_marker: str = "コンテンツ"
    needs_marker: str = "ニーズKW"
    marker_column: int = 0
    kind_column: int = 1
    keyword_column: int = 2  # target keywords on marker rows
    headline_column: int = 3
    skip_rows: int = 0


@dataclass(frozen=True)
class RulesSheetSchema:
    """One rule per row keyed by column 0, after a header row."""
    name_column: int = 0
    word_count_column: int = 1
    keyword_rules_column: int = 2
    points_column: int = 4
    skip_rows: int = 1


@dataclass(frozen=True)
class WorkbookSchema:
    """Complete layout of an order workbook."""
    customer_sheet: str = "共有事項"
    keyword_sheet: str = "KW情報"
    rules_sheet: str = "記事ルール"
    customer: CustomerSheetSchema = field(default_factory=CustomerSheetSchema)
    keywords: KeywordSheetSchema = field(default_factory=KeywordSheetSchema)
    rules: RulesSheetSchema = field(default_factory=RulesSheetSchema)

    @classmethod
    def from_settings(cls, settings: WorkbookSettings) -> WorkbookSchema:
        return cls(
            customer_sheet=settings.customer_sheet,
            keyword_sheet=settings.keyword_sheet,
            rules_sheet=settings.rules_sheet,
        )


DEFAULT_SCHEMA = WorkbookSchema()
