"""Excel analyzer — order workbook (発注書) to ContentPlan."""

from .extractor import SpreadsheetExtractor, extract_company_name
from .schema import (
    DEFAULT_SCHEMA,
    CustomerSheetSchema,
    KeywordSheetSchema,
    RulesSheetSchema,
    WorkbookSchema,
)
from .workbook import cell_text, is_blank, load_workbook

__all__ = [
    "DEFAULT_SCHEMA",
    "CustomerSheetSchema",
    "KeywordSheetSchema",
    "RulesSheetSchema",
    "SpreadsheetExtractor",
    "WorkbookSchema",
    "cell_text",
    "extract_company_name",
    "is_blank",
    "load_workbook",
]
