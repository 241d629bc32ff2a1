"""Error types shared by the intake and prompt engine modules."""

from __future__ import annotations


class PromptEngineError(Exception):
    """Base class for domain errors."""


class MissingSheetError(PromptEngineError):
    """A required sheet is absent from the order workbook."""

    def __init__(self, sheet_name: str):
        self.sheet_name = sheet_name
        super().__init__(f"「{sheet_name}」シートが見つかりません")


class MissingClientDataError(PromptEngineError):
    """No stored data for the requested client or content number."""


class UnknownModificationTypeError(PromptEngineError):
    """Modification selector outside the supported set."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"未対応の修正タイプ: {value}")


class TemplateLoadError(PromptEngineError):
    """A template store could not be read or parsed."""


class WorkbookLoadError(PromptEngineError):
    """The order workbook exists but openpyxl cannot open it."""
