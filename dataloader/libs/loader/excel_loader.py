"""Excel loader (delegates to `pandas.read_excel`).

Sheets are addressed from 1, or by name. An index past the last sheet is
reported by pandas and ends up as a failed result like any other read error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pandas as pd

from dataloader.core.settings import Settings
from dataloader.core.types import LoadResult, SourceType
from dataloader.libs.loader.base_loader import BaseLoader


def _sheet_name(sheet: int | str) -> int | str:
    """Translate a 1-based sheet index into the 0-based index pandas expects."""

    if isinstance(sheet, str):
        return sheet
    if isinstance(sheet, bool) or not isinstance(sheet, int):
        raise TypeError(f"sheet must be an int or a sheet name, got {type(sheet).__name__}")
    if sheet < 1:
        raise ValueError(f"Sheet index {sheet} is invalid, sheets are numbered from 1")
    return sheet - 1


class ExcelLoader(BaseLoader):
    """Spreadsheet sheet -> DataFrame."""

    source_type = SourceType.EXCEL
    label = "Excel"

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        reader: Callable[..., Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(settings, **kwargs)
        self.reader = reader or pd.read_excel

    def _read(self, file_path: str | Path, sheet: int | str) -> Any:
        return self.reader(file_path, sheet_name=_sheet_name(sheet))

    def load(self, file_path: str | Path, sheet: int | str | None = None) -> LoadResult:
        if sheet is None:
            sheet = self.settings.excel.default_sheet
        return self._guard(file_path, self._read, file_path, sheet)


def load_excel(file_path: str | Path, sheet: int | str = 1) -> LoadResult:
    """Load one sheet of an Excel workbook into a DataFrame.

    Args:
        file_path: Path to the workbook.
        sheet: 1-based sheet index or sheet name. Default is the first sheet.
    """

    return ExcelLoader().load(file_path, sheet=sheet)
