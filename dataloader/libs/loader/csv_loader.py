"""CSV loader (delegates to `pandas.read_csv`)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pandas as pd

from dataloader.core.settings import Settings
from dataloader.core.types import LoadResult, SourceType
from dataloader.libs.loader.base_loader import BaseLoader


class CsvLoader(BaseLoader):
    """Delimited text file -> DataFrame."""

    source_type = SourceType.CSV
    label = "CSV"

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        reader: Callable[..., Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(settings, **kwargs)
        self.reader = reader or pd.read_csv

    def load(self, file_path: str | Path, **ignored: Any) -> LoadResult:
        self._ignore_options(ignored)
        return self._guard(file_path, self.reader, file_path)


def load_csv(file_path: str | Path) -> LoadResult:
    """Load a CSV file into a DataFrame.

    Example:
        >>> result = load_csv("data/sample.csv")
        >>> if result:
        ...     frame = result.value
    """

    return CsvLoader().load(file_path)
