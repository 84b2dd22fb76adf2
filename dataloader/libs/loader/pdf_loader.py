"""PDF text loader (delegates to `pypdf`).

The result is one string per page, in page order. Extraction is
all-or-nothing: if any page fails, no pages are returned.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pypdf import PdfReader

from dataloader.core.settings import Settings
from dataloader.core.types import LoadResult, SourceType
from dataloader.libs.loader.base_loader import BaseLoader


class PdfLoader(BaseLoader):
    """PDF -> list of per-page text."""

    source_type = SourceType.PDF
    label = "PDF"

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        reader_class: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(settings, **kwargs)
        self.reader_class = reader_class or PdfReader

    def _read(self, file_path: str | Path) -> list[str]:
        reader = self.reader_class(file_path)
        # Pages without a text layer extract as None or "".
        return [page.extract_text() or "" for page in reader.pages]

    def load(self, file_path: str | Path, **ignored: Any) -> LoadResult:
        self._ignore_options(ignored)
        return self._guard(file_path, self._read, file_path)


def load_pdf(file_path: str | Path) -> LoadResult:
    """Extract the text of every page of a PDF file."""

    return PdfLoader().load(file_path)
