"""Shared fixtures: sample files generated on the fly and log capture.

The log fixtures attach their own handler to one module logger, so only that
module's records are counted.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pandas as pd
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.lib.units import inch
from reportlab.pdfgen import canvas

LOADER_LOGGER = "dataloader.libs.loader.base_loader"
DISPATCHER_LOGGER = "dataloader.core.dispatcher"

PDF_PAGES = [
    "Quarterly Report",
    "Revenue grew in every region",
    "Outlook remains stable",
]


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.NOTSET)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def _attach(name: str) -> Iterator[list[logging.LogRecord]]:
    """Record what `name` itself emits; other project loggers are not seen."""

    logger = logging.getLogger(name)
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        yield handler.records
    finally:
        logger.removeHandler(handler)


@pytest.fixture
def loader_logs() -> Iterator[list[logging.LogRecord]]:
    yield from _attach(LOADER_LOGGER)


@pytest.fixture
def dispatcher_logs() -> Iterator[list[logging.LogRecord]]:
    yield from _attach(DISPATCHER_LOGGER)


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """3 rows, header `id,name`."""

    path = tmp_path / "people.csv"
    path.write_text("id,name\n1,Ada\n2,Grace\n3,Linus\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_xlsx(tmp_path: Path) -> Path:
    """Workbook with two sheets: `people` (3 rows) and `cities` (2 rows)."""

    path = tmp_path / "book.xlsx"
    people = pd.DataFrame({"id": [1, 2, 3], "name": ["Ada", "Grace", "Linus"]})
    cities = pd.DataFrame({"city": ["Oslo", "Lima"], "population": [709000, 10000000]})
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        people.to_excel(writer, sheet_name="people", index=False)
        cities.to_excel(writer, sheet_name="cities", index=False)
    return path


@pytest.fixture
def sample_pdf(tmp_path: Path) -> Path:
    """One line of text per page, see PDF_PAGES."""

    path = tmp_path / "report.pdf"
    c = canvas.Canvas(str(path), pagesize=letter)
    _, height = letter
    for text in PDF_PAGES:
        c.setFont("Helvetica", 14)
        c.drawString(1 * inch, height - 1 * inch, text)
        c.showPage()
    c.save()
    return path


@pytest.fixture
def pdf_pages() -> list[str]:
    return list(PDF_PAGES)
