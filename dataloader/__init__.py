"""Load tabular data or text from CSV, Excel, JSON APIs, PDF files and HTML tables.

Usage:
    from dataloader import load_data

    result = load_data("data/sample.csv", "csv")
    if result:
        frame = result.value
    else:
        print(result.error)
"""

from dataloader.core.dispatcher import DataDispatcher, load_data, supported_source_types
from dataloader.core.errors import LoadFailedError, UnsupportedSourceTypeError
from dataloader.core.settings import Settings, SettingsError, default_settings, load_settings
from dataloader.core.types import LoadResult, SourceType
from dataloader.libs.loader import (
    load_api,
    load_csv,
    load_excel,
    load_html_table,
    load_pdf,
)

__all__ = [
    "DataDispatcher",
    "LoadFailedError",
    "LoadResult",
    "Settings",
    "SettingsError",
    "SourceType",
    "UnsupportedSourceTypeError",
    "default_settings",
    "load_api",
    "load_csv",
    "load_data",
    "load_excel",
    "load_html_table",
    "load_pdf",
    "load_settings",
    "supported_source_types",
]
