"""Loader package.

Importing this package registers the built-in loaders with `LoaderFactory`.
"""

from dataloader.libs.loader.api_loader import ApiLoader, load_api
from dataloader.libs.loader.base_loader import BaseLoader
from dataloader.libs.loader.csv_loader import CsvLoader, load_csv
from dataloader.libs.loader.excel_loader import ExcelLoader, load_excel
from dataloader.libs.loader.html_loader import HtmlTableLoader, load_html_table
from dataloader.libs.loader.loader_factory import LoaderFactory
from dataloader.libs.loader.pdf_loader import PdfLoader, load_pdf

BUILTIN_LOADERS: dict[str, type[BaseLoader]] = {
    "csv": CsvLoader,
    "excel": ExcelLoader,
    "api": ApiLoader,
    "pdf": PdfLoader,
    "html": HtmlTableLoader,
}


def register_builtin_loaders() -> None:
    for source_type, loader_class in BUILTIN_LOADERS.items():
        LoaderFactory.register_provider(source_type, loader_class)


register_builtin_loaders()

__all__ = [
    "ApiLoader",
    "BaseLoader",
    "BUILTIN_LOADERS",
    "CsvLoader",
    "ExcelLoader",
    "HtmlTableLoader",
    "LoaderFactory",
    "PdfLoader",
    "load_api",
    "load_csv",
    "load_excel",
    "load_html_table",
    "load_pdf",
    "register_builtin_loaders",
]
