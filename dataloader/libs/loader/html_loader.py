"""HTML table loader (httpx GET + `pandas.read_html`).

Tables are numbered from 1 in document order. Asking for a table the page
does not have is a failed load, never a silently truncated one.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Callable

import httpx
import pandas as pd

from dataloader.core.settings import Settings
from dataloader.core.types import LoadResult, SourceType
from dataloader.libs.loader.http_source import HttpSourceLoader


class HtmlTableLoader(HttpSourceLoader):
    """Web page -> the Nth table as a DataFrame."""

    source_type = SourceType.HTML
    label = "HTML table"

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: httpx.Client | None = None,
        timeout: float | None = None,
        parser: Callable[..., list[Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(settings, client=client, timeout=timeout, **kwargs)
        self.parser = parser or pd.read_html

    def _read(self, url: str, table_num: int, timeout: float | None) -> Any:
        if isinstance(table_num, bool) or not isinstance(table_num, int):
            raise TypeError(f"table_num must be an int, got {type(table_num).__name__}")

        response = self._fetch(url, timeout=timeout)
        tables = self.parser(StringIO(response.text))

        if table_num < 1 or table_num > len(tables):
            raise IndexError(
                f"Table {table_num} requested but the page has {len(tables)} table(s)"
            )
        return tables[table_num - 1]

    def load(
        self,
        url: str,
        table_num: int | None = None,
        timeout: float | None = None,
    ) -> LoadResult:
        if table_num is None:
            table_num = self.settings.html.default_table
        return self._guard(url, self._read, url, table_num, timeout)


def load_html_table(url: str, table_num: int = 1, timeout: float | None = None) -> LoadResult:
    """Fetch a web page and return one of its tables.

    Args:
        url: Address of the page.
        table_num: 1-based index of the table to return. Default is the first.
        timeout: Optional request timeout in seconds.
    """

    return HtmlTableLoader(timeout=timeout).load(url, table_num=table_num)
