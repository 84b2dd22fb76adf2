"""JSON API loader (httpx GET + JSON decode).

Arrays of objects and single objects are flattened into a DataFrame with
`pandas.json_normalize`; any other JSON value is returned as decoded.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from dataloader.core.types import LoadResult, SourceType
from dataloader.libs.loader.http_source import HttpSourceLoader


def _to_table(data: Any) -> Any:
    if isinstance(data, dict):
        return pd.json_normalize(data)
    if isinstance(data, list) and data and all(isinstance(item, dict) for item in data):
        return pd.json_normalize(data)
    return data


class ApiLoader(HttpSourceLoader):
    """JSON endpoint -> DataFrame (or raw JSON value)."""

    source_type = SourceType.API
    label = "API"

    def _read(self, url: str, timeout: float | None) -> Any:
        response = self._fetch(url, timeout=timeout)
        return _to_table(response.json())

    def load(self, url: str, timeout: float | None = None, **ignored: Any) -> LoadResult:
        self._ignore_options(ignored)
        return self._guard(url, self._read, url, timeout)


def load_api(url: str, timeout: float | None = None) -> LoadResult:
    """GET a JSON endpoint and return the decoded payload.

    Example:
        >>> result = load_api("https://api.example.com/data")
    """

    return ApiLoader(timeout=timeout).load(url)
