"""Shared HTTP fetching for URL-backed loaders."""

from __future__ import annotations

from typing import Any

import httpx

from dataloader.core.settings import Settings
from dataloader.libs.loader.base_loader import BaseLoader


class HttpSourceLoader(BaseLoader):
    """Base for loaders that GET a URL before parsing it.

    Parameter precedence for the timeout (high to low):
    1) per-call `timeout`
    2) constructor `timeout`
    3) settings.http.timeout
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: httpx.Client | None = None,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(settings, **kwargs)
        self.client = client
        self.timeout = float(timeout if timeout is not None else self.settings.http.timeout)

    def _fetch(self, url: str, timeout: float | None = None) -> httpx.Response:
        """GET `url` and raise for HTTP error statuses.

        An injected client is reused and left open; otherwise a client is
        created for this call only.
        """

        request_timeout = float(timeout if timeout is not None else self.timeout)

        if self.client is not None:
            response = self.client.get(url, timeout=request_timeout)
        else:
            with httpx.Client(
                timeout=request_timeout,
                follow_redirects=self.settings.http.follow_redirects,
            ) as client:
                response = client.get(url)

        response.raise_for_status()
        return response
