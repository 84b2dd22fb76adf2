"""Dispatcher: routes a load request to the loader for its source type.

Two failure classes are kept apart on purpose:
- an unsupported source-type tag raises `UnsupportedSourceTypeError`
- a recognized tag whose loader fails returns the failed `LoadResult` unchanged
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from dataloader.core.errors import UnsupportedSourceTypeError
from dataloader.core.settings import Settings, default_settings
from dataloader.core.types import LoadResult, SourceType
from dataloader.libs.loader import BaseLoader, LoaderFactory
from dataloader.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


class DataDispatcher:
    """Holds one loader per source type and forwards calls to it."""

    def __init__(
        self,
        settings: Settings | None = None,
        loaders: Mapping[SourceType | str, BaseLoader] | None = None,
    ) -> None:
        self.settings = settings if settings is not None else default_settings()
        # Process-wide: the level lives on the package logger.
        configure_logging(self.settings.observability.log_level)

        overrides = {SourceType.parse(key): loader for key, loader in (loaders or {}).items()}

        self._loaders: dict[SourceType, BaseLoader] = {}
        for member in SourceType:
            if member in overrides:
                self._loaders[member] = overrides[member]
            else:
                self._loaders[member] = LoaderFactory.create(member, self.settings)

    def loader_for(self, source_type: SourceType | str) -> BaseLoader:
        return self._loaders[SourceType.parse(source_type)]

    def load(self, source: str | Path, source_type: SourceType | str, **kwargs: Any) -> LoadResult:
        """Load `source` with the loader registered for `source_type`.

        Extra keyword arguments are forwarded verbatim to the loader, e.g.
        `sheet` for excel or `table_num` for html.

        Raises:
            UnsupportedSourceTypeError: if `source_type` is not a supported tag.
        """

        tag = source_type.value if isinstance(source_type, SourceType) else source_type
        logger.info("Loading data from source: %s", source)
        logger.info("Source type: %s", tag)

        try:
            member = SourceType.parse(source_type)
        except UnsupportedSourceTypeError:
            logger.error("Unsupported source type: %s", tag)
            raise

        result = self._loaders[member].load(source, **kwargs)

        if result.ok:
            logger.info("Data loaded successfully.")
        return result


_default_dispatcher: DataDispatcher | None = None


def get_default_dispatcher() -> DataDispatcher:
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = DataDispatcher()
    return _default_dispatcher


def load_data(source: str | Path, source_type: SourceType | str, **kwargs: Any) -> LoadResult:
    """Load data from a path or URL of the given source type.

    Example:
        >>> load_data("data/sample.xlsx", "excel", sheet=2)
        >>> load_data("https://example.com/page", "html", table_num=3)
    """

    return get_default_dispatcher().load(source, source_type, **kwargs)


def supported_source_types() -> list[str]:
    return SourceType.values()
