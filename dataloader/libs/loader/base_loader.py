"""Base loader contract.

Every loader makes one call into an external library and converts whatever
that call raises into a failed `LoadResult` plus one diagnostic line. Loaders
never let an exception escape to their caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, ClassVar

from dataloader.core.settings import Settings, default_settings
from dataloader.core.types import LoadResult, SourceType
from dataloader.observability.logger import get_logger

logger = get_logger(__name__)


class BaseLoader(ABC):
    """Abstract loader for one source type."""

    source_type: ClassVar[SourceType]
    label: ClassVar[str]

    def __init__(self, settings: Settings | None = None, **kwargs: Any) -> None:
        self.settings = settings if settings is not None else default_settings()

    def _ignore_options(self, options: dict[str, Any]) -> None:
        """Drop options this loader does not take (they belong to other source types)."""

        if options:
            logger.debug("%s loader ignores options: %s", self.label, ", ".join(sorted(options)))

    def _guard(
        self,
        source: str | Path,
        read: Callable[..., Any],
        *args: Any,
        **kwargs: Any,
    ) -> LoadResult:
        """Run `read` and normalize any failure into a `LoadResult`."""

        try:
            value = read(*args, **kwargs)
        except Exception as error:  # noqa: BLE001 - soft-failure boundary
            logger.error(
                "Error loading %s from %s: %s: %s",
                self.label,
                source,
                type(error).__name__,
                error,
            )
            return LoadResult.failure(source, self.source_type, error)
        return LoadResult.success(source, self.source_type, value)

    @abstractmethod
    def load(self, source: str | Path, **kwargs: Any) -> LoadResult:
        """Load `source` and return the tagged result."""
