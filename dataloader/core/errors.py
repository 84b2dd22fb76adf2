"""Hard failure types.

Soft failures (missing file, unreachable URL, malformed content) never raise;
they come back as a failed `LoadResult`. The exceptions here are reserved for
programmer or configuration mistakes.
"""

from __future__ import annotations

from typing import Sequence


class UnsupportedSourceTypeError(ValueError):
    """Raised when a source-type tag is not one of the supported tags."""

    def __init__(self, source_type: object, supported: Sequence[str]) -> None:
        self.source_type = source_type
        self.supported = list(supported)
        super().__init__(
            f"Unsupported source type: {source_type!r}. "
            f"Supported types: {', '.join(self.supported)}"
        )


class LoadFailedError(RuntimeError):
    """Raised by `LoadResult.unwrap()` when the load did not succeed."""

    def __init__(self, source: str, source_type: str, reason: str | None) -> None:
        self.source = source
        self.source_type = source_type
        self.reason = reason
        super().__init__(f"Failed to load {source_type} source {source}: {reason}")
