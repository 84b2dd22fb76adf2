"""Core data types shared by loaders and the dispatcher.

Rules:
- `SourceType` is a closed set; tags are matched exactly, never normalized
- a failed `LoadResult` is the "no result" sentinel; its value is always None
- an empty but valid table is a success, not a failure
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dataloader.core.errors import LoadFailedError, UnsupportedSourceTypeError


class SourceType(str, Enum):
    """Supported source-type tags."""

    CSV = "csv"
    EXCEL = "excel"
    API = "api"
    PDF = "pdf"
    HTML = "html"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, tag: "str | SourceType") -> "SourceType":
        """Resolve a tag to a member using exact matching.

        Raises:
            UnsupportedSourceTypeError: if the tag is not a supported value.
        """

        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            for member in cls:
                if member.value == tag:
                    return member
        raise UnsupportedSourceTypeError(tag, cls.values())


def _describe_value(value: Any) -> dict[str, Any]:
    columns = getattr(value, "columns", None)
    shape = getattr(value, "shape", None)
    if columns is not None and shape is not None:
        return {"kind": "table", "rows": int(shape[0]), "columns": [str(c) for c in columns]}
    if isinstance(value, list):
        return {"kind": "list", "length": len(value)}
    if isinstance(value, dict):
        return {"kind": "mapping", "keys": sorted(str(k) for k in value)}
    return {"kind": type(value).__name__}


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a single loader call.

    Either a success carrying the library's native value, or a failure carrying
    the reason the load was abandoned.
    """

    source: str
    source_type: SourceType
    value: Any = None
    error: str | None = None
    error_type: str | None = None

    @classmethod
    def success(cls, source: str | Path, source_type: SourceType, value: Any) -> "LoadResult":
        return cls(source=str(source), source_type=source_type, value=value)

    @classmethod
    def failure(
        cls,
        source: str | Path,
        source_type: SourceType,
        error: BaseException | str,
    ) -> "LoadResult":
        if isinstance(error, BaseException):
            message = str(error) or type(error).__name__
            error_type = type(error).__name__
        else:
            message = error
            error_type = None
        return cls(
            source=str(source),
            source_type=source_type,
            error=message,
            error_type=error_type,
        )

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Any:
        """Return the loaded value, or raise `LoadFailedError` for a failure."""

        if not self.ok:
            raise LoadFailedError(self.source, self.source_type.value, self.error)
        return self.value

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "source": self.source,
            "source_type": self.source_type.value,
            "ok": self.ok,
        }
        if self.ok:
            data["value"] = _describe_value(self.value)
        else:
            data["error"] = self.error
            data["error_type"] = self.error_type
        return data
