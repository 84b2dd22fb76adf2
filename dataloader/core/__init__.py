"""
Core Layer.

This package contains:
- Configuration management (settings.py)
- Core data types (types.py): SourceType and LoadResult
- Hard failure types (errors.py)
- The dispatcher (dispatcher.py), imported directly to keep this package light
"""

from dataloader.core.errors import LoadFailedError, UnsupportedSourceTypeError
from dataloader.core.types import LoadResult, SourceType

__all__ = ["LoadFailedError", "LoadResult", "SourceType", "UnsupportedSourceTypeError"]
