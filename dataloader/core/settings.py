"""Settings loading and validation.

Design principles:
- Optional: every section has defaults, so the library works without a file
- Fail-fast: invalid values raise a readable error that includes the field path
- No side effects: this module only parses/validates configuration; no network/IO init
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml


class SettingsError(ValueError):
    """Raised when settings are missing or invalid."""


@dataclass(frozen=True)
class HttpSettings:
    timeout: float = 30.0
    follow_redirects: bool = True


@dataclass(frozen=True)
class ExcelSettings:
    default_sheet: int = 1


@dataclass(frozen=True)
class HtmlSettings:
    default_table: int = 1


@dataclass(frozen=True)
class ObservabilitySettings:
    log_level: str = "INFO"


@dataclass(frozen=True)
class Settings:
    http: HttpSettings = field(default_factory=HttpSettings)
    excel: ExcelSettings = field(default_factory=ExcelSettings)
    html: HtmlSettings = field(default_factory=HtmlSettings)
    observability: ObservabilitySettings = field(default_factory=ObservabilitySettings)


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _optional_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SettingsError(f"Invalid section type: {key}")
    return value


def _as_str(value: Any, path: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(f"Invalid value for {path}: expected non-empty string")
    return value


def _as_int(value: Any, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsError(f"Invalid value for {path}: expected int")
    return value


def _as_bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise SettingsError(f"Invalid value for {path}: expected bool")
    return value


def _as_float(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SettingsError(f"Invalid value for {path}: expected float")
    return float(value)


def validate_settings(settings: Settings) -> None:
    """Validate basic invariants."""

    if settings.http.timeout <= 0:
        raise SettingsError("Invalid value for http.timeout: expected a positive number")
    if settings.excel.default_sheet < 1:
        raise SettingsError("Invalid value for excel.default_sheet: sheets are numbered from 1")
    if settings.html.default_table < 1:
        raise SettingsError("Invalid value for html.default_table: tables are numbered from 1")
    if settings.observability.log_level.upper() not in _LOG_LEVELS:
        raise SettingsError(
            f"Invalid value for observability.log_level: expected one of {', '.join(_LOG_LEVELS)}"
        )


def default_settings() -> Settings:
    """Return the built-in defaults."""

    return Settings()


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file."""

    settings_path = Path(path)
    if not settings_path.exists():
        raise SettingsError(f"Settings file not found: {settings_path}")

    try:
        raw_obj = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in settings file: {settings_path}") from e

    if raw_obj is None:
        raw_obj = {}
    if not isinstance(raw_obj, Mapping):
        raise SettingsError(f"Invalid settings root: expected mapping in {settings_path}")

    http_raw = _optional_section(raw_obj, "http")
    excel_raw = _optional_section(raw_obj, "excel")
    html_raw = _optional_section(raw_obj, "html")
    observability_raw = _optional_section(raw_obj, "observability")

    defaults = default_settings()

    http = HttpSettings(
        timeout=_as_float(http_raw.get("timeout", defaults.http.timeout), "http.timeout"),
        follow_redirects=_as_bool(
            http_raw.get("follow_redirects", defaults.http.follow_redirects),
            "http.follow_redirects",
        ),
    )

    excel = ExcelSettings(
        default_sheet=_as_int(
            excel_raw.get("default_sheet", defaults.excel.default_sheet),
            "excel.default_sheet",
        ),
    )

    html = HtmlSettings(
        default_table=_as_int(
            html_raw.get("default_table", defaults.html.default_table),
            "html.default_table",
        ),
    )

    observability = ObservabilitySettings(
        log_level=_as_str(
            observability_raw.get("log_level", defaults.observability.log_level),
            "observability.log_level",
        ),
    )

    settings = Settings(
        http=http,
        excel=excel,
        html=html,
        observability=observability,
    )

    validate_settings(settings)
    return settings
