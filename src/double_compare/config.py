"""Comparison configuration model and YAML loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from double_compare.comparer import DEFAULT_RELATIVE_TOLERANCE, MAX_RELATIVE_TOLERANCE
from double_compare.logging import _resolve_level


class ComparisonConfig(BaseModel):
    """Default tolerances and logging level used by the command-line tool."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    relative_tolerance: int = DEFAULT_RELATIVE_TOLERANCE
    absolute_tolerance: float | None = None
    log_level: str = "WARNING"

    @field_validator("relative_tolerance", mode="before")
    @classmethod
    def _reject_non_integral_tolerance(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("relative_tolerance must be an integer count of ULPs")
        return value

    @field_validator("relative_tolerance")
    @classmethod
    def _validate_relative_tolerance(cls, value: int) -> int:
        if value < 0 or value > MAX_RELATIVE_TOLERANCE:
            raise ValueError(
                f"relative_tolerance must be in the range [0x0, {MAX_RELATIVE_TOLERANCE:#x}]"
            )
        return value

    @field_validator("absolute_tolerance")
    @classmethod
    def _validate_absolute_tolerance(cls, value: float | None) -> float | None:
        if value is not None and not value >= 0:
            raise ValueError("absolute_tolerance must be a non-negative number")
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        _resolve_level(value)
        return value.upper()


def _format_validation_error(error: ValidationError) -> str:
    lines = ["Configuration validation failed:"]
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        lines.append(f"- {location}: {message}")
    return "\n".join(lines)


def load_config(path: str | Path) -> ComparisonConfig:
    """Load a YAML comparison configuration file from disk."""

    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"Unable to read config file '{config_path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in config file '{config_path}': {exc}") from exc

    data: Any = raw if raw is not None else {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Configuration file '{config_path}' must contain a top-level mapping/object."
        )

    try:
        return ComparisonConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(_format_validation_error(exc)) from exc
