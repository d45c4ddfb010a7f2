"""Comparison settings models and loaders."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from deep_close.precision import DEFAULT_PRECISION


class ComparisonConfig(BaseModel):
    """Settings for a deep-close comparison run."""

    model_config = ConfigDict(extra="forbid")

    precision: int = Field(default=DEFAULT_PRECISION, ge=0)
    strict: bool = True
    max_depth: int | None = Field(default=None, ge=1)


def _format_validation_error(error: ValidationError) -> str:
    lines = ["Configuration validation failed:"]
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ()))
        message = issue.get("msg", "Invalid value")
        lines.append(f"- {location}: {message}")
    return "\n".join(lines)


def build_config(data: dict[str, Any]) -> ComparisonConfig:
    """Validate a settings mapping, raising ``ValueError`` with readable details."""

    try:
        return ComparisonConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(_format_validation_error(exc)) from exc


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
    return build_config(data)
