"""Render settings shared by every node."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .io_utils import read_yaml, warn

PathLike = Union[str, Path]

# Two ASCII spaces per nesting level.
INDENT_UNIT = "  "
# Longest concatenated content that still renders on one line.
COMPACT_WIDTH = 80
LEAF_NEWLINE = True


class RenderConfig(BaseModel):
    """Layout knobs for serialization."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent: str = Field(
        INDENT_UNIT, description="Prefix added to every line per nesting level."
    )
    compact_width: int = Field(
        COMPACT_WIDTH,
        ge=0,
        description="Maximum content length for the single-line container layout.",
    )
    leaf_newline: bool = Field(
        LEAF_NEWLINE, description="Whether self-closing tags end with a line break."
    )
    oneline: Optional[bool] = Field(
        None,
        description=(
            "Container layout override: None picks compact or expanded from the "
            "content, True forces compact, False forces expanded."
        ),
    )

    @field_validator("indent")
    @classmethod
    def _indent_is_whitespace(cls, value: str) -> str:
        if not value or value.strip():
            raise ValueError("indent must be a non-empty run of whitespace")
        return value


DEFAULT_CONFIG = RenderConfig()


def load_config(path: PathLike) -> RenderConfig:
    """Read a YAML mapping of RenderConfig fields."""
    config_path = Path(path)
    data = read_yaml(config_path)
    if data is None:
        warn(f"{config_path} is empty; using default render settings.")
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping of render settings.")
    try:
        return RenderConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid render settings in {config_path}: {exc}") from exc


__all__ = [
    "COMPACT_WIDTH",
    "DEFAULT_CONFIG",
    "INDENT_UNIT",
    "LEAF_NEWLINE",
    "RenderConfig",
    "load_config",
]
