"""
Run configuration.

An :class:`ExportConfig` is built once, validated, and handed explicitly to
every step of the pipeline.  It can be read from a JSON file (the same keys
the command line accepts, camelCase or snake_case) and overridden from code
or from command line flags.
"""

from __future__ import annotations

import json
import os
from datetime import timezone as dt_timezone, tzinfo
from typing import Any, Dict, List, Literal, Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..utils.errors import ConfigurationError

SaveImages = Literal["none", "attached", "scraped", "all"]

DEFAULT_FRONTMATTER_FIELDS: List[str] = [
    "title",
    "date",
    "categories",
    "tags",
    "coverImage",
    "draft",
]


class ExportConfig(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    input: str = "export.xml"
    save_images: SaveImages = Field("all", alias="saveImages")
    timezone: str = "utc"
    frontmatter_fields: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FRONTMATTER_FIELDS), alias="frontmatterFields"
    )
    report_dir: str = Field(os.path.join("reports", "parsing"), alias="reportDir")

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        if v.lower() == "utc":
            return "utc"
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown time zone '{v}'") from e
        return v

    @field_validator("frontmatter_fields", mode="before")
    @classmethod
    def _split_fields(cls, v: Any):
        # "title,date:published" is accepted as well as a list
        if isinstance(v, str):
            return [f.strip() for f in v.split(",") if f.strip()]
        return v

    @property
    def zone(self) -> tzinfo:
        if self.timezone == "utc":
            return dt_timezone.utc
        return ZoneInfo(self.timezone)

    @property
    def saves_attached_images(self) -> bool:
        return self.save_images in ("attached", "all")

    @property
    def saves_scraped_images(self) -> bool:
        return self.save_images in ("scraped", "all")


def _format_validation_error(e: ValidationError) -> str:
    lines = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        lines.append(f"{loc}: {err.get('msg')}")
    return "Invalid configuration: " + "; ".join(lines)


def _by_field_name(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Rewrite camelCase aliases to field names so file values and overrides merge."""
    aliases = {
        field.alias: name for name, field in ExportConfig.model_fields.items() if field.alias
    }
    return {aliases.get(key, key): value for key, value in data.items()}


def load_config(
    config_file: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None
) -> ExportConfig:
    """
    Build an :class:`ExportConfig` from an optional JSON file plus overrides.

    Overrides whose value is ``None`` are ignored so that unset command line
    flags do not mask values from the file.

    Raises:
        ConfigurationError: If the file cannot be read or decoded, or if the
            resulting values fail validation.
    """
    data: Dict[str, Any] = {}
    if config_file:
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Could not read config file {config_file}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Could not decode config file {config_file}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Top-level JSON in {config_file} must be an object")

    data = _by_field_name(data)
    for key, value in _by_field_name(overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        return ExportConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(_format_validation_error(e)) from e
