"""Typed configuration schema and loader for the threadpress package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, constr

SOURCE_ENV = "THREADPRESS_SOURCE"

OutputFormat = Literal["txt", "md", "pdf"]
FontSize = Literal[9, 11, 13, 15]

OUTPUT_FORMATS: tuple[str, ...] = ("txt", "md", "pdf")
FONT_SIZES: tuple[int, ...] = (9, 11, 13, 15)
COLUMN_CHOICES: tuple[int, ...] = (1, 2, 3, 4)

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class PageSettings(BaseModel):
    """Page size and margin in points."""

    width: confloat(gt=0)
    height: confloat(gt=0)
    margin: confloat(ge=0)

    model_config = ConfigDict(extra="forbid")


class LayoutSettings(BaseModel):
    """Typography and spacing of the PDF body."""

    font_name: str
    line_gap: confloat(ge=0)
    column_gap: confloat(ge=0)
    block_spacing: confloat(ge=0)
    separator_gap: confloat(ge=0)
    separator_thickness: confloat(ge=0)
    separator_color: constr(pattern=r"^#[0-9a-fA-F]{6}$")
    near_bottom_ratio: confloat(gt=0.0, le=1.0)
    title_font_size: confloat(gt=0)
    title_gap: confloat(ge=0)

    model_config = ConfigDict(extra="forbid")


class ExportOptions(BaseModel):
    """User-selected output options.

    Every field has a closed set of allowed values except the filename and
    title, which are free text.
    """

    format: OutputFormat
    filename: constr(strip_whitespace=True, min_length=1)
    font_size: FontSize
    columns: conint(ge=1, le=4)
    title: str

    model_config = ConfigDict(extra="forbid")

    @property
    def output_name(self) -> str:
        """Return ``<filename>.<format>``."""

        return f"{self.filename}.{self.format}"


class ExtractSettings(BaseModel):
    """CSS selectors used to find comments and their paragraphs."""

    comment_selector: str
    paragraph_selector: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    source: str
    page: PageSettings
    layout: LayoutSettings
    output: ExportOptions
    extract: ExtractSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``THREADPRESS_SOURCE`` for the input path.
    """

    with (
        importlib_resources.files("threadpress.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    if environ.get(SOURCE_ENV):
        merged = deep_merge_dicts(merged, {"source": environ[SOURCE_ENV]})

    return ConfigModel.model_validate(merged)


__all__ = [
    "COLUMN_CHOICES",
    "ConfigModel",
    "ExportOptions",
    "ExtractSettings",
    "FONT_SIZES",
    "LayoutSettings",
    "OUTPUT_FORMATS",
    "PageSettings",
    "SOURCE_ENV",
    "deep_merge_dicts",
    "load_config",
]
