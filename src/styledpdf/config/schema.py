"""Typed configuration schema and loader for the styledpdf package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    confloat,
    conint,
    field_validator,
    model_validator,
)
from reportlab.lib import pagesizes
from reportlab.lib.units import inch, mm

from styledpdf.layout.lexer import MarkupSyntax
from styledpdf.layout.rules import StyleRuleTable
from styledpdf.layout.types import DEFAULT_FONT, PageGeometry, StyleRule

_UNITS: dict[str, float] = {"pt": 1.0, "mm": mm, "in": inch}
_PAGE_SIZES: dict[str, tuple[float, float]] = {
    "A3": pagesizes.A3,
    "A4": pagesizes.A4,
    "A5": pagesizes.A5,
    "LETTER": pagesizes.LETTER,
    "LEGAL": pagesizes.LEGAL,
}

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class FontSettings(BaseModel):
    """A font given either as a built-in ReportLab face or a TrueType file."""

    builtin: str | None = None
    path: Path | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "FontSettings":
        if (self.builtin is None) == (self.path is None):
            raise ValueError("font needs exactly one of 'builtin' or 'path'")
        return self


class RuleSettings(BaseModel):
    """Inline style rule; ``tag`` defaults to ``name``."""

    name: str = Field(min_length=1)
    delimiter: str | None = Field(default=None, min_length=1)
    tag: str | None = Field(default=None, min_length=1)
    font: str = Field(min_length=1)

    model_config = ConfigDict(extra="forbid")

    def marker(self, syntax: MarkupSyntax) -> str | None:
        if syntax is MarkupSyntax.TAG:
            return self.tag or self.name
        return self.delimiter


class MarginSettings(BaseModel):
    """Page margins in the page unit."""

    left: confloat(ge=0.0)
    top: confloat(ge=0.0)
    right: confloat(ge=0.0)
    bottom: confloat(ge=0.0)

    model_config = ConfigDict(extra="forbid")


class PageSettings(BaseModel):
    """Paper size, orientation and margins."""

    size: Literal["A3", "A4", "A5", "LETTER", "LEGAL"]
    orientation: Literal["portrait", "landscape"]
    unit: Literal["pt", "mm", "in"]
    margins: MarginSettings

    model_config = ConfigDict(extra="forbid")

    @field_validator("size", mode="before")
    @classmethod
    def _upper_size(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @property
    def scale(self) -> float:
        return _UNITS[self.unit]

    @property
    def pagesize(self) -> tuple[float, float]:
        size = _PAGE_SIZES[self.size]
        if self.orientation == "landscape":
            return pagesizes.landscape(size)
        return pagesizes.portrait(size)


class CsvSettings(BaseModel):
    """CSV parsing options."""

    header: bool
    delimiter: str = Field(min_length=1, max_length=1)

    model_config = ConfigDict(extra="forbid")


class WatchSettings(BaseModel):
    """Directory polling options."""

    directory: Path
    poll_interval_seconds: confloat(gt=0.0)
    extensions: list[str]
    max_workers: conint(ge=1)
    output_directory: Path | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        return [e.lower() if e.startswith(".") else f".{e.lower()}" for e in value]


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    markup: MarkupSyntax
    font_size: confloat(gt=0.0)
    line_height: confloat(gt=0.0)
    fonts: dict[str, FontSettings]
    rules: list[RuleSettings]
    page: PageSettings
    csv: CsvSettings
    watch: WatchSettings

    model_config = ConfigDict(extra="forbid")

    @field_validator("fonts")
    @classmethod
    def _default_font_present(cls, value: dict[str, FontSettings]) -> dict[str, FontSettings]:
        if DEFAULT_FONT not in value:
            raise ValueError(f"fonts must define '{DEFAULT_FONT}'")
        return value

    @property
    def line_height_pt(self) -> float:
        """Line height converted from the page unit to points."""

        return self.line_height * self.page.scale


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
    overrides: Mapping[str, Any] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``overrides`` mapping.  Lists (``rules``, ``extensions``) replace the
    default list rather than extending it.
    """

    with (
        importlib_resources.files("styledpdf.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        merged = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            user = yaml.safe_load(f) or {}
        if not isinstance(user, dict):
            raise ValueError(f"configuration root must be a mapping: {path}")
        merged = deep_merge_dicts(merged, user)

    if overrides:
        merged = deep_merge_dicts(merged, dict(overrides))

    return ConfigModel.model_validate(merged)


def page_geometry(cfg: ConfigModel) -> PageGeometry:
    """Return the configured page size and margins in points."""

    width, height = cfg.page.pagesize
    scale = cfg.page.scale
    margins = cfg.page.margins
    return PageGeometry(
        width=float(width),
        height=float(height),
        margin_left=margins.left * scale,
        margin_top=margins.top * scale,
        margin_right=margins.right * scale,
        margin_bottom=margins.bottom * scale,
    )


def build_rule_table(cfg: ConfigModel) -> StyleRuleTable:
    """Build the style rule table for ``cfg.markup``.

    Rules without a marker for the configured syntax are skipped.
    """

    rules = [
        StyleRule(r.name, marker, r.font)
        for r in cfg.rules
        if (marker := r.marker(cfg.markup)) is not None
    ]
    return StyleRuleTable(rules, default_font=DEFAULT_FONT, known_fonts=cfg.fonts)


__all__ = [
    "ConfigModel",
    "FontSettings",
    "RuleSettings",
    "MarginSettings",
    "PageSettings",
    "CsvSettings",
    "WatchSettings",
    "deep_merge_dicts",
    "load_config",
    "page_geometry",
    "build_rule_table",
]
