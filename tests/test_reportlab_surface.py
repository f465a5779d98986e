"""Tests for the ReportLab surface and font registry."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen.canvas import Canvas

from styledpdf.layout.engine import LayoutEngine, render_table
from styledpdf.layout.rules import StyleRuleTable
from styledpdf.layout.types import LayoutCursor, PageGeometry, StyleRule
from styledpdf.surface import DrawingSurface, FontRegistry, ReportLabSurface, register_ttf
from styledpdf.utils.errors import ConfigurationError

GEOMETRY = PageGeometry(200.0, 200.0, 20.0, 20.0, 20.0, 20.0)


@pytest.fixture
def fonts() -> FontRegistry:
    return FontRegistry({"normal": "Helvetica", "bold": "Helvetica-Bold"})


def make_surface(fonts: FontRegistry) -> tuple[ReportLabSurface, io.BytesIO]:
    buffer = io.BytesIO()
    canvas = Canvas(buffer, pagesize=(GEOMETRY.width, GEOMETRY.height))
    return ReportLabSurface(canvas, GEOMETRY, fonts), buffer


def test_surface_satisfies_protocol(fonts: FontRegistry) -> None:
    surface, _ = make_surface(fonts)
    assert isinstance(surface, DrawingSurface)


def test_width_uses_resolved_font(fonts: FontRegistry) -> None:
    surface, _ = make_surface(fonts)
    expected = pdfmetrics.stringWidth("Wide", "Helvetica-Bold", 12)
    assert surface.width("Wide", "bold", 12) == pytest.approx(expected)


def test_unmapped_font_falls_back_and_warns_once(
    fonts: FontRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="styledpdf"):
        assert fonts.resolve("mono") == "Helvetica"
        assert fonts.resolve("mono") == "Helvetica"
    assert caplog.text.count("font 'mono' is not mapped") == 1


def test_default_font_must_be_mapped() -> None:
    with pytest.raises(ConfigurationError):
        FontRegistry({"bold": "Helvetica-Bold"})


def test_from_sources_checks_builtin_names() -> None:
    class Source:
        def __init__(self, builtin: str | None = None, path: Path | None = None) -> None:
            self.builtin = builtin
            self.path = path

    registry = FontRegistry.from_sources({"normal": Source("Times-Roman")})
    assert registry.resolve("normal") == "Times-Roman"
    with pytest.raises(ConfigurationError):
        FontRegistry.from_sources({"normal": Source("No-Such-Font")})


def test_missing_ttf_is_a_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        register_ttf("normal", tmp_path / "missing.ttf")


def test_first_add_page_does_not_emit_blank_page(fonts: FontRegistry) -> None:
    surface, _ = make_surface(fonts)
    surface.add_page()
    assert surface.page_count == 1
    assert surface.canvas.getPageNumber() == 1
    surface.add_page()
    assert surface.canvas.getPageNumber() == 2


def test_engine_renders_pdf(fonts: FontRegistry) -> None:
    surface, buffer = make_surface(fonts)
    rules = StyleRuleTable([StyleRule("bold", "**", "bold")])
    engine = LayoutEngine(surface, rules, font_size=10, line_height=12)
    engine.render_text("\n".join(f"line **{i}**" for i in range(40)))
    surface.canvas.save()
    # 160pt of content height holds 13 lines of 12pt
    assert surface.page_count == 4
    assert buffer.getvalue().startswith(b"%PDF")


def test_drawing_on_implicit_first_page_counts_as_open(fonts: FontRegistry) -> None:
    surface, _ = make_surface(fonts)
    surface.set_font("normal", 10)
    surface.draw_text(20, 20, "first")
    assert surface.page_count == 1
    surface.add_page()
    assert surface.canvas.getPageNumber() == 2


def test_table_from_origin_on_fresh_canvas_keeps_pages_apart(fonts: FontRegistry) -> None:
    surface, buffer = make_surface(fonts)
    rows = [[f"row {i}"] for i in range(40)]
    render_table(
        surface, ["H"], rows, LayoutCursor(20.0, 20.0), GEOMETRY, font_size=8, line_height=10
    )
    # header plus 40 rows at sixteen rows per page
    assert surface.page_count == 3
    assert surface.canvas.getPageNumber() == 3
    surface.canvas.save()
    assert buffer.getvalue().startswith(b"%PDF")
