"""PDF document writer.

Renders parsed documents onto a ReportLab canvas through
:class:`~styledpdf.surface.ReportLabSurface`.  Each call builds its own canvas
and surface, so concurrent calls never share drawing state.  Fonts are
registered once per :class:`~styledpdf.surface.FontRegistry`; pass a prebuilt
registry when rendering many documents with the same configuration.
"""

from __future__ import annotations

import io
import os
from pathlib import Path

from reportlab.pdfgen.canvas import Canvas

from styledpdf.config import ConfigModel, build_rule_table, page_geometry
from styledpdf.io.documents import Document, TableDocument, TextDocument
from styledpdf.layout.engine import LayoutEngine
from styledpdf.surface import FontRegistry, ReportLabSurface
from styledpdf.utils.logging import get_logger

logger = get_logger(__name__)


def build_font_registry(cfg: ConfigModel) -> FontRegistry:
    """Register the configured fonts with ReportLab."""

    return FontRegistry.from_sources(cfg.fonts)


def render_pdf(
    document: Document,
    cfg: ConfigModel,
    *,
    fonts: FontRegistry | None = None,
    title: str | None = None,
) -> bytes:
    """Render ``document`` and return the PDF bytes."""

    fonts = fonts or build_font_registry(cfg)
    geometry = page_geometry(cfg)
    buffer = io.BytesIO()
    canvas = Canvas(buffer, pagesize=(geometry.width, geometry.height))
    canvas.setCreator("styledpdf")
    if title:
        canvas.setTitle(title)

    surface = ReportLabSurface(canvas, geometry, fonts)
    engine = LayoutEngine(
        surface,
        build_rule_table(cfg),
        font_size=cfg.font_size,
        line_height=cfg.line_height_pt,
        syntax=cfg.markup,
    )
    if isinstance(document, TableDocument):
        engine.render_table(document.table, geometry=geometry)
    elif isinstance(document, TextDocument):
        engine.render_text(document.text, geometry=geometry)
    else:
        raise TypeError(f"unsupported document type: {type(document).__name__}")

    canvas.save()
    logger.debug("rendered %s page(s)%s", surface.page_count, f" for {title}" if title else "")
    return buffer.getvalue()


def write_pdf(
    path: str | os.PathLike[str],
    document: Document,
    cfg: ConfigModel,
    *,
    fonts: FontRegistry | None = None,
) -> Path:
    """Render ``document`` to ``path``; parent directories are created."""

    out = Path(path)
    data = render_pdf(document, cfg, fonts=fonts, title=out.name)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(data)
    return out


__all__ = ["build_font_registry", "render_pdf", "write_pdf"]
