"""Drawing surface backed by a ReportLab canvas.

Layout coordinates start at the top-left corner while PDF coordinates start
at the bottom-left, so :meth:`ReportLabSurface.draw_text` flips ``y`` and
places the baseline one font size below the requested top edge.
"""

from __future__ import annotations

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen.canvas import Canvas

from styledpdf.layout.types import PageGeometry
from styledpdf.surface.fonts import FontRegistry


class ReportLabSurface:
    """:class:`~styledpdf.surface.base.DrawingSurface` over a ReportLab ``Canvas``."""

    def __init__(self, canvas: Canvas, geometry: PageGeometry, fonts: FontRegistry) -> None:
        self.canvas = canvas
        self.geometry = geometry
        self.fonts = fonts
        self.page_count = 0
        self._size = 0.0

    def width(self, text: str, font_id: str, size: float) -> float:
        return float(pdfmetrics.stringWidth(text, self.fonts.resolve(font_id), size))

    def set_font(self, font_id: str, size: float) -> None:
        self.canvas.setFont(self.fonts.resolve(font_id), size)
        self._size = size

    def draw_text(self, x: float, y: float, text: str) -> None:
        # a fresh Canvas already holds an implicit first page
        if not self.page_count:
            self.page_count = 1
        self.canvas.drawString(x, self.geometry.height - y - self._size, text)

    def add_page(self) -> None:
        if self.page_count:
            self.canvas.showPage()
        self.page_count += 1

    def current_page_bounds(self) -> PageGeometry:
        return self.geometry


__all__ = ["ReportLabSurface"]
