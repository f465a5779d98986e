"""Cursor tracking and page breaking.

The paginator owns the :class:`LayoutCursor` for one render pass.  Before a
line or table row of height ``h`` is drawn, :meth:`Paginator.ensure_space`
starts a new page whenever ``cursor.y + h`` would pass the bottom margin.  A
page that holds nothing yet is never abandoned, which keeps the page count
bounded even when a single unit is taller than the page.

A caller-supplied cursor continues the current page; on a surface with no
page open yet the first page is opened before anything is drawn.
"""

from __future__ import annotations

from styledpdf.layout.types import LayoutCursor, PageGeometry
from styledpdf.surface.base import DrawingSurface

_EPSILON = 1e-9


class Paginator:
    """Insert page breaks on ``surface`` so content stays inside ``geometry``."""

    def __init__(
        self,
        surface: DrawingSurface,
        geometry: PageGeometry,
        cursor: LayoutCursor | None = None,
    ) -> None:
        self.surface = surface
        self.geometry = geometry
        if cursor is None:
            self.new_page()
            return
        self.cursor = LayoutCursor(cursor.x, cursor.y)
        if not surface.page_count:
            surface.add_page()

    def new_page(self) -> None:
        self.surface.add_page()
        self.cursor = self.geometry.top_left()

    @property
    def page_is_empty(self) -> bool:
        return self.cursor.y <= self.geometry.margin_top + _EPSILON

    def fits(self, height: float) -> bool:
        return self.cursor.y + height <= self.geometry.content_bottom + _EPSILON

    def ensure_space(self, height: float) -> bool:
        """Start a new page if ``height`` does not fit; return whether one was added."""

        if self.fits(height) or self.page_is_empty:
            return False
        self.new_page()
        return True

    def advance(self, height: float) -> None:
        """Move the cursor down by ``height`` and back to the left margin."""

        self.cursor.y += height
        self.cursor.x = self.geometry.margin_left


__all__ = ["Paginator"]
