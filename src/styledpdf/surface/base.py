"""Capability protocols consumed by the layout engine.

The engine never talks to a PDF library directly.  It measures text through a
:class:`Measurer` and draws through a :class:`DrawingSurface`; both use the
top-left origin described in :mod:`styledpdf.layout.types`.  A surface
instance is not reentrant and must be driven by one render at a time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from styledpdf.layout.types import PageGeometry


@runtime_checkable
class Measurer(Protocol):
    """Protocol for text width measurement."""

    def width(self, text: str, font_id: str, size: float) -> float:
        """Return the advance width of ``text`` in points."""

        ...


@runtime_checkable
class DrawingSurface(Measurer, Protocol):
    """Protocol for drawing text onto paged output.

    ``page_count`` is the number of pages opened so far; zero means no page
    is open yet and the next render has to call :meth:`add_page` first.
    """

    page_count: int

    def set_font(self, font_id: str, size: float) -> None:
        """Select the font used by subsequent :meth:`draw_text` calls."""

        ...

    def draw_text(self, x: float, y: float, text: str) -> None:
        """Draw ``text`` with its top-left corner at ``(x, y)``."""

        ...

    def add_page(self) -> None:
        """Start a new page; the first call opens the first page."""

        ...

    def current_page_bounds(self) -> PageGeometry:
        """Return the geometry of the current page."""

        ...


__all__ = ["Measurer", "DrawingSurface"]
