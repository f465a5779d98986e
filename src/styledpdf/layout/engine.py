"""Styled text and table rendering.

:class:`LayoutEngine` ties the lexer, the word wrapper, the paginator and the
table layout to one drawing surface.  Each ``render_*`` call owns its cursor
and font state; nothing is carried between calls except what the caller
passes back in as ``cursor``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from styledpdf.layout.lexer import MarkupSyntax, lex_line
from styledpdf.layout.paginator import Paginator
from styledpdf.layout.rules import StyleRuleTable
from styledpdf.layout.table import layout_table
from styledpdf.layout.types import LayoutCursor, PageGeometry, StyleRule, StyledRun, TableModel
from styledpdf.layout.wrap import WrappedLine, wrap_runs
from styledpdf.surface.base import DrawingSurface
from styledpdf.utils.errors import LayoutConfigError


class LayoutEngine:
    """Render styled text and tables onto ``surface``.

    Parameters
    ----------
    surface:
        Drawing and measurement capability.
    rules:
        Style rules used by the lexer.
    font_size:
        Font size in points.
    line_height:
        Vertical advance per line in points.
    syntax:
        Inline marker syntax of the documents rendered by this engine.
    """

    def __init__(
        self,
        surface: DrawingSurface,
        rules: StyleRuleTable,
        *,
        font_size: float = 11.0,
        line_height: float = 14.0,
        syntax: MarkupSyntax | str = MarkupSyntax.DELIMITER,
    ) -> None:
        if font_size <= 0 or line_height <= 0:
            raise LayoutConfigError("font size and line height must be positive")
        self.surface = surface
        self.rules = rules
        self.font_size = font_size
        self.line_height = line_height
        self.syntax = MarkupSyntax(syntax)

    def lex(self, line: str) -> list[StyledRun]:
        return lex_line(line, self.rules, self.syntax)

    def _paginator(
        self, geometry: PageGeometry | None, cursor: LayoutCursor | None
    ) -> Paginator:
        geometry = geometry or self.surface.current_page_bounds()
        if geometry.content_width <= 0:
            raise LayoutConfigError(
                f"page margins leave no content width ({geometry.content_width:.2f}pt)"
            )
        return Paginator(self.surface, geometry, cursor)

    def _draw_line(self, x: float, y: float, line: WrappedLine) -> None:
        for fragment in line.fragments:
            self.surface.set_font(fragment.font_id, self.font_size)
            self.surface.draw_text(x + fragment.x, y, fragment.text)

    def render_text(
        self,
        raw_text: str,
        geometry: PageGeometry | None = None,
        cursor: LayoutCursor | None = None,
    ) -> LayoutCursor:
        """Render ``raw_text`` line by line and return the final cursor.

        Without ``cursor`` rendering starts on a new page at the top-left
        margin corner.
        """

        paginator = self._paginator(geometry, cursor)
        page = paginator.geometry
        for raw_line in raw_text.splitlines():
            # continuation lines restart at the left margin
            first_width = page.width - page.margin_right - paginator.cursor.x
            lines = wrap_runs(
                self.lex(raw_line),
                self.surface,
                page.content_width,
                self.font_size,
                first_width=first_width,
            )
            for line in lines:
                paginator.ensure_space(self.line_height)
                self._draw_line(paginator.cursor.x, paginator.cursor.y, line)
                paginator.advance(self.line_height)
        return paginator.cursor

    def render_table(
        self,
        table: TableModel,
        origin: LayoutCursor | None = None,
        geometry: PageGeometry | None = None,
    ) -> LayoutCursor:
        """Render ``table`` starting at ``origin`` and return the final cursor."""

        paginator = self._paginator(geometry, origin)
        layout_table(
            table,
            paginator,
            lexer=self.lex,
            draw_line=self._draw_line,
            font_size=self.font_size,
            line_height=self.line_height,
            origin_x=origin.x if origin is not None else None,
        )
        return paginator.cursor


def render_text(
    surface: DrawingSurface,
    raw_text: str,
    style_rules: StyleRuleTable | Sequence[StyleRule],
    geometry: PageGeometry | None = None,
    **options: Any,
) -> LayoutCursor:
    """Render ``raw_text`` onto ``surface`` with a throwaway engine."""

    return _engine(surface, style_rules, options).render_text(raw_text, geometry)


def render_table(
    surface: DrawingSurface,
    headers: Sequence[str] | None,
    rows: Sequence[Sequence[str]],
    origin: LayoutCursor | None = None,
    geometry: PageGeometry | None = None,
    *,
    style_rules: StyleRuleTable | Sequence[StyleRule] = (),
    **options: Any,
) -> LayoutCursor:
    """Render a table onto ``surface`` with a throwaway engine."""

    table = TableModel.from_lists(list(headers or ()), [list(r) for r in rows])
    return _engine(surface, style_rules, options).render_table(table, origin, geometry)


def _engine(
    surface: DrawingSurface,
    style_rules: StyleRuleTable | Sequence[StyleRule],
    options: dict[str, Any],
) -> LayoutEngine:
    table = style_rules if isinstance(style_rules, StyleRuleTable) else StyleRuleTable(style_rules)
    return LayoutEngine(surface, table, **options)


__all__ = ["LayoutEngine", "render_text", "render_table"]
