"""Table layout with uniform columns and auto-sized rows.

Every cell is lexed and wrapped at the column width before anything of its
row is drawn.  The row height is the largest wrapped line count of its cells
times the line height (never less than one line).  Cells are top aligned and
a row that fits on a page is never split.  Rows taller than a whole page fall
back to line-by-line pagination.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from styledpdf.layout.paginator import Paginator
from styledpdf.layout.types import PageGeometry, StyledRun, TableModel
from styledpdf.layout.wrap import WrappedLine, wrap_runs
from styledpdf.surface.base import DrawingSurface
from styledpdf.utils.errors import LayoutConfigError

Lexer = Callable[[str], list[StyledRun]]
LineDrawer = Callable[[float, float, WrappedLine], None]


@dataclass(slots=True, frozen=True)
class RowLayout:
    """Wrapped cells of one table row."""

    cells: tuple[list[WrappedLine], ...]

    @property
    def line_count(self) -> int:
        return max((len(c) for c in self.cells), default=1)


def column_width(geometry: PageGeometry, origin_x: float, columns: int) -> float:
    """Return the uniform width of ``columns`` columns starting at ``origin_x``."""

    available = geometry.width - geometry.margin_right - origin_x
    width = available / columns
    if width <= 0:
        raise LayoutConfigError(
            f"no room for {columns} column(s): available width is {available:.2f}pt"
        )
    return width


def layout_row(
    cells: Sequence[str],
    lexer: Lexer,
    surface: DrawingSurface,
    col_width: float,
    font_size: float,
) -> RowLayout:
    return RowLayout(tuple(wrap_runs(lexer(cell), surface, col_width, font_size) for cell in cells))


def layout_table(
    table: TableModel,
    paginator: Paginator,
    *,
    lexer: Lexer,
    draw_line: LineDrawer,
    font_size: float,
    line_height: float,
    origin_x: float | None = None,
) -> None:
    """Lay out ``table`` below the paginator's cursor."""

    columns = table.column_count
    if columns == 0:
        return
    geometry = paginator.geometry
    left = geometry.margin_left if origin_x is None else origin_x
    col_width = column_width(geometry, left, columns)
    rows = table.normalized_rows()
    if not rows:
        return

    for cells in rows:
        row = layout_row(cells, lexer, paginator.surface, col_width, font_size)
        row_height = row.line_count * line_height
        if row_height <= geometry.content_height:
            paginator.ensure_space(row_height)
            top = paginator.cursor.y
            for col, lines in enumerate(row.cells):
                x = left + col * col_width
                for i, line in enumerate(lines):
                    draw_line(x, top + i * line_height, line)
            paginator.advance(row_height)
            continue

        for i in range(row.line_count):
            paginator.ensure_space(line_height)
            for col, lines in enumerate(row.cells):
                if i < len(lines):
                    draw_line(left + col * col_width, paginator.cursor.y, lines[i])
            paginator.advance(line_height)


__all__ = ["RowLayout", "column_width", "layout_row", "layout_table"]
