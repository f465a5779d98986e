"""Core layout model shared by the lexer, wrapper, paginator and tables.

Coordinates are expressed in points with the origin at the *top-left* corner
of the page; ``y`` grows downwards.  Drawing surfaces translate these
coordinates into whatever system their backend uses.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_FONT = "normal"


@dataclass(slots=True, frozen=True)
class StyleRule:
    """Mapping from a delimiter literal or tag name to a font id."""

    name: str
    delimiter_or_tag: str
    font_id: str


@dataclass(slots=True, frozen=True)
class StyledRun:
    """A contiguous span of text sharing one font.

    Line-break runs carry no text and force the wrapper onto a new line.
    """

    text: str
    font_id: str = DEFAULT_FONT
    is_line_break: bool = False

    @classmethod
    def line_break(cls) -> "StyledRun":
        return cls("", DEFAULT_FONT, True)


@dataclass(slots=True)
class LayoutCursor:
    """Mutable drawing position owned by a single render pass."""

    x: float
    y: float


@dataclass(slots=True, frozen=True)
class PageGeometry:
    """Page size and margins in points."""

    width: float
    height: float
    margin_left: float
    margin_top: float
    margin_right: float
    margin_bottom: float

    @property
    def content_width(self) -> float:
        return self.width - self.margin_left - self.margin_right

    @property
    def content_bottom(self) -> float:
        """Lowest ``y`` that content may reach."""

        return self.height - self.margin_bottom

    @property
    def content_height(self) -> float:
        return self.content_bottom - self.margin_top

    def top_left(self) -> LayoutCursor:
        return LayoutCursor(self.margin_left, self.margin_top)


@dataclass(slots=True, frozen=True)
class TableModel:
    """Tabular content with a fixed column count.

    The column count comes from ``headers`` when present, otherwise from the
    first row.  :meth:`normalized_rows` pads short rows with empty cells and
    drops cells beyond the column count.
    """

    headers: tuple[str, ...] = ()
    rows: tuple[tuple[str, ...], ...] = field(default_factory=tuple)

    @classmethod
    def from_lists(cls, headers: list[str] | None, rows: list[list[str]]) -> "TableModel":
        return cls(tuple(headers or ()), tuple(tuple(r) for r in rows))

    @property
    def column_count(self) -> int:
        if self.headers:
            return len(self.headers)
        if self.rows:
            return len(self.rows[0])
        return 0

    def normalized_rows(self) -> list[tuple[str, ...]]:
        """Return header row (if any) followed by body rows, all ``column_count`` wide."""

        n = self.column_count
        out: list[tuple[str, ...]] = []
        source = ([self.headers] if self.headers else []) + list(self.rows)
        for row in source:
            cells = tuple(row[:n])
            out.append(cells + ("",) * (n - len(cells)))
        return out


__all__ = [
    "DEFAULT_FONT",
    "StyleRule",
    "StyledRun",
    "LayoutCursor",
    "PageGeometry",
    "TableModel",
]
