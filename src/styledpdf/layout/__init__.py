"""Styled-text layout and pagination engine."""

from .types import DEFAULT_FONT, LayoutCursor, PageGeometry, StyledRun, StyleRule, TableModel
from .rules import StyleRuleTable
from .lexer import MarkupSyntax, lex_delimited, lex_line, lex_tags
from .wrap import Fragment, WrappedLine, count_lines, wrap_runs
from .paginator import Paginator
from .table import layout_table
from .engine import LayoutEngine, render_table, render_text

__all__ = [
    "DEFAULT_FONT",
    "LayoutCursor",
    "PageGeometry",
    "StyledRun",
    "StyleRule",
    "TableModel",
    "StyleRuleTable",
    "MarkupSyntax",
    "lex_delimited",
    "lex_line",
    "lex_tags",
    "Fragment",
    "WrappedLine",
    "count_lines",
    "wrap_runs",
    "Paginator",
    "layout_table",
    "LayoutEngine",
    "render_table",
    "render_text",
]
