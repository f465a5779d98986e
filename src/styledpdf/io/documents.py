"""Parsed input documents handed to the PDF writer."""

from __future__ import annotations

from dataclasses import dataclass

from styledpdf.layout.types import TableModel


@dataclass(slots=True, frozen=True)
class TextDocument:
    """Free text; every line is lexed and wrapped separately."""

    text: str


@dataclass(slots=True, frozen=True)
class TableDocument:
    """Tabular content rendered with the table layout."""

    table: TableModel


Document = TextDocument | TableDocument

__all__ = ["Document", "TextDocument", "TableDocument"]
