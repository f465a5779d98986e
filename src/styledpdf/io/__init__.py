"""Extension based registry for input documents.

``.txt`` files become :class:`TextDocument` objects and ``.csv`` files become
:class:`TableDocument` objects.  The registry dispatches on the lower-cased
file extension and hands already decoded text to the registered parser.

``UnsupportedFormatError`` is raised when parsing a file whose extension has
no registered parser.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from .documents import Document, TableDocument, TextDocument
from .readers.csv_reader import parse_csv
from .readers.txt_reader import parse_text, read_text

ParserFunc = Callable[..., Document]

_PARSERS: dict[str, ParserFunc] = {}


def register_parser(ext: str, func: ParserFunc) -> None:
    """Register a parser for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".txt"``).  Matching is
        case-insensitive.
    func:
        Callable turning decoded text into a document.
    """

    _PARSERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot).

    Returns an empty string when the path has no extension.
    """

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def supported_extensions() -> tuple[str, ...]:
    return tuple(sorted(_PARSERS))


def parse_document(name: str | os.PathLike[str], text: str, **kwargs: Any) -> Document:
    """Parse ``text`` with the parser registered for ``name``'s extension.

    Raises
    ------
    UnsupportedFormatError
        If no parser is registered for the file extension.
    """

    ext = get_extension(name)
    parser = _PARSERS.get(ext)
    if parser is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return parser(text, **kwargs)


def read_document(
    path: str | os.PathLike[str], *, encoding: str = "utf-8-sig", **kwargs: Any
) -> Document:
    """Read and parse the file at ``path``."""

    ext = get_extension(path)
    if ext not in _PARSERS:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'")
    return parse_document(path, read_text(path, encoding=encoding), **kwargs)


register_parser(".txt", parse_text)
register_parser(".csv", parse_csv)

__all__ = [
    "Document",
    "TextDocument",
    "TableDocument",
    "ParserFunc",
    "register_parser",
    "get_extension",
    "supported_extensions",
    "parse_document",
    "read_document",
]
