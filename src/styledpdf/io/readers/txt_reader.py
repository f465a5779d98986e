"""Plain-text reader.

This module exposes :func:`read_text` which loads text files without performing
any content normalization, and :func:`parse_text` which wraps already decoded
text into a :class:`~styledpdf.io.documents.TextDocument`.  UTF-8 byte-order
marks (BOM) are handled transparently by using the ``"utf-8-sig"`` codec by
default.  ``FileNotFoundError`` and other I/O errors propagate to the caller.
"""

from __future__ import annotations

import os

from styledpdf.io.documents import TextDocument

PathLikeStr = os.PathLike[str]


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a plain-text file as-is.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding to use.  Defaults to ``"utf-8-sig"`` so that a UTF-8 BOM
        is consumed when present.
    errors:
        Error handling strategy passed to :func:`open`.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


def parse_text(text: str, **_: object) -> TextDocument:
    """Return ``text`` as a :class:`TextDocument`."""

    return TextDocument(text)


__all__ = ["read_text", "parse_text"]
