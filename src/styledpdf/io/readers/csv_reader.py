"""CSV reader producing table documents.

Records are parsed with the standard :mod:`csv` module.  With ``header=True``
the first record becomes the table headers and fixes the column count;
otherwise the first record does.  Empty input yields an empty table, which
renders nothing.
"""

from __future__ import annotations

import csv
import io

from styledpdf.io.documents import TableDocument
from styledpdf.layout.types import TableModel


def parse_csv(
    text: str,
    *,
    header: bool = True,
    delimiter: str = ",",
    **_: object,
) -> TableDocument:
    """Parse CSV ``text`` into a :class:`TableDocument`.

    Raises :class:`csv.Error` for malformed input.
    """

    records = [row for row in csv.reader(io.StringIO(text, newline=""), delimiter=delimiter) if row]
    if header and records:
        return TableDocument(TableModel.from_lists(records[0], records[1:]))
    return TableDocument(TableModel.from_lists(None, records))


__all__ = ["parse_csv"]
