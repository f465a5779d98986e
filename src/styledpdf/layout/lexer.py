"""Inline style lexer.

A single line of raw text is split into ordered :class:`StyledRun` objects.
Two marker syntaxes are supported and a document uses exactly one of them:

``delimiter``
    Each rule owns a literal delimiter such as ``**``.  An unescaped
    delimiter toggles its font: on when another font is active, back to the
    default when the rule's font is already active.  ``\\`` directly before a
    delimiter emits the delimiter literally.

``tag``
    ``<name>`` switches to the font of the rule named ``name``; any known
    closing tag ``</name>`` reverts to the default font.  ``<br>``, ``<br/>``
    and ``<br />`` produce line-break runs.  Anything else starting with
    ``<`` is plain text.

Only one style is active at a time; there is no nesting stack, so the last
opened style wins.  The active font lives in a local variable for the
duration of one call and never leaks into the next line.
"""

from __future__ import annotations

from enum import Enum

from styledpdf.layout.rules import StyleRuleTable
from styledpdf.layout.types import StyledRun

ESCAPE = "\\"
BREAK_TAGS: tuple[str, ...] = ("<br />", "<br/>", "<br>")


class MarkupSyntax(str, Enum):
    """Supported inline marker syntaxes."""

    DELIMITER = "delimiter"
    TAG = "tag"


def lex_delimited(line: str, table: StyleRuleTable) -> list[StyledRun]:
    """Split ``line`` into runs using delimiter-toggle markers."""

    runs: list[StyledRun] = []
    current = table.default_font
    pending: list[str] = []

    def flush() -> None:
        if pending:
            runs.append(StyledRun("".join(pending), current))
            pending.clear()

    i = 0
    n = len(line)
    while i < n:
        if line[i] == ESCAPE:
            escaped = table.match_at(line, i + 1)
            if escaped is not None:
                pending.append(escaped.delimiter_or_tag)
                i += 1 + len(escaped.delimiter_or_tag)
                continue
        rule = table.match_at(line, i)
        if rule is not None:
            flush()
            current = table.default_font if current == rule.font_id else rule.font_id
            i += len(rule.delimiter_or_tag)
            continue
        pending.append(line[i])
        i += 1
    flush()
    return runs


def lex_tags(line: str, table: StyleRuleTable) -> list[StyledRun]:
    """Split ``line`` into runs using ``<tag>`` markers."""

    runs: list[StyledRun] = []
    current = table.default_font
    pending: list[str] = []

    def flush() -> None:
        if pending:
            runs.append(StyledRun("".join(pending), current))
            pending.clear()

    i = 0
    n = len(line)
    while i < n:
        if line[i] != "<":
            pending.append(line[i])
            i += 1
            continue

        brk = next((t for t in BREAK_TAGS if line.startswith(t, i)), None)
        if brk is not None:
            flush()
            runs.append(StyledRun.line_break())
            i += len(brk)
            continue

        matched = False
        for rule in table.rules:
            opening = f"<{rule.delimiter_or_tag}>"
            closing = f"</{rule.delimiter_or_tag}>"
            if line.startswith(opening, i):
                flush()
                current = rule.font_id
                i += len(opening)
                matched = True
                break
            if line.startswith(closing, i):
                flush()
                current = table.default_font
                i += len(closing)
                matched = True
                break
        if not matched:
            pending.append("<")
            i += 1
    flush()
    return runs


def lex_line(
    line: str,
    table: StyleRuleTable,
    syntax: MarkupSyntax | str = MarkupSyntax.DELIMITER,
) -> list[StyledRun]:
    """Dispatch to the lexer for ``syntax``."""

    if MarkupSyntax(syntax) is MarkupSyntax.TAG:
        return lex_tags(line, table)
    return lex_delimited(line, table)


__all__ = ["MarkupSyntax", "BREAK_TAGS", "lex_delimited", "lex_tags", "lex_line"]
