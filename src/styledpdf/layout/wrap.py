"""Greedy word wrapping for styled runs.

Runs of one logical line are laid out word by word while the horizontal
position carries over from run to run, so differently styled runs can share a
visual line.  Whitespace is never drawn: a single space, measured in the
following word's font, separates words, including across a run boundary when
whitespace sits at that boundary.

A word wider than the whole line is split code point by code point.  At the
start of a fresh line at least one code point is always placed, so even a
line narrower than a single glyph makes progress.

Wrapping only measures; :class:`WrappedLine` objects carry fragment offsets
relative to the left edge of the wrapped region and are drawn by the caller.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from styledpdf.layout.types import StyledRun
from styledpdf.surface.base import Measurer
from styledpdf.utils.errors import LayoutConfigError

_WORD_RE = re.compile(r"\S+")


@dataclass(slots=True, frozen=True)
class Fragment:
    """Text placed at ``x`` points from the left edge of its line."""

    x: float
    text: str
    font_id: str
    width: float


@dataclass(slots=True)
class WrappedLine:
    """One visual line of fragments."""

    fragments: list[Fragment] = field(default_factory=list)

    @property
    def width(self) -> float:
        if not self.fragments:
            return 0.0
        last = self.fragments[-1]
        return last.x + last.width

    @property
    def text(self) -> str:
        return "".join(f.text for f in self.fragments)


class _Wrapper:
    def __init__(
        self, measurer: Measurer, max_width: float, size: float, first_width: float
    ) -> None:
        self.measurer = measurer
        self.max_width = max_width
        self.first_width = first_width
        self.size = size
        self.lines: list[WrappedLine] = [WrappedLine()]
        self.x = 0.0
        self.space_pending = False

    @property
    def limit(self) -> float:
        return self.first_width if len(self.lines) == 1 else self.max_width

    def measure(self, text: str, font_id: str) -> float:
        return self.measurer.width(text, font_id, self.size)

    def newline(self) -> None:
        self.lines.append(WrappedLine())
        self.x = 0.0
        self.space_pending = False

    def emit(self, x: float, text: str, font_id: str, width: float) -> None:
        self.lines[-1].fragments.append(Fragment(x, text, font_id, width))
        self.x = x + width

    def add_run(self, run: StyledRun) -> None:
        if run.is_line_break:
            self.newline()
            return
        last_end = 0
        for match in _WORD_RE.finditer(run.text):
            if match.start() > last_end:
                self.space_pending = True
            self.add_word(match.group(), run.font_id)
            self.space_pending = False
            last_end = match.end()
        if last_end < len(run.text):
            self.space_pending = True

    def add_word(self, word: str, font_id: str) -> None:
        width = self.measure(word, font_id)
        lead = self.measure(" ", font_id) if self.space_pending and self.x > 0 else 0.0
        if self.x + lead + width <= self.limit:
            self.emit(self.x + lead, word, font_id, width)
        elif width <= self.max_width:
            self.newline()
            self.emit(0.0, word, font_id, width)
        else:
            self.split_word(word, font_id, self.x + lead if self.x > 0 else 0.0)

    def split_word(self, word: str, font_id: str, start: float) -> None:
        rest = word
        while rest:
            count = self.fit_prefix(rest, font_id, self.limit - start)
            if count == 0:
                if start > 0 or self.limit < self.max_width:
                    self.newline()
                    start = 0.0
                    continue
                count = 1
            piece = rest[:count]
            rest = rest[count:]
            self.emit(start, piece, font_id, self.measure(piece, font_id))
            if rest:
                self.newline()
                start = 0.0

    def fit_prefix(self, text: str, font_id: str, available: float) -> int:
        """Return how many leading code points of ``text`` fit in ``available``."""

        fit = 0
        for i in range(1, len(text) + 1):
            if self.measure(text[:i], font_id) > available:
                break
            fit = i
        return fit


def wrap_runs(
    runs: Iterable[StyledRun],
    measurer: Measurer,
    max_width: float,
    size: float,
    *,
    first_width: float | None = None,
) -> list[WrappedLine]:
    """Wrap ``runs`` into lines no wider than ``max_width``.

    ``first_width`` narrows only the first line, for text that starts to the
    right of the wrapped region's left edge; when nothing fits there the first
    line stays empty.  Always returns at least one (possibly empty) line.
    Raises :class:`LayoutConfigError` for a non-positive ``max_width``.
    """

    if max_width <= 0:
        raise LayoutConfigError(f"line width must be positive, got {max_width}")
    first = max_width if first_width is None else max(first_width, 0.0)
    wrapper = _Wrapper(measurer, max_width, size, first)
    for run in runs:
        wrapper.add_run(run)
    return wrapper.lines


def count_lines(
    runs: Iterable[StyledRun],
    measurer: Measurer,
    max_width: float,
    size: float,
) -> int:
    """Return the number of visual lines ``runs`` need at ``max_width``."""

    return len(wrap_runs(runs, measurer, max_width, size))


__all__ = ["Fragment", "WrappedLine", "wrap_runs", "count_lines"]
