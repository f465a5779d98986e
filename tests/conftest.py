"""Shared fixtures: a deterministic drawing surface for layout tests."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from styledpdf.layout.types import PageGeometry


@dataclass
class DrawCall:
    page: int
    x: float
    y: float
    text: str
    font_id: str


@dataclass
class FakeSurface:
    """Surface measuring every code point as ``char_width`` points."""

    geometry: PageGeometry
    char_width: float = 1.0
    page_count: int = 0
    font_id: str = ""
    draws: list[DrawCall] = field(default_factory=list)
    measured: list[str] = field(default_factory=list)

    def width(self, text: str, font_id: str, size: float) -> float:
        self.measured.append(text)
        return len(text) * self.char_width

    def set_font(self, font_id: str, size: float) -> None:
        self.font_id = font_id

    def draw_text(self, x: float, y: float, text: str) -> None:
        assert self.page_count > 0, "drawing before the first page"
        self.draws.append(DrawCall(self.page_count, x, y, text, self.font_id))

    def add_page(self) -> None:
        self.page_count += 1

    def current_page_bounds(self) -> PageGeometry:
        return self.geometry

    def texts(self) -> list[str]:
        return [d.text for d in self.draws]


@pytest.fixture
def geometry() -> PageGeometry:
    """A 100x100pt page with 10pt margins: 80pt wide, bottom at y=90."""

    return PageGeometry(100.0, 100.0, 10.0, 10.0, 10.0, 10.0)


@pytest.fixture
def surface(geometry: PageGeometry) -> FakeSurface:
    return FakeSurface(geometry)
