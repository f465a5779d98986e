"""Logical font ids mapped onto ReportLab fonts.

Fonts are either one of ReportLab's built-in Type 1 faces (``Helvetica``,
``Times-Bold`` ...) or TrueType files registered with
:func:`reportlab.pdfbase.pdfmetrics.registerFont`.  Registration is process
wide, so it happens once when the registry is built and before any render
starts.  Looking up an id without a mapping falls back to the default font
and warns once per id.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError

from styledpdf.layout.types import DEFAULT_FONT
from styledpdf.utils.errors import ConfigurationError
from styledpdf.utils.logging import get_logger

logger = get_logger(__name__)


class FontSource(Protocol):
    builtin: str | None
    path: Path | None


class FontRegistry:
    """Resolve logical font ids to registered ReportLab font names."""

    def __init__(self, fonts: Mapping[str, str], *, default_id: str = DEFAULT_FONT) -> None:
        if default_id not in fonts:
            raise ConfigurationError(f"no font mapped for default font id '{default_id}'")
        self._fonts = dict(fonts)
        self.default_id = default_id
        self._warned: set[str] = set()

    @classmethod
    def from_sources(
        cls, sources: Mapping[str, FontSource], *, default_id: str = DEFAULT_FONT
    ) -> "FontRegistry":
        """Register every font in ``sources`` with ReportLab."""

        names: dict[str, str] = {}
        for font_id, source in sources.items():
            if source.path is not None:
                names[font_id] = register_ttf(font_id, source.path)
            elif source.builtin is not None:
                names[font_id] = _check_builtin(font_id, source.builtin)
        return cls(names, default_id=default_id)

    @property
    def ids(self) -> frozenset[str]:
        return frozenset(self._fonts)

    def resolve(self, font_id: str) -> str:
        name = self._fonts.get(font_id)
        if name is not None:
            return name
        if font_id not in self._warned:
            self._warned.add(font_id)
            logger.warning("font '%s' is not mapped; using '%s'", font_id, self.default_id)
        return self._fonts[self.default_id]


def register_ttf(font_id: str, path: Path) -> str:
    """Register the TrueType file at ``path`` and return its ReportLab name."""

    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"font '{font_id}' not found at path: {path}")
    name = f"{font_id}-{path.stem}"
    if name in pdfmetrics.getRegisteredFontNames():
        return name
    try:
        pdfmetrics.registerFont(TTFont(name, str(path)))
    except TTFError as exc:
        raise ConfigurationError(f"font '{font_id}' could not be loaded: {exc}") from exc
    logger.debug("registered font %s from %s", name, path)
    return name


def _check_builtin(font_id: str, name: str) -> str:
    try:
        pdfmetrics.getFont(name)
    except KeyError as exc:
        raise ConfigurationError(f"font '{font_id}': unknown built-in font '{name}'") from exc
    return name


__all__ = ["FontRegistry", "FontSource", "register_ttf"]
