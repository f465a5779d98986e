"""Ordered style rule table.

Rules are kept in declaration order and matched by linear scan; the first
matching rule wins.  Rule sets are small and hand written so no index is
maintained.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from styledpdf.layout.types import DEFAULT_FONT, StyleRule
from styledpdf.utils.errors import ConfigurationError
from styledpdf.utils.logging import get_logger

logger = get_logger(__name__)


class StyleRuleTable:
    """Resolve delimiters or tag names to font ids.

    Parameters
    ----------
    rules:
        Rules in declaration order.
    default_font:
        Font id used outside any style and for unknown lookups.
    known_fonts:
        Optional set of font ids that have a font mapping.  Rules pointing at
        any other font are degraded to ``default_font`` with a warning.
    """

    def __init__(
        self,
        rules: Sequence[StyleRule],
        *,
        default_font: str = DEFAULT_FONT,
        known_fonts: Iterable[str] | None = None,
    ) -> None:
        fonts = set(known_fonts) if known_fonts is not None else None
        checked: list[StyleRule] = []
        for rule in rules:
            if not rule.delimiter_or_tag:
                raise ConfigurationError(f"style rule '{rule.name}' has an empty delimiter/tag")
            if fonts is not None and rule.font_id not in fonts:
                logger.warning(
                    "style rule '%s' uses unmapped font '%s'; using '%s'",
                    rule.name,
                    rule.font_id,
                    default_font,
                )
                rule = StyleRule(rule.name, rule.delimiter_or_tag, default_font)
            checked.append(rule)
        self._rules: tuple[StyleRule, ...] = tuple(checked)
        self.default_font = default_font

    @property
    def rules(self) -> tuple[StyleRule, ...]:
        return self._rules

    def resolve(self, key: str) -> str:
        """Return the font id for ``key`` or the default font if unknown."""

        rule = self.find(key)
        if rule is None:
            logger.warning("unknown style '%s'; using '%s'", key, self.default_font)
            return self.default_font
        return rule.font_id

    def find(self, key: str) -> StyleRule | None:
        """Return the first rule whose delimiter/tag equals ``key``."""

        for rule in self._rules:
            if rule.delimiter_or_tag == key:
                return rule
        return None

    def match_at(self, text: str, pos: int) -> StyleRule | None:
        """Return the first rule whose delimiter occurs in ``text`` at ``pos``."""

        for rule in self._rules:
            if text.startswith(rule.delimiter_or_tag, pos):
                return rule
        return None


__all__ = ["StyleRuleTable"]
