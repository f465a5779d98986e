"""Tests for the inline style lexer."""

from __future__ import annotations

import pytest

from styledpdf.layout.lexer import MarkupSyntax, lex_delimited, lex_line, lex_tags
from styledpdf.layout.rules import StyleRuleTable
from styledpdf.layout.types import StyledRun, StyleRule


@pytest.fixture
def delimiters() -> StyleRuleTable:
    return StyleRuleTable(
        [
            StyleRule("bold", "**", "bold"),
            StyleRule("italic", "__", "italic"),
        ]
    )


@pytest.fixture
def tags() -> StyleRuleTable:
    return StyleRuleTable(
        [
            StyleRule("bold", "bold", "bold"),
            StyleRule("italic", "italic", "italic"),
        ]
    )


def pairs(runs: list[StyledRun]) -> list[tuple[str, str]]:
    return [("<br>" if r.is_line_break else r.text, r.font_id) for r in runs]


def test_plain_bold_plain(delimiters: StyleRuleTable) -> None:
    runs = lex_delimited("plain **bold** plain", delimiters)
    assert pairs(runs) == [("plain ", "normal"), ("bold", "bold"), (" plain", "normal")]


def test_toggle_applies_font_only_inside(delimiters: StyleRuleTable) -> None:
    runs = lex_delimited("a __x__ b", delimiters)
    assert pairs(runs) == [("a ", "normal"), ("x", "italic"), (" b", "normal")]


def test_adjacent_delimiters_toggle_back_without_text(delimiters: StyleRuleTable) -> None:
    runs = lex_delimited("a****b", delimiters)
    assert pairs(runs) == [("a", "normal"), ("b", "normal")]
    assert "".join(r.text for r in runs) == "ab"


def test_escaped_delimiter_is_literal(delimiters: StyleRuleTable) -> None:
    runs = lex_delimited(r"5 \** 3", delimiters)
    assert pairs(runs) == [("5 ** 3", "normal")]


def test_escape_inside_style_keeps_current_font(delimiters: StyleRuleTable) -> None:
    runs = lex_delimited(r"**a\**b**", delimiters)
    assert pairs(runs) == [("a**b", "bold")]


def test_backslash_without_delimiter_is_kept(delimiters: StyleRuleTable) -> None:
    runs = lex_delimited(r"C:\temp", delimiters)
    assert pairs(runs) == [(r"C:\temp", "normal")]


def test_other_rule_switches_instead_of_reverting(delimiters: StyleRuleTable) -> None:
    runs = lex_delimited("**a__b__c**", delimiters)
    assert pairs(runs) == [("a", "bold"), ("b", "italic"), ("c", "normal")]


def test_first_declared_rule_wins_on_tie() -> None:
    table = StyleRuleTable([StyleRule("first", "*", "bold"), StyleRule("second", "*", "italic")])
    runs = lex_delimited("*x*", table)
    assert pairs(runs) == [("x", "bold")]


def test_longer_delimiter_declared_first_wins() -> None:
    table = StyleRuleTable([StyleRule("bold", "**", "bold"), StyleRule("italic", "*", "italic")])
    assert pairs(lex_delimited("**b** *i*", table)) == [
        ("b", "bold"),
        (" ", "normal"),
        ("i", "italic"),
    ]


def test_unterminated_style_runs_to_end_of_line(delimiters: StyleRuleTable) -> None:
    runs = lex_delimited("a **b", delimiters)
    assert pairs(runs) == [("a ", "normal"), ("b", "bold")]


def test_font_state_does_not_leak_between_lines(delimiters: StyleRuleTable) -> None:
    lex_delimited("**open", delimiters)
    runs = lex_delimited("next", delimiters)
    assert pairs(runs) == [("next", "normal")]


def test_multibyte_characters_stay_whole(delimiters: StyleRuleTable) -> None:
    runs = lex_delimited("ñ**日本**€", delimiters)
    assert pairs(runs) == [("ñ", "normal"), ("日本", "bold"), ("€", "normal")]


def test_empty_line(delimiters: StyleRuleTable) -> None:
    assert lex_delimited("", delimiters) == []


def test_tag_scenario(tags: StyleRuleTable) -> None:
    runs = lex_tags("A<bold>B</bold>C<br>D", tags)
    assert pairs(runs) == [
        ("A", "normal"),
        ("B", "bold"),
        ("C", "normal"),
        ("<br>", "normal"),
        ("D", "normal"),
    ]
    assert runs[3].is_line_break and runs[3].text == ""


@pytest.mark.parametrize("brk", ["<br>", "<br/>", "<br />"])
def test_break_variants(tags: StyleRuleTable, brk: str) -> None:
    runs = lex_tags(f"a{brk}b", tags)
    assert [r.is_line_break for r in runs] == [False, True, False]


def test_closing_tag_need_not_match(tags: StyleRuleTable) -> None:
    runs = lex_tags("<bold>a</italic>b", tags)
    assert pairs(runs) == [("a", "bold"), ("b", "normal")]


def test_last_opened_tag_wins(tags: StyleRuleTable) -> None:
    runs = lex_tags("<italic>a<bold>b</bold>c", tags)
    assert pairs(runs) == [("a", "italic"), ("b", "bold"), ("c", "normal")]


def test_unknown_and_unterminated_tags_are_text(tags: StyleRuleTable) -> None:
    runs = lex_tags("1 < 2 <u>x</u> <bold", tags)
    assert pairs(runs) == [("1 < 2 <u>x</u> <bold", "normal")]


def test_lex_line_dispatch(delimiters: StyleRuleTable, tags: StyleRuleTable) -> None:
    assert pairs(lex_line("**a**", delimiters, "delimiter")) == [("a", "bold")]
    assert pairs(lex_line("<bold>a", tags, MarkupSyntax.TAG)) == [("a", "bold")]
