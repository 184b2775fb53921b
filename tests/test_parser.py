import logging

import pytest

from sexpress.io.config_loader import ParserConfig
from sexpress.syntax.expr import Group, Ident, Num
from sexpress.syntax.parser import (
    SExprError,
    UnbalancedParen,
    UnclosedParen,
    WrongTopLevelCount,
    parse,
    parse_tokens,
)
from sexpress.syntax.render import render
from sexpress.syntax.tokenizer import LPAREN, RPAREN


DEMO = "(first (list 1 (+ 2 3) 9))"


def test_parse_demo_tree():
    expected = Group((
        Ident("first"),
        Group((
            Ident("list"),
            Num(1),
            Group((Ident("+"), Num(2), Num(3))),
            Num(9),
        )),
    ))
    assert parse(DEMO) == expected


def test_parse_empty_group():
    e = parse("()")
    assert e == Group(())
    assert len(e) == 0


def test_parse_single_atom():
    assert parse("42") == Num(42)
    assert parse("-42") == Ident("-42")
    assert parse("4294967296") == Ident("4294967296")


def test_surrounding_whitespace_is_ignored():
    assert parse("  ( a  b )  ") == Group((Ident("a"), Ident("b")))


def test_parse_tokens_accepts_plain_token_lists():
    assert parse_tokens([LPAREN, LPAREN, RPAREN, RPAREN]) == Group((Group(()),))


# -------------------------
# Errors
# -------------------------

@pytest.mark.parametrize("text", [")", "a)", "(a))", "())("])
def test_unbalanced_close(text):
    with pytest.raises(UnbalancedParen, match="unexpected closing paren"):
        parse(text)


def test_unclosed_open_reports_count():
    with pytest.raises(UnclosedParen) as ei:
        parse("(a (b)")
    assert ei.value.count == 1
    assert str(ei.value) == "1 unclosed open paren(s)"


def test_unclosed_deep():
    with pytest.raises(UnclosedParen) as ei:
        parse("(((")
    assert ei.value.count == 3


@pytest.mark.parametrize("text,found", [
    ("", 0),
    ("   ", 0),
    ("a b", 2),
    ("() ()", 2),
    ("(a) b (c)", 3),
])
def test_wrong_top_level_count(text, found):
    with pytest.raises(WrongTopLevelCount) as ei:
        parse(text)
    assert ei.value.found == found
    assert str(ei.value) == f"expected 1 top-level expression, found {found}"


def test_errors_are_value_errors():
    for text in (")", "(", ""):
        with pytest.raises(ValueError):
            parse(text)
        with pytest.raises(SExprError):
            parse(text)


def test_failed_parse_logs_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="sexpress.syntax.parser"):
        with pytest.raises(UnclosedParen):
            parse("(a")
    assert any("unclosed open paren" in r.message for r in caplog.records)


# -------------------------
# Round trip
# -------------------------

@pytest.mark.parametrize("text", [
    DEMO,
    "()",
    "(())",
    "(() ())",
    "x",
    "0",
    "(define (sq x) (* x x))",
    "(a-b c_d e?f !)",
])
def test_round_trip(text):
    assert render(parse(text)) == text


def test_non_canonical_input_renders_canonically():
    assert render(parse("( a   (b  007 ) )")) == "(a (b 7))"


def test_tab_is_part_of_atom_by_default():
    assert parse("a\tb") == Ident("a\tb")
    assert render(parse("(a\tb c)")) == "(a\tb c)"


def test_idempotence():
    e = parse("  (x\t(y 10)\n  ())", ParserConfig(separators=None))
    assert parse(render(e)) == e


def test_deep_nesting_has_no_recursion_limit():
    depth = 10000
    text = "(" * depth + ")" * depth
    e = parse(text)
    assert render(e) == text
