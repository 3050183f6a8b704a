from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from silence.errors import SilenceSyntaxError
from silence.evaluation.evaluator import evaluate
from silence.reader.parser import lex, parse, parse_all, TokenStream
from silence.types.expression import (
    FALSE,
    TRUE,
    Atom,
    Cell,
    Null,
    Number,
    show_expr,
    to_cons_list,
    to_lisp_str,
)


def L(*items):
    return to_cons_list(items)


def S(text):
    return L(Atom("quote"), to_lisp_str(text))


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ('"a \\"q\\" b"', [("string", '"a \\"q\\" b"')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(+ 1/2 -3)", [("lparen", "("), ("symbol", "+"), ("symbol", "1/2"), ("symbol", "-3"), ("rparen", ")")]),
        ("#t #f", [("symbol", "#t"), ("symbol", "#f")]),
        ("x;trailing", [("symbol", "x")]),
        ("   ", []),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", Number(123)),
        ("-45", Number(-45)),
        ("+7", Number(7)),
        ("1/3", Number(Fraction(1, 3))),
        ("4/2", Number(2)),
        ("0.1", Number(Fraction(1, 10))),
        ("-.5", Number(Fraction(-1, 2))),
        ("1e3", Number(1000)),
        ("#t", TRUE),
        ("#f", FALSE),
        ("()", Null),
        ("foo", Atom("foo")),
        ("-", Atom("-")),
        ("let!", Atom("let!")),
        ("1+", Atom("1+")),
        ("'a", L(Atom("quote"), Atom("a"))),
        ("'()", L(Atom("quote"), Null)),
        ("(a b c)", L(Atom("a"), Atom("b"), Atom("c"))),
        ("(a . b)", Cell(Atom("a"), Atom("b"))),
        ("(1 2 . 3)", Cell(Number(1), Cell(Number(2), Number(3)))),
        ("(. f g)", L(Atom("."), Atom("f"), Atom("g"))),
        ('"hi"', S("hi")),
        ('""', S("")),
        ('"a\\nb\\t\\"c\\\\"', S('a\nb\t"c\\')),
    ]
)
def test_parser(source, expected):
    assert parse(source) == expected


def test_nested_lists():
    source = "((a b) (c d))"
    assert parse(source) == L(L(Atom("a"), Atom("b")), L(Atom("c"), Atom("d")))


def test_parse_all_is_lazy_and_ordered():
    exprs = parse_all("1 (a) 'b ; done")
    assert next(exprs) == Number(1)
    assert list(exprs) == [L(Atom("a")), L(Atom("quote"), Atom("b"))]


def test_token_stream_returns_none_at_eof():
    stream = TokenStream(lex("x"))
    assert stream.parse_expr() == Atom("x")
    assert stream.parse_expr() is None


@pytest.mark.parametrize(
    "source",
    [
        "(a b",
        ")",
        '"unterminated',
        "'",
        "(a . b c)",
        "(a .)",
        "1/0",
        "",
        "1 2",
    ],
)
def test_malformed_source(source):
    with pytest.raises(SilenceSyntaxError):
        parse(source)


@given(st.fractions())
def test_printed_rationals_read_back_exactly(value):
    assert parse(show_expr(Number(value))) == Number(value)


@given(st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=20))
def test_string_literals_decode_to_character_codes(text):
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    assert parse(f'"{escaped}"') == S(text)


def test_string_literal_evaluates_to_its_character_codes(stack):
    assert evaluate(parse('"hi"'), stack) == to_lisp_str("hi")
    assert evaluate(parse('(cons "a" "")'), stack) == Cell(to_lisp_str("a"), Null)
