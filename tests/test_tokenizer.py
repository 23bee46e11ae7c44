"""Test class Tokenizer."""

import pytest

from formulas.dsl import Tokenizer, Token, TokenType


def _space_separated(text):
    reader = Tokenizer(text)
    lexemes = []
    while not reader.done:
        lexemes.append(reader.read_token().lexeme)
    return " ".join(lexemes)


@pytest.mark.parametrize("text,expected", [
    ("32+4", "32 + 4"),
    ("32+ 4", "32 + 4"),
    ("32+ 4*1", "32 + 4 * 1"),
    ("32+ 4*a+2", "32 + 4 * a + 2"),
    ("1*a", "1 * a"),
    ("(32+4)", "( 32 + 4 )"),
    ("(32+4)*1", "( 32 + 4 ) * 1"),
    ("1,2", "1 , 2"),
])
def test_token_stream(text, expected):
    """Tokens come out in source order regardless of spacing."""
    assert _space_separated(text) == expected


def test_generate_tokens_kinds():
    tokens = Tokenizer("sin(x1, 42)").generate_tokens()
    assert tokens == [
        Token(TokenType.IDENTIFIER, "sin"),
        Token(TokenType.LPAREN),
        Token(TokenType.IDENTIFIER, "x"),
        Token(TokenType.NUMBER, "1"),
        Token(TokenType.OPERATOR, ","),
        Token(TokenType.NUMBER, "42"),
        Token(TokenType.RPAREN),
        Token(TokenType.EOF),
    ]


def test_identifier_stops_at_whitespace_and_parens():
    tokens = Tokenizer("  rate )  ").generate_tokens()
    assert [t.lexeme for t in tokens[:-1]] == ["rate", ")"]


def test_leading_and_trailing_whitespace_trimmed():
    reader = Tokenizer("   7   ")
    assert reader.read_token() == Token(TokenType.NUMBER, "7")
    assert reader.done
    assert reader.read_token().type == TokenType.EOF


def test_empty_input_yields_eof():
    reader = Tokenizer("")
    assert reader.done
    assert reader.read_token().type == TokenType.EOF
    assert reader.read_token().type == TokenType.EOF


def test_prev_type_tracks_previous_token():
    reader = Tokenizer("(-1")
    reader.read_token()
    assert reader.prev_type is None
    reader.read_token()
    assert reader.current == Token(TokenType.OPERATOR, "-")
    assert reader.prev_type == TokenType.LPAREN
    reader.read_token()
    assert reader.prev_type == TokenType.OPERATOR


def test_numbers_have_no_sign_or_decimal_point():
    tokens = Tokenizer("-12.5").generate_tokens()
    assert [(t.type, t.value) for t in tokens] == [
        (TokenType.OPERATOR, "-"),
        (TokenType.NUMBER, "12"),
        (TokenType.IDENTIFIER, "."),
        (TokenType.NUMBER, "5"),
        (TokenType.EOF, None),
    ]


def test_reset_rewinds_to_start():
    reader = Tokenizer("a+1")
    first = reader.generate_tokens()
    reader.reset()
    assert reader.current is None
    assert reader.prev_type is None
    assert reader.generate_tokens() == first
