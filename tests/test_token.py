import dataclasses

import pytest

from tsnat.interner import SYM_EMPTY
from tsnat.span import Span
from tsnat.token import Token, TokenKind


def _token(kind):
    return Token(kind, SYM_EMPTY, Span(0, 0, 0), False)


def test_token_display():
    assert str(_token(TokenKind.KW_CONST).kind) == "const"
    assert str(_token(TokenKind.EOF).kind) == "EOF"


def test_shared_display_text_keeps_kinds_distinct():
    number = _token(TokenKind.NUMBER)
    kw_number = _token(TokenKind.KW_NUMBER)
    assert str(number.kind) == str(kw_number.kind) == "number"
    assert number.kind is not kw_number.kind
    assert _token(TokenKind.BIG_INT).kind != _token(TokenKind.KW_BIG_INT).kind


@pytest.mark.parametrize(
    "kind, text",
    [
        (TokenKind.QUESTION_DOT, "?."),
        (TokenKind.STAR_STAR_EQ, "**="),
        (TokenKind.GT_GT_GT_EQ, ">>>="),
        (TokenKind.TEMPLATE_HEAD, "`...${"),
        (TokenKind.IDENT, "identifier"),
        (TokenKind.ARROW, "=>"),
    ],
)
def test_display_text(kind, text):
    assert str(kind) == text


def test_token_is_immutable():
    token = Token(TokenKind.SEMICOLON, SYM_EMPTY, Span(0, 3, 4), True)
    assert token.span == Span(0, 3, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.kind = TokenKind.COMMA