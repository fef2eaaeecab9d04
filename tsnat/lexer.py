"""Tokeniser turning source text into a stream of tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .diagnostic import LexError
from .interner import SYM_EMPTY, Interner, Symbol
from .span import Span
from .token import Token, TokenKind


@dataclass(frozen=True)
class LexMode:
    """Lexing mode: normal, or inside a template substitution at a brace depth."""

    template_depth: int | None = None

    @property
    def in_template(self) -> bool:
        return self.template_depth is not None


NORMAL = LexMode()

_KEYWORDS: dict[str, TokenKind] = {
    kind.text: kind for kind in TokenKind if kind.name.startswith("KW_")
}

_REGEX_PRECEDERS = frozenset(
    {
        TokenKind.EQ, TokenKind.L_PAREN, TokenKind.COMMA, TokenKind.L_BRACKET,
        TokenKind.BANG, TokenKind.AMP, TokenKind.PIPE, TokenKind.QUESTION,
        TokenKind.COLON, TokenKind.L_BRACE, TokenKind.R_BRACE, TokenKind.SEMICOLON,
        TokenKind.KW_RETURN, TokenKind.KW_YIELD, TokenKind.ARROW, TokenKind.PLUS_EQ,
        TokenKind.MINUS_EQ, TokenKind.STAR_EQ, TokenKind.SLASH_EQ, TokenKind.PERCENT_EQ,
        TokenKind.STAR_STAR_EQ, TokenKind.AMP_EQ, TokenKind.PIPE_EQ, TokenKind.CARET_EQ,
        TokenKind.LT_LT_EQ, TokenKind.GT_GT_EQ, TokenKind.GT_GT_GT_EQ, TokenKind.AMP_AMP_EQ,
        TokenKind.PIPE_PIPE_EQ, TokenKind.QUESTION_QUESTION_EQ, TokenKind.EQ_EQ,
        TokenKind.EQ_EQ_EQ, TokenKind.BANG_EQ, TokenKind.BANG_EQ_EQ, TokenKind.KW_THROW,
    }
)

# Longest patterns first, so that e.g. ">>>=" wins over ">>>" and ">>".
_PUNCTUATION: list[tuple[bytes, TokenKind]] = sorted(
    (
        (kind.text.encode("ascii"), kind)
        for kind in (
            TokenKind.EQ_EQ_EQ, TokenKind.BANG_EQ_EQ, TokenKind.GT_GT_GT_EQ,
            TokenKind.GT_GT_GT, TokenKind.LT_LT_EQ, TokenKind.GT_GT_EQ,
            TokenKind.STAR_STAR_EQ, TokenKind.AMP_AMP_EQ, TokenKind.PIPE_PIPE_EQ,
            TokenKind.QUESTION_QUESTION_EQ, TokenKind.DOT_DOT_DOT,
            TokenKind.EQ_EQ, TokenKind.BANG_EQ, TokenKind.LT_EQ, TokenKind.GT_EQ,
            TokenKind.PLUS_EQ, TokenKind.MINUS_EQ, TokenKind.STAR_EQ, TokenKind.SLASH_EQ,
            TokenKind.PERCENT_EQ, TokenKind.AMP_EQ, TokenKind.PIPE_EQ, TokenKind.CARET_EQ,
            TokenKind.PLUS_PLUS, TokenKind.MINUS_MINUS, TokenKind.STAR_STAR,
            TokenKind.AMP_AMP, TokenKind.PIPE_PIPE, TokenKind.QUESTION_QUESTION,
            TokenKind.QUESTION_DOT, TokenKind.ARROW, TokenKind.LT_LT, TokenKind.GT_GT,
            TokenKind.L_PAREN, TokenKind.R_PAREN, TokenKind.L_BRACKET, TokenKind.R_BRACKET,
            TokenKind.SEMICOLON, TokenKind.COLON, TokenKind.COMMA, TokenKind.DOT,
            TokenKind.QUESTION, TokenKind.PLUS, TokenKind.MINUS, TokenKind.STAR,
            TokenKind.SLASH, TokenKind.PERCENT, TokenKind.AMP, TokenKind.PIPE,
            TokenKind.CARET, TokenKind.TILDE, TokenKind.BANG, TokenKind.EQ,
            TokenKind.LT, TokenKind.GT, TokenKind.AT,
        )
    ),
    key=lambda entry: -len(entry[0]),
)

_STRING_ESCAPES = {
    ord("n"): "\n", ord("r"): "\r", ord("t"): "\t", ord("\\"): "\\",
    ord("'"): "'", ord('"'): '"', ord("0"): "\0",
}
_TEMPLATE_ESCAPES = {
    ord("n"): "\n", ord("r"): "\r", ord("t"): "\t", ord("\\"): "\\",
    ord("`"): "`", ord("$"): "$", ord("{"): "{",
}

_DIGITS = frozenset(b"0123456789")
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_ALPHA = frozenset(b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_IDENT_START = _ALPHA | frozenset(b"_$")
_IDENT_PART = _IDENT_START | _DIGITS
_INLINE_SPACE = frozenset(b" \t\x0c\x0b")
_NEWLINES = frozenset(b"\n\r")


def _char_debug(ch: str) -> str:
    special = {"'": "\\'", "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}
    if ch in special:
        body = special[ch]
    elif ch != " " and not ch.isprintable():
        body = f"\\u{{{ord(ch):x}}}"
    else:
        body = ch
    return f"'{body}'"


class Lexer:
    """Produces tokens from one source file, tracking template nesting."""

    def __init__(self, source: str, file_id: int = 0, interner: Interner | None = None) -> None:
        self.source = source
        self.file_id = file_id
        self.interner = interner if interner is not None else Interner()
        self._bytes = source.encode("utf-8")
        self._pos = 0
        self._modes: list[LexMode] = [NORMAL]
        self._last_kind: TokenKind | None = None

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the end-of-file token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return

    def tokenise_all(self) -> list[Token]:
        """Return every token up to and including the end-of-file token."""
        return list(self)

    def next_token(self) -> Token:
        """Lex and return the next token."""
        newline = self._skip_whitespace_and_comments()
        start = self._pos
        c = self._peek()
        if c is None:
            return self._make(TokenKind.EOF, start, SYM_EMPTY, newline)

        if c in _IDENT_START:
            return self._lex_ident_or_keyword(start, newline)
        if c in _DIGITS or (c == ord(".") and self._peek(1) in _DIGITS):
            return self._lex_number(start, newline)
        if c in (ord('"'), ord("'")):
            return self._lex_string(start, newline, c)
        if c == ord("`"):
            self._advance()
            return self._lex_template_part(start, newline, TokenKind.NO_SUBST_TEMPLATE,
                                           TokenKind.TEMPLATE_HEAD)
        if c == ord("/") and self._peek(1) != ord("=") and self._regex_allowed():
            return self._lex_regex(start, newline)
        return self._lex_punctuation(start, newline)

    # Low-level cursor helpers

    def _peek(self, offset: int = 0) -> int | None:
        index = self._pos + offset
        return self._bytes[index] if index < len(self._bytes) else None

    def _advance(self, n: int = 1) -> None:
        self._pos = min(self._pos + n, len(self._bytes))

    def _text(self, start: int) -> str:
        try:
            return self._bytes[start:self._pos].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise LexError(
                "Token does not end on a character boundary",
                Span(self.file_id, start, self._pos),
            ) from exc

    def _make(self, kind: TokenKind, start: int, value: Symbol, newline: bool) -> Token:
        self._last_kind = kind
        return Token(kind, value, Span(self.file_id, start, self._pos), newline)

    def _regex_allowed(self) -> bool:
        return self._last_kind is None or self._last_kind in _REGEX_PRECEDERS

    def _skip_whitespace_and_comments(self) -> bool:
        has_newline = False
        while (c := self._peek()) is not None:
            if c in _INLINE_SPACE:
                self._advance()
            elif c in _NEWLINES:
                has_newline = True
                self._advance()
            elif c == ord("/") and self._peek(1) == ord("/"):
                self._advance(2)
                while (cc := self._peek()) is not None and cc not in _NEWLINES:
                    self._advance()
            elif c == ord("/") and self._peek(1) == ord("*"):
                self._advance(2)
                while (cc := self._peek()) is not None:
                    if cc == ord("*") and self._peek(1) == ord("/"):
                        self._advance(2)
                        break
                    if cc in _NEWLINES:
                        has_newline = True
                    self._advance()
            else:
                break
        return has_newline

    # Token kinds

    def _lex_ident_or_keyword(self, start: int, newline: bool) -> Token:
        while (c := self._peek()) is not None and c in _IDENT_PART:
            self._advance()
        text = self._text(start)
        kind = _KEYWORDS.get(text, TokenKind.IDENT)
        value = self.interner.intern(text) if kind is TokenKind.IDENT else SYM_EMPTY
        return self._make(kind, start, value, newline)

    def _consume_decimal(self) -> None:
        while (c := self._peek()) is not None:
            if c in _DIGITS or c in b"_.":
                self._advance()
            elif c in b"eE":
                self._advance()
                if self._peek() in (ord("+"), ord("-")):
                    self._advance()
            else:
                break

    def _lex_number(self, start: int, newline: bool) -> Token:
        if self._peek() == ord("0") and self._peek(1) in tuple(b"xXoObB"):
            self._advance(2)
            while (c := self._peek()) is not None and (c in _HEX_DIGITS or c == ord("_")):
                self._advance()
        else:
            self._consume_decimal()

        kind = TokenKind.NUMBER
        if self._peek() == ord("n"):
            kind = TokenKind.BIG_INT
            self._advance()
        value = self.interner.intern(self._text(start))
        return self._make(kind, start, value, newline)

    def _lex_string(self, start: int, newline: bool, quote: int) -> Token:
        self._advance()
        chars: list[str] = []
        while (c := self._peek()) is not None:
            if c == quote:
                self._advance()
                break
            if c == ord("\\"):
                self._advance()
                esc = self._peek()
                if esc is not None:
                    chars.append(_STRING_ESCAPES.get(esc, chr(esc)))
                    self._advance()
            else:
                chars.append(chr(c))
                self._advance()
        value = self.interner.intern("".join(chars))
        return self._make(TokenKind.STRING, start, value, newline)

    def _lex_template_part(
        self, start: int, newline: bool, tail_kind: TokenKind, open_kind: TokenKind
    ) -> Token:
        text, is_tail = self._lex_template_content()
        value = self.interner.intern(text)
        if is_tail:
            return self._make(tail_kind, start, value, newline)
        self._modes.append(LexMode(0))
        return self._make(open_kind, start, value, newline)

    def _lex_template_content(self) -> tuple[str, bool]:
        chars: list[str] = []
        while (c := self._peek()) is not None:
            if c == ord("`"):
                self._advance()
                return "".join(chars), True
            if c == ord("$") and self._peek(1) == ord("{"):
                self._advance(2)
                return "".join(chars), False
            if c == ord("\\"):
                self._advance()
                esc = self._peek()
                if esc is not None:
                    chars.append(_TEMPLATE_ESCAPES.get(esc, chr(esc)))
                    self._advance()
            else:
                chars.append(chr(c))
                self._advance()
        raise LexError(
            "Unterminated template literal", Span(self.file_id, self._pos, self._pos)
        )

    def _lex_regex(self, start: int, newline: bool) -> Token:
        self._advance()
        in_class = False
        while (c := self._peek()) is not None:
            if c == ord("/") and not in_class:
                self._advance()
                break
            if c == ord("["):
                in_class = True
                self._advance()
            elif c == ord("]"):
                in_class = False
                self._advance()
            elif c == ord("\\"):
                self._advance(2)
            else:
                self._advance()
        while (c := self._peek()) is not None and c in _ALPHA:
            self._advance()
        value = self.interner.intern(self._text(start))
        return self._make(TokenKind.REGEX, start, value, newline)

    def _lex_punctuation(self, start: int, newline: bool) -> Token:
        c = self._peek()
        top = self._modes[-1]

        if c == ord("{"):
            if top.in_template:
                self._modes[-1] = LexMode(top.template_depth + 1)
            self._advance()
            return self._make(TokenKind.L_BRACE, start, SYM_EMPTY, newline)

        if c == ord("}"):
            if top.in_template:
                if top.template_depth == 0:
                    self._modes.pop()
                    self._advance()
                    return self._lex_template_part(start, newline, TokenKind.TEMPLATE_TAIL,
                                                   TokenKind.TEMPLATE_MIDDLE)
                self._modes[-1] = LexMode(top.template_depth - 1)
            self._advance()
            return self._make(TokenKind.R_BRACE, start, SYM_EMPTY, newline)

        for pattern, kind in _PUNCTUATION:
            if self._bytes.startswith(pattern, self._pos):
                self._advance(len(pattern))
                return self._make(kind, start, SYM_EMPTY, newline)

        raise LexError(
            f"Unexpected character: {_char_debug(chr(c))}",
            Span(self.file_id, start, start + 1),
        )


def tokenise(source: str, interner: Interner | None = None, file_id: int = 0) -> list[Token]:
    """Lex a whole source text into a token list ending with EOF."""
    return Lexer(source, file_id, interner).tokenise_all()