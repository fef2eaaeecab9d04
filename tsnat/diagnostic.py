"""Error types raised by the lexer, parser, checker and evaluator."""

from __future__ import annotations

from .span import Span


class TsnatError(Exception):
    """Base of all errors; ``str()`` gives ``"<kind> error: <message>"``."""

    kind = "Tsnat"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind} error: {self.message}"


class LexError(TsnatError):
    kind = "Lex"

    def __init__(self, message: str, span: Span) -> None:
        super().__init__(message)
        self.span = span


class ParseError(TsnatError):
    kind = "Parse"

    def __init__(self, message: str, span: Span) -> None:
        super().__init__(message)
        self.span = span


class TypeCheckError(TsnatError):
    kind = "Type"

    def __init__(self, message: str, span: Span, help: str | None = None) -> None:
        super().__init__(message)
        self.span = span
        self.help = help


class TsnatRuntimeError(TsnatError):
    kind = "Runtime"

    def __init__(self, message: str, span: Span | None = None) -> None:
        super().__init__(message)
        self.span = span


class FfiError(TsnatError):
    kind = "FFI"