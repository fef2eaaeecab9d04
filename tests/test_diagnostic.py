import pytest

from tsnat.diagnostic import (
    FfiError,
    LexError,
    ParseError,
    TsnatError,
    TsnatRuntimeError,
    TypeCheckError,
)
from tsnat.span import Span

SPAN = Span(0, 0, 5)


def test_diagnostic_formatting():
    assert str(LexError("bad char", SPAN)) == "Lex error: bad char"
    assert str(ParseError("unexpected EOF", SPAN)) == "Parse error: unexpected EOF"
    assert str(TypeCheckError("type mismatch", SPAN, help="use string")) == (
        "Type error: type mismatch"
    )
    assert str(TsnatRuntimeError("null pointer", SPAN)) == "Runtime error: null pointer"
    assert str(FfiError("missing symbol")) == "FFI error: missing symbol"


def test_fields_are_kept():
    err = TypeCheckError("type mismatch", SPAN, help="use string")
    assert err.span == SPAN
    assert err.help == "use string"
    assert err.message == "type mismatch"
    assert TsnatRuntimeError("boom").span is None


@pytest.mark.parametrize(
    "cls, args, prefix",
    [
        (LexError, ("x", SPAN), "Lex error"),
        (ParseError, ("x", SPAN), "Parse error"),
        (TypeCheckError, ("x", SPAN), "Type error"),
        (TsnatRuntimeError, ("x",), "Runtime error"),
        (FfiError, ("x",), "FFI error"),
    ],
)
def test_all_caught_as_base(cls, args, prefix):
    err = cls(*args)
    caught = None
    try:
        raise err
    except TsnatError as exc:
        caught = exc
    assert caught is err
    assert caught.message == "x"
    assert str(caught) == f"{prefix}: x"