import math

import pytest

from tsnat.interner import Symbol
from tsnat.value import (
    NULL,
    UNDEFINED,
    BigInt,
    JsObject,
    Null,
    Undefined,
    debug_repr,
    is_truthy,
)


def test_singletons():
    assert Undefined() is UNDEFINED
    assert Null() is NULL
    assert UNDEFINED is not NULL


@pytest.mark.parametrize(
    "value",
    [UNDEFINED, NULL, False, 0.0, -0.0, math.nan, BigInt(0), ""],
)
def test_falsy(value):
    assert is_truthy(value) is False


@pytest.mark.parametrize(
    "value",
    [True, 1.0, -2.5, math.inf, BigInt(3), "a", JsObject(), Symbol(4), print],
)
def test_truthy(value):
    assert is_truthy(value) is True


def test_debug_repr_whole_numbers_drop_fraction():
    assert debug_repr(7.0) == "7"
    assert debug_repr(42.0) == "42"
    assert debug_repr(15) == "15"


def test_debug_repr_fraction_roundtrips():
    for n in (30.5, 0.25, 3.14):
        assert float(debug_repr(n)) == n


def test_debug_repr_keywords():
    assert debug_repr(UNDEFINED) == "undefined"
    assert debug_repr(NULL) == "null"
    assert debug_repr(True) == "true"
    assert debug_repr(False) == "false"


def test_debug_repr_special_numbers():
    assert debug_repr(math.nan) == "NaN"
    assert debug_repr(-0.0) == "-0"


def test_debug_repr_large_number_has_no_exponent():
    text = debug_repr(1e21)
    assert "e" not in text.lower()
    assert float(text) == 1e21


def test_debug_repr_bigint_and_string():
    assert debug_repr(BigInt(5)) == "5n"
    assert debug_repr("hello") == '"hello"'
    assert debug_repr('a"b\n') == '"a\\"b\\n"'


def test_debug_repr_objects_and_functions():
    assert debug_repr(JsObject()) == "[object Object]"
    assert debug_repr(lambda args, this: UNDEFINED) == "[function]"
    assert debug_repr(Symbol(3)) == "Symbol(Symbol(3))"


def test_debug_repr_rejects_foreign_objects():
    with pytest.raises(TypeError):
        debug_repr(object())


def test_bigint_range():
    assert BigInt(-(1 << 127)).value == -(1 << 127)
    with pytest.raises(OverflowError):
        BigInt(1 << 127)


def test_object_identity_and_prototype():
    proto = JsObject({Symbol(20): 1.0})
    child = JsObject(prototype=proto)
    assert child.prototype is proto
    assert child.properties == {}
    assert JsObject() != JsObject()