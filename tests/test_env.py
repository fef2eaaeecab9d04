from tsnat.env import Environment
from tsnat.interner import Interner
from tsnat.value import UNDEFINED

interner = Interner()
X = interner.intern("x")
Y = interner.intern("y")


def test_define_and_get():
    env = Environment()
    env.define(X, 10.0)
    assert env.get(X) == 10.0


def test_missing_name():
    env = Environment(Environment())
    assert env.get(Y) is None


def test_lookup_through_parent():
    outer = Environment()
    outer.define(X, "outer")
    inner = Environment(outer)
    assert inner.get(X) == "outer"


def test_shadowing_leaves_outer_untouched():
    outer = Environment()
    outer.define(X, 10.0)
    inner = Environment(outer)
    inner.define(X, 20.0)
    assert inner.get(X) == 20.0
    assert outer.get(X) == 10.0


def test_assign_updates_nearest_binding():
    outer = Environment()
    outer.define(X, 1.0)
    inner = Environment(outer)
    assert inner.assign(X, 2.0) is True
    assert outer.get(X) == 2.0
    assert X not in inner.values


def test_assign_unbound_fails_without_defining():
    env = Environment(Environment())
    assert env.assign(Y, 1.0) is False
    assert env.get(Y) is None


def test_undefined_is_a_real_binding():
    env = Environment()
    env.define(X, UNDEFINED)
    assert env.get(X) is UNDEFINED
    assert env.assign(X, 3.0) is True
    assert env.get(X) == 3.0