import pytest

from minischeme.errors import SchemeTypeError, UnboundSymbolError
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol

x = Symbol("x")
y = Symbol("y")


def test_define_and_lookup():
    env = Environment()
    env.define(x, 5)
    assert env.lookup(x) == 5


def test_define_overwrites_in_same_frame():
    env = Environment()
    env.define(x, 5)
    env.define(x, 6)
    assert env.lookup(x) == 6
    assert list(env.vars) == [x]


def test_lookup_unbound():
    with pytest.raises(UnboundSymbolError):
        Environment().lookup(x)


def test_lookup_walks_outward():
    outer = Environment()
    outer.define(x, 1)
    inner = Environment(Environment(outer))
    assert inner.lookup(x) == 1
    assert inner.find(x) is outer


def test_shadowing_hides_but_keeps_outer_binding():
    outer = Environment()
    outer.define(x, 1)
    inner = Environment(outer)
    inner.define(x, 2)
    assert inner.lookup(x) == 2
    assert outer.lookup(x) == 1


def test_set_mutates_nearest_binding_frame():
    outer = Environment()
    outer.define(x, 1)
    inner = Environment(outer)
    inner.set(x, 2)
    assert outer.lookup(x) == 2
    assert x not in inner.vars


def test_set_prefers_shadowing_frame():
    outer = Environment()
    outer.define(x, 1)
    inner = Environment(outer)
    inner.define(x, 10)
    inner.set(x, 11)
    assert inner.lookup(x) == 11
    assert outer.lookup(x) == 1


def test_set_never_creates_a_binding():
    env = Environment()
    with pytest.raises(UnboundSymbolError):
        env.set(y, 1)
    assert env.find(y) is None


def test_define_requires_symbol():
    with pytest.raises(SchemeTypeError):
        Environment().define("x", 1)


def test_update_and_repr():
    outer = Environment()
    outer.update({x: 1, y: 2})
    inner = Environment(outer)
    inner.define(Symbol("z"), 3)
    assert outer.lookup(y) == 2
    assert repr(inner) == "<Environment chain: {z} -> {x, y}>"
    assert str(inner) == "{z: 3} -> ..."
