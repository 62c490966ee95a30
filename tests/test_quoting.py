import pytest
from hypothesis import given, strategies as st

from minischeme.errors import SchemeSyntaxError
from minischeme.interpreter import Interpreter
from minischeme.printer import to_string
from minischeme.types.symbol import Symbol


def test_quote_returns_unevaluated_list(interp):
    assert interp.eval("(quote (+ 1 2))") == [Symbol("+"), 1, 2]


def test_quote_is_idempotent(interp):
    results = [interp.eval("(quote (1 2 3))") for _ in range(5)]
    assert all(r == [1, 2, 3] for r in results)


def test_quote_same_expression_object_repeatedly(interp):
    interp.eval("(define (f) (quote (a b)))")
    first = interp.eval("(f)")
    assert interp.eval("(f)") is first


def test_quote_symbol_without_binding(interp):
    assert interp.eval("(quote undefined-name)") == Symbol("undefined-name")


def test_quote_shorthand(interp):
    assert interp.eval("'(a (b c))") == [Symbol("a"), [Symbol("b"), Symbol("c")]]
    assert interp.eval("''a") == [Symbol("quote"), Symbol("a")]
    assert interp.eval("(car '(x y))") == Symbol("x")


def test_quote_literals(interp):
    assert interp.eval("'5") == 5
    assert interp.eval("'#t") is True
    assert interp.eval("'()") == []


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)"])
def test_quote_arity(interp, source):
    with pytest.raises(SchemeSyntaxError):
        interp.eval(source)


nested_data = st.recursive(
    st.one_of(st.integers(), st.booleans(), st.sampled_from(["a", "b", "foo", "set!"]).map(Symbol)),
    lambda children: st.lists(children, max_size=4),
    max_leaves=15,
)


@given(nested_data)
def test_quoted_data_evaluates_to_itself(datum):
    result = Interpreter().eval(f"(quote {to_string(datum)})")
    assert to_string(result) == to_string(datum)
