"""Built-in procedures for the minischeme global environment.

This module defines arithmetic, comparison, list processing, math functions,
application helpers, output, and the registration entry point. Every builtin
takes the list of already-evaluated arguments.
"""
from __future__ import annotations

import functools
import math
import sys
from typing import Callable

from minischeme import LispValue
from minischeme.errors import ArityError, DivisionByZeroError, DomainError, SchemeTypeError
from minischeme.evaluation.apply import apply as apply_engine
from minischeme.evaluation.evaluator import evaluate
from minischeme.printer import to_display, to_string
from minischeme.types.environment import Environment
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Symbol
from minischeme.types.unspecified import Unspecified


def _is_number(x: LispValue) -> bool:
    # bool is an int subclass in Python, but #t/#f are not numbers here.
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _check_numbers(name: str, args: list[LispValue]) -> None:
    for a in args:
        if not _is_number(a):
            raise SchemeTypeError(f"All arguments to {name} must be numbers, got {to_string(a)}")


def _check_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise ArityError(f"{name} requires exactly {n} argument{'s' if n != 1 else ''}, got {len(args)}")


def _check_list(name: str, x: LispValue) -> list[LispValue]:
    if not isinstance(x, list):
        raise SchemeTypeError(f"{name} expects a list, got {to_string(x)}")
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def _float_overflow(name: str):
    """Report an int too large for float arithmetic as a DomainError."""
    def wrap(fn):
        @functools.wraps(fn)
        def guarded(args: list[LispValue]) -> LispValue:
            try:
                return fn(args)
            except OverflowError as e:
                raise DomainError(f"{name}: {e}") from e
        return guarded
    return wrap


@_float_overflow("+")
def add(args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; (+) is 0."""
    _check_numbers("+", args)
    return sum(args)


@_float_overflow("-")
def sub(args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise ArityError("- requires at least 1 argument")
    _check_numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


@_float_overflow("*")
def mul(args: list[LispValue]) -> LispValue:
    """Return the product of all arguments; (*) is 1."""
    _check_numbers("*", args)
    result = 1
    for x in args:
        result *= x
    return result


def _divide(a, b):
    if b == 0:
        raise DivisionByZeroError("Division by zero")
    if isinstance(a, int) and isinstance(b, int):
        # Integer division truncates toward zero.
        q = a // b
        if q < 0 and q * b != a:
            q += 1
        return q
    return a / b


@_float_overflow("/")
def div(args: list[LispValue]) -> LispValue:
    """Divide left-to-right; with one arg returns the reciprocal."""
    if not args:
        raise ArityError("/ requires at least 1 argument")
    _check_numbers("/", args)
    if len(args) == 1:
        return _divide(1, args[0])
    result = args[0]
    for x in args[1:]:
        result = _divide(result, x)
    return result


def power(args: list[LispValue]) -> LispValue:
    """(pow base exponent): exact for a non-negative integer exponent, else float."""
    _check_arity("pow", args, 2)
    _check_numbers("pow", args)
    base, exponent = args
    if isinstance(base, int) and isinstance(exponent, int) and exponent >= 0:
        return base ** exponent
    if base == 0 and exponent < 0:
        raise DivisionByZeroError("Division by zero: zero raised to a negative power")
    try:
        return math.pow(base, exponent)
    except (ValueError, OverflowError) as e:
        raise DomainError(f"pow: {e}") from e


def _comparison(name: str, op: Callable[[LispValue, LispValue], bool]):
    def compare(args: list[LispValue]) -> bool:
        if len(args) < 2:
            raise ArityError(f"{name} requires at least 2 arguments, got {len(args)}")
        _check_numbers(name, args)
        return all(op(a, b) for a, b in zip(args, args[1:]))
    compare.__doc__ = f"Chainable numeric {name}: #t if it holds for every adjacent pair."
    return compare


lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)
num_eq = _comparison("=", lambda a, b: a == b)


def _math_fn(name: str, fn: Callable[[float], float]):
    def wrapped(args: list[LispValue]) -> float:
        _check_arity(name, args, 1)
        _check_numbers(name, args)
        try:
            return float(fn(args[0]))
        except (ValueError, OverflowError) as e:
            raise DomainError(f"{name}: {e}") from e
    wrapped.__doc__ = f"({name} x) as a float."
    return wrapped


# -------------------------------
# Logic and equality
# -------------------------------
def logical_not(args: list[LispValue]) -> bool:
    """#t only when the single argument is #f."""
    _check_arity("not", args, 1)
    return args[0] is False


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; lists compare element-wise, kinds must match."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if type(a) != type(b):
        return False
    return a == b


def equal(args: list[LispValue]) -> bool:
    _check_arity("equal?", args, 2)
    return is_equal(*args)


# -------------------------------
# Lists
# -------------------------------
def list_builtin(args: list[LispValue]) -> list[LispValue]:
    """Construct a list from the provided arguments."""
    return list(args)


def car(args: list[LispValue]) -> LispValue:
    _check_arity("car", args, 1)
    xs = _check_list("car", args[0])
    if not xs:
        raise SchemeTypeError("car of the empty list")
    return xs[0]


def cdr(args: list[LispValue]) -> list[LispValue]:
    _check_arity("cdr", args, 1)
    xs = _check_list("cdr", args[0])
    if not xs:
        raise SchemeTypeError("cdr of the empty list")
    return xs[1:]


def cons(args: list[LispValue]) -> list[LispValue]:
    """Prepend head to a list, non-destructively. Dotted pairs are not supported."""
    _check_arity("cons", args, 2)
    head, tail = args
    return [head] + _check_list("cons", tail)


def append(args: list[LispValue]) -> list[LispValue]:
    """Concatenate any number of lists into a new list."""
    result: list[LispValue] = []
    for item in args:
        result.extend(_check_list("append", item))
    return result


def length(args: list[LispValue]) -> int:
    _check_arity("length", args, 1)
    return len(_check_list("length", args[0]))


def is_empty(args: list[LispValue]) -> bool:
    _check_arity("empty?", args, 1)
    return isinstance(args[0], list) and not args[0]


# -------------------------------
# Higher-order
# -------------------------------
def map_builtin(args: list[LispValue]) -> list[LispValue]:
    """(map proc list): apply proc to each element, preserving order."""
    _check_arity("map", args, 2)
    proc, xs = args
    return [apply_engine(proc, [x], evaluate) for x in _check_list("map", xs)]


def apply(args: list[LispValue]) -> LispValue:
    """(apply proc list): call proc with the elements of list as arguments."""
    _check_arity("apply", args, 2)
    proc, xs = args
    return apply_engine(proc, list(_check_list("apply", xs)), evaluate)


# -------------------------------
# Output
# -------------------------------
def display(args: list[LispValue]) -> LispValue:
    """Write the argument to stdout; strings are written without quotes."""
    _check_arity("display", args, 1)
    sys.stdout.write(to_display(args[0]))
    return Unspecified


def newline(args: list[LispValue]) -> LispValue:
    _check_arity("newline", args, 0)
    sys.stdout.write("\n")
    return Unspecified


BUILTINS: dict[str, Callable[[list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "pow": power,
    "expt": power,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "=": num_eq,
    "not": logical_not,
    "equal?": equal,
    "list": list_builtin,
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "append": append,
    "length": length,
    "empty?": is_empty,
    "null?": is_empty,
    "map": map_builtin,
    "apply": apply,
    "sin": _math_fn("sin", math.sin),
    "cos": _math_fn("cos", math.cos),
    "tan": _math_fn("tan", math.tan),
    "asin": _math_fn("asin", math.asin),
    "acos": _math_fn("acos", math.acos),
    "atan": _math_fn("atan", math.atan),
    "exp": _math_fn("exp", math.exp),
    "log": _math_fn("log", math.log),
    "log10": _math_fn("log10", math.log10),
    "sqrt": _math_fn("sqrt", math.sqrt),
    "display": display,
    "newline": newline,
}


def register(env: Environment) -> None:
    """Register all builtin procedures and constants into the given environment."""
    env.update({Symbol(name): Procedure.builtin(name, fn) for name, fn in BUILTINS.items()})
    env.define(Symbol("pi"), math.pi)
    env.define(Symbol("e"), math.e)
