"""Printed representation of minischeme values.

Lists print as `(a b c)`, booleans as `#t`/`#f`, strings double-quoted with
escapes, procedures as opaque `#<...>` tokens that cannot be read back.
"""

from __future__ import annotations

import sys

from minischeme import LispValue
from minischeme.types.procedure import Procedure
from minischeme.types.symbol import Symbol
from minischeme.types.unspecified import UnspecifiedType

_STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def _write_string(s: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in s) + '"'


def _write_int(n: int) -> str:
    try:
        return str(n)
    except ValueError:
        # Longer than the host's int-to-str digit limit; lift it for this one conversion.
        limit = sys.get_int_max_str_digits()
        sys.set_int_max_str_digits(0)
        try:
            return str(n)
        finally:
            sys.set_int_max_str_digits(limit)


def to_string(value: LispValue) -> str:
    """Return the external representation of `value`."""
    match value:
        case bool():
            return "#t" if value else "#f"
        case int():
            return _write_int(value)
        case float():
            return repr(value)
        case str():
            return _write_string(value)
        case Symbol():
            return value.id
        case list():
            return "(" + " ".join(to_string(v) for v in value) + ")"
        case Procedure() | UnspecifiedType():
            return repr(value)
    return repr(value)


def to_display(value: LispValue) -> str:
    """Like to_string, but strings are written without quotes or escapes."""
    if isinstance(value, str):
        return value
    return to_string(value)
