"""Runtime environment for minischeme.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Closures keep a reference to the frame
they were created in, so a frame lives as long as its longest holder.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from minischeme import LispValue
from minischeme.errors import SchemeTypeError, UnboundSymbolError
from minischeme.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any local binding.

        Raises SchemeTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SchemeTypeError(f"Cannot define {name!r}: not a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Return the innermost frame binding `symbol`, or None if no frame does."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Rebind `name` in the frame that already holds it.

        Raises UnboundSymbolError if the symbol is not bound anywhere; set
        never creates a binding.
        """
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(f"Cannot set! unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first."""
        env = self.find(name)
        if env is None:
            raise UnboundSymbolError(f"Unbound symbol {name}")
        return env.vars[name]

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Define every pair of `mapping` in this frame."""
        for name, value in mapping.items():
            self.define(name, value)

    def _write_vars(self, buffer: StringIO) -> None:
        """Render this frame as `{name: value, ...}`."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """This frame only; an enclosing frame shows up as a trailing arrow."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging; names only, values can be cyclic."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            chain.append("{" + ", ".join(str(k) for k in env.vars) + "}")
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
