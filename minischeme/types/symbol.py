from __future__ import annotations

import sys


class Symbol:
    """An identifier read from source, such as `x`, `+` or `set!`.

    Two symbols with the same spelling compare equal and hash alike, so a
    symbol can key an Environment frame or the special-form table. Spellings
    are interned, which keeps lookups on long-lived frames cheap.
    """
    __slots__ = ("id",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise ValueError(f"symbol name must be a non-empty string, got {name!r}")
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.id is other.id

    def __hash__(self) -> int:
        return hash(("symbol", self.id))

    def __repr__(self) -> str:
        return f"<Symbol {self.id}>"

    def __str__(self) -> str:
        return self.id
