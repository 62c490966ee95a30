from __future__ import annotations


class UnspecifiedType:
    """Result of forms evaluated only for their effect (define, set!, ...).

    The REPL and the file runner do not print it.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "#<unspecified>"


Unspecified = UnspecifiedType()
