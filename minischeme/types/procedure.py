"""Procedure values: built-ins and closures behind one tagged type."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from minischeme import SExpression, LispValue
from minischeme.errors import ArityError
from minischeme.types.environment import Environment
from minischeme.types.symbol import Symbol


class ProcedureKind(Enum):
    BUILTIN = "builtin"
    CLOSURE = "closure"


class Procedure:
    """A first-class procedure.

    `kind` selects which fields are meaningful:
    - BUILTIN: `name` and `fn`, a native function taking the list of
      evaluated arguments.
    - CLOSURE: `params`, `body` and the captured `env`; `name` is set once
      the closure is bound by define.
    """

    __slots__ = ("kind", "name", "fn", "params", "body", "env")

    def __init__(
        self,
        kind: ProcedureKind,
        name: Optional[str] = None,
        fn: Optional[Callable[[list[LispValue]], LispValue]] = None,
        params: Optional[list[Symbol]] = None,
        body: SExpression = None,
        env: Optional[Environment] = None,
    ):
        self.kind = kind
        self.name = name
        self.fn = fn
        self.params: list[Symbol] = params or []
        self.body = body
        self.env = env

    @classmethod
    def builtin(cls, name: str, fn: Callable[[list[LispValue]], LispValue]) -> Procedure:
        return cls(ProcedureKind.BUILTIN, name=name, fn=fn)

    @classmethod
    def closure(
        cls,
        params: list[Symbol],
        body: SExpression,
        env: Environment,
        name: Optional[str] = None,
    ) -> Procedure:
        return cls(ProcedureKind.CLOSURE, name=name, params=params, body=body, env=env)

    @property
    def is_builtin(self) -> bool:
        return self.kind is ProcedureKind.BUILTIN

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` to the formal parameters in a fresh call frame.

        The frame is parented to the captured environment, not the caller's.
        Raises ArityError on a count mismatch.
        """
        if len(args) != len(self.params):
            raise ArityError(
                f"{self.name or 'lambda'} expects {len(self.params)} "
                f"argument{'s' if len(self.params) != 1 else ''}, got {len(args)}"
            )
        frame = Environment(outer=self.env)
        frame.update(dict(zip(self.params, args)))
        return frame

    def __str__(self) -> str:
        if self.is_builtin:
            return f"#<builtin {self.name}>"
        params = " ".join(str(p) for p in self.params)
        if self.name:
            return f"#<closure {self.name} ({params})>"
        return f"#<closure ({params})>"

    def __repr__(self) -> str:
        return str(self)
