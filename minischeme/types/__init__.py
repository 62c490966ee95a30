from minischeme.types.symbol import Symbol
from minischeme.types.unspecified import Unspecified
from minischeme.types.environment import Environment
from minischeme.types.procedure import Procedure, ProcedureKind

__all__ = ["Symbol", "Unspecified", "Environment", "Procedure", "ProcedureKind"]
