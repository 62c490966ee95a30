import pytest

from minischeme.builtin.env_builtin import register
from minischeme.interpreter import Interpreter
from minischeme.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Fresh interpreter; definitions persist across eval calls within a test."""
    return Interpreter()
