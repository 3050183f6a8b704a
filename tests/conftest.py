import pytest

from silence.builtin.env_builtin import register
from silence.interpreter import Interpreter
from silence.types.environment import EnvironmentStack


@pytest.fixture
def stack():
    """Fresh global stack with the primitive table loaded."""
    s = EnvironmentStack()
    register(s)
    return s


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(interp):
    """Evaluate source text in a fresh interpreter and return the last value."""
    return interp.eval
