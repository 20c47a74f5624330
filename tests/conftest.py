import pytest

from skate.builtin.env_builtin import register
from skate.interpreter import Interpreter
from skate.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture(autouse=True)
def _clean_skate_env(monkeypatch):
    # Keep the developer's shell settings out of the tests
    for var in ("SKATE_PROMPT", "SKATE_STRICT", "SKATE_LOG_LEVEL", "SKATE_LOAD_PATH"):
        monkeypatch.delenv(var, raising=False)
