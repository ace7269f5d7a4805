import pytest

from eta.types.environment import Environment
from eta.evaluation.evaluator import evaluate
from eta.reader.parser import parse


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return Environment.base()


@pytest.fixture
def run(env):
    """Parse and evaluate a program against the test's environment."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run
