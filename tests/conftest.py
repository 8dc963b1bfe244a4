import sys
from pathlib import Path

import pytest

from proxymock import MockEngine

TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from harness.invocation_target import InvocationTarget  # noqa: E402


@pytest.fixture
def target() -> InvocationTarget:
    return InvocationTarget()


@pytest.fixture
def engine() -> MockEngine:
    return MockEngine()
