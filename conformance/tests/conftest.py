"""
Pytest configuration for trace tests.
"""

import pytest

from .samples import make_actions, make_full_chain_state, make_proposals


@pytest.fixture
def proposals():
    return make_proposals()


@pytest.fixture
def actions():
    return make_actions()


@pytest.fixture
def full_chain_state():
    return make_full_chain_state()


@pytest.fixture
def trace_path(tmp_path):
    return str(tmp_path / "trace.json")
