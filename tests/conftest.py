"""Pytest configuration for the rtnorm test suite."""

import numpy as np
import pytest

from rtnorm.tables import load_chopin_table


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-statistical",
        action="store_true",
        default=False,
        help="Run large-sample statistical tests (skipped by default, ~30s)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "statistical: mark test as a large-sample statistical test (skipped unless --run-statistical is passed)",
    )
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow (large sample sizes, may take several seconds)",
    )
    config.addinivalue_line(
        "markers",
        "rng_validation: mark test as a distribution validation test",
    )


def pytest_collection_modifyitems(config, items):
    """Skip statistical tests unless the corresponding flag is passed."""
    if config.getoption("--run-statistical"):
        return
    skip_statistical = pytest.mark.skip(reason="need --run-statistical option to run")
    for item in items:
        if "statistical" in item.keywords:
            item.add_marker(skip_statistical)


class ScriptedRNG:
    """Random source replaying fixed uniform and normal draws."""

    def __init__(self, uniforms=(), normals=()):
        self._uniforms = list(uniforms)
        self._normals = list(normals)
        self.n_uniform = 0
        self.n_normal = 0

    def uniform(self) -> float:
        if self.n_uniform >= len(self._uniforms):
            raise AssertionError("ScriptedRNG ran out of uniform draws")
        u = self._uniforms[self.n_uniform]
        self.n_uniform += 1
        return u

    def standard_normal(self) -> float:
        if self.n_normal >= len(self._normals):
            raise AssertionError("ScriptedRNG ran out of normal draws")
        z = self._normals[self.n_normal]
        self.n_normal += 1
        return z


class CountingRNG:
    """Wrap a numpy Generator and count the draws of each kind."""

    def __init__(self, seed=0):
        self._gen = np.random.default_rng(seed)
        self.n_uniform = 0
        self.n_normal = 0

    def uniform(self) -> float:
        self.n_uniform += 1
        return self._gen.uniform()

    def standard_normal(self) -> float:
        self.n_normal += 1
        return self._gen.standard_normal()


@pytest.fixture(scope="session")
def table():
    return load_chopin_table()


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def scripted_rng():
    """Factory for random sources with predetermined draws."""
    return ScriptedRNG


@pytest.fixture
def counting_rng():
    """Factory for random sources that record how many draws were made."""
    return CountingRNG
