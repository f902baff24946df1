"""Test the configuration module functionality."""

import pytest

from graphsolve.config import SOLVER_CONFIG, SolverConfig


def test_solver_config_defaults():
    config = SolverConfig()
    assert config.max_augmentations == 100_000


def test_resolve_limit_prefers_override():
    config = SolverConfig(max_augmentations=10)
    assert config.resolve_limit() == 10
    assert config.resolve_limit(3) == 3
    assert config.resolve_limit(0) == 0


def test_resolve_limit_unbounded():
    assert SolverConfig(max_augmentations=None).resolve_limit() is None


def test_resolve_limit_negative():
    with pytest.raises(ValueError, match="non-negative"):
        SolverConfig().resolve_limit(-1)


def test_global_config_instance():
    assert isinstance(SOLVER_CONFIG, SolverConfig)
    assert SOLVER_CONFIG.resolve_limit() == SOLVER_CONFIG.max_augmentations
