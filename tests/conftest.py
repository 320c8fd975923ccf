"""Shared fixtures for regcheck tests."""

from __future__ import annotations

import numpy as np
import pytest

from regcheck.config import VerifierConfig


@pytest.fixture(autouse=True)
def _clean_regcheck_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep REGCHECK_* variables from the developer shell out of tests."""
    for key in ("REGCHECK_RERAISE", "REGCHECK_SEED", "REGCHECK_LOG_FAILURES", "REGCHECK_VERBOSITY"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config() -> VerifierConfig:
    """Deterministic config that does not re-raise baseline errors."""
    return VerifierConfig(seed=1234, reraise_baseline_errors=False, log_failures=False)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


def make_config(**overrides) -> VerifierConfig:
    """Build a VerifierConfig with test-friendly defaults."""
    defaults = {"seed": 1234, "reraise_baseline_errors": False, "log_failures": False}
    defaults.update(overrides)
    return VerifierConfig(**defaults)
