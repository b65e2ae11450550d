"""
Pytest configuration and fixtures for inputguard tests

This module provides shared fixtures for unit and integration tests.
"""
import os
from typing import Any

import pytest

from inputguard import BaseValidator, RuleRegistry, RuleResult, ValidatorSettings


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise the validator end to end"
    )


# =======================
# STUB RULES
# =======================

class StubRule(BaseValidator):
    """
    Rule with a fixed outcome that records every value it was asked about.

    Used to observe which rules a validation run actually evaluated.
    """

    def __init__(self, ok: bool = True, message: str = "Invalid value", groups=None):
        super().__init__(message=message, groups=groups)
        self.ok = ok
        self.calls: list[Any] = []

    def evaluate(self, value: Any) -> RuleResult:
        self.calls.append(value)
        if self.ok:
            return RuleResult.success()
        return self.fail(value)

    @property
    def rule_type(self) -> str:
        return "stub"


@pytest.fixture
def stub():
    """
    Factory for StubRule instances

    Returns:
        Callable building a StubRule
    """
    def make(ok: bool = True, message: str = "Invalid value", groups=None) -> StubRule:
        return StubRule(ok=ok, message=message, groups=groups)

    return make


# =======================
# CONFIGURATION FIXTURES
# =======================

@pytest.fixture
def isolated_env(monkeypatch):
    """
    Remove INPUTGUARD_* variables so settings only come from the test
    """
    for key in list(os.environ):
        if key.startswith("INPUTGUARD_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> ValidatorSettings:
    """Validator settings with metrics disabled"""
    return ValidatorSettings(metrics_enabled=False)


@pytest.fixture
def registry() -> RuleRegistry:
    """Fresh rule registry for a single test"""
    return RuleRegistry()


@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """
    Get path to test data fixtures directory

    Returns:
        Path to tests/fixtures directory
    """
    return os.path.join(os.path.dirname(__file__), "fixtures")
