"""
Pytest configuration and shared fixtures for vernorm tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

import pytest

from vernorm.logging import SilentLogger, set_global_logger
from vernorm.runtime import FORCE_VERSION_ENV


@pytest.fixture(autouse=True)
def reset_global_logger():
    """
    Restore the silent global logger after each test.

    CLI handlers configure the global logger, which would otherwise leak
    output into unrelated tests.
    """
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def no_force_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure the interpreter version override is not set."""
    monkeypatch.delenv(FORCE_VERSION_ENV, raising=False)


@pytest.fixture
def prerelease_inputs() -> list[tuple[str, str]]:
    """
    Provide free-form inputs paired with the pre-release tag they produce.
    """
    return [
        ("1.2.3-beta1", "beta1"),
        ("1.2-beta1", "beta1"),
        ("1-beta1", "beta1"),
        ("1-0", "0"),
        ("1.2.3.patch1", "patch1"),
        ("1.patch1", "patch1"),
        ("1.2.1.1patch1", "1patch1"),
        ("1.2b1", "b1"),
        ("1.2.3_rc2", "rc2"),
    ]
