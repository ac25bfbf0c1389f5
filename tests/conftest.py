"""Pytest configuration and shared fixtures for the splitdiff test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler changes the CLI makes to the ``splitdiff`` logger."""
    package_logger = logging.getLogger("splitdiff")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch) -> Path:
    """Run the test from an empty directory with no config discovery.

    ``HOME`` is pointed at the same directory so that a user's own
    ``~/.splitdiff.toml`` never leaks into tests.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.delenv("SPLITDIFF_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def sectioned_original() -> str:
    """Provide a small sectioned document."""
    return "\n".join(
        [
            "Preamble line",
            "SECTION 1: Scope",
            "The scope is small.",
            "It stays small.",
            "SECTION 2: Terms",
            "Term one applies.",
            "Term two applies.",
            "Sub-Section 2.1: Notes",
            "A note.",
        ]
    )


@pytest.fixture
def sectioned_modified() -> str:
    """Provide an edited version of ``sectioned_original``."""
    return "\n".join(
        [
            "Preamble line",
            "SECTION 1: Scope",
            "The scope is small.",
            "It stays small.",
            "SECTION 2: Terms",
            "Term one applies.",
            "Term two no longer applies.",
            "Term three applies.",
            "Sub-Section 2.1: Notes",
            "A note.",
        ]
    )
