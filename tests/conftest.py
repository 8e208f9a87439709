# tests/conftest.py
"""Shared test fixtures.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/
"""

import os
from functools import partial

import pytest
from hypothesis import Phase, Verbosity, settings
from support import MOCK_BASE_URL, MockApi

from snouty.clients import AntithesisClient

# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# API fixtures
# =============================================================================


@pytest.fixture
def api_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Credentials pointing at the mock base URL."""
    monkeypatch.setenv("ANTITHESIS_USERNAME", "testuser")
    monkeypatch.setenv("ANTITHESIS_PASSWORD", "testpass")
    monkeypatch.setenv("ANTITHESIS_TENANT", "testtenant")
    monkeypatch.setenv("ANTITHESIS_BASE_URL", MOCK_BASE_URL)


@pytest.fixture
def mock_api(monkeypatch: pytest.MonkeyPatch, api_env: None) -> MockApi:
    """Route the CLI's API client through a MockApi."""
    api = MockApi()
    monkeypatch.setattr(
        "snouty.cli.AntithesisClient",
        partial(AntithesisClient, transport=api.transport),
    )
    return api
