"""Shared pytest fixtures for the xdg-user-paths test suite.

Every test starts with the four XDG variables removed from the
environment, so results never depend on the machine running the suite.
Fixtures for a fixed home directory and user id keep expected paths
deterministic.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

XDG_VARS = ("XDG_CONFIG_HOME", "XDG_CACHE_HOME", "XDG_DATA_HOME", "XDG_RUNTIME_DIR")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove all XDG override variables for the duration of a test.

    Tests that need an override set it themselves with ``monkeypatch.setenv``.
    """
    for var in XDG_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def fake_home():
    """Pin the home-directory provider to ``/home/alice``.

    Yields the mock so tests can assert whether the provider was consulted.
    """
    with patch("xdg_user_paths.identity.home_dir", return_value=Path("/home/alice")) as m:
        yield m


@pytest.fixture
def fake_uid():
    """Pin the user-identity provider to uid 1000 and yield the mock."""
    with patch("xdg_user_paths.identity.user_id", return_value=1000) as m:
        yield m


@pytest.fixture
def no_home():
    """Make the home-directory provider fail as it would with no resolvable home."""
    from xdg_user_paths.errors import HomeDirectoryUnresolved

    with patch(
        "xdg_user_paths.identity.home_dir",
        side_effect=HomeDirectoryUnresolved("Could not determine home directory"),
    ) as m:
        yield m
