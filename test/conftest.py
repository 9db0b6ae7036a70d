#!/usr/bin/env python3
"""
Shared pytest fixtures.

Every test gets a fresh Settings singleton backed by a temporary file so no
test reads or writes the per-user settings file.
"""

import pytest

from preflop_advisor.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point Settings at a per-test JSON file."""
    settings_file = tmp_path / "settings.json"
    monkeypatch.setenv("PREFLOP_ADVISOR_SETTINGS", str(settings_file))
    Settings.reset_instance()
    yield settings_file
    Settings.reset_instance()
