"""Root test configuration: isolate each test from any config.yaml or OCTOPUB_* env vars"""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with no OCTOPUB_* overrides."""
    for name in list(os.environ):
        if name.startswith("OCTOPUB_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
