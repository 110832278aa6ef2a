from __future__ import annotations

import os
from pathlib import Path

import pytest

from autotyper import logging_utils


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep the user's ~/.autotyper.yaml and AUTOTYPER_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for name in list(os.environ):
        if name.upper().startswith("AUTOTYPER_"):
            monkeypatch.delenv(name)
    monkeypatch.setattr(logging_utils, "_CONFIGURED_LEVEL", None)
    return home
