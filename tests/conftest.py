from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = BASE_DIR / "src"
TESTS_DIR = BASE_DIR / "tests"

for path in (SRC_DIR, TESTS_DIR):
    sys.path.insert(0, str(path))


@pytest.fixture(autouse=True)
def _isolated_electrohub_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("ELECTROHUB_"):
            monkeypatch.delenv(key, raising=False)
