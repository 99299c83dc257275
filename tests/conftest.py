from __future__ import annotations

import os

import pytest

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures", "xml")


@pytest.fixture
def fixture_path():
    def _path(name: str) -> str:
        return os.path.join(FIXTURES, name)
    return _path
