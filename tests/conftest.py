import json

import pytest
from fastapi.testclient import TestClient

from roster_api.app.core.config import Settings
from roster_api.app.main import create_app


@pytest.fixture
def write_dataset(tmp_path):
    """Write a roster file and return its path.

    Pass ``data`` to have it JSON-encoded, or ``raw`` for literal file
    contents.
    """

    def _write(data=None, raw=None):
        path = tmp_path / "tyranids.json"
        path.write_text(raw if raw is not None else json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_client(tmp_path):
    """Build a TestClient for an app reading ``path`` (default: a missing file)."""

    def _make(path=None, **overrides):
        dataset_path = str(path) if path is not None else str(tmp_path / "missing.json")
        settings = Settings(dataset_path=dataset_path, **overrides)
        return TestClient(create_app(settings))

    return _make

