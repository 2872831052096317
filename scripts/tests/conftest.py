"""Pytest fixtures for catalog storage tests."""

import pytest

import log
from fs_store import FileStorage
from tests.test_utils import write_collection

CASES = [
    {"id": 1, "name": "A"},
]

TYPE_DESCRIPTORS = [
    {"type": "case", "label": "Computer Case", "category": "chassis"},
    {"type": "cpu", "label": "Processor"},
    {"type": "case", "label": "Shadowed duplicate"},
]


@pytest.fixture(autouse=True)
def isolated_log(tmp_path, monkeypatch):
    """Send store_log output to a per-test file instead of ~/.catalog."""
    log_file = tmp_path / "store.log"
    monkeypatch.setattr(log, "LOG_FILE", log_file)
    monkeypatch.setattr(log, "LOG_TO_STDERR", False)
    yield log_file


@pytest.fixture
def storage_root(tmp_path):
    """A storage root seeded with a one-record case collection and type.json."""
    root = tmp_path / "json"
    root.mkdir()
    write_collection(root, "case", CASES)
    write_collection(root, "type", TYPE_DESCRIPTORS)
    return root


@pytest.fixture
def storage(storage_root):
    return FileStorage(storage_root)
