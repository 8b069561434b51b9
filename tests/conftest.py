"""Shared fixtures for the test-suite."""
from __future__ import annotations

import json

import pytest

from polysecret.fixtures import SIMPLE


@pytest.fixture
def share_set_file(tmp_path):
    """Write a share-set document to disk and return its path."""

    def _write(document=SIMPLE, name="shares.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
