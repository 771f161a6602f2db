"""Shared fixtures for the README sync tests."""

from unittest.mock import MagicMock

import pytest

from readme_sync.config import SyncConfig
from readme_sync.models import DirectoryEntry, DirectoryListing

README_TEXT = "# babel-plugin-example\n\n> An example plugin\n\n## Install\n\nnpm install\n"


@pytest.fixture
def config(tmp_path):
    """Config writing into a temporary directory, without credentials."""
    return SyncConfig(output_root=tmp_path / "docs")


@pytest.fixture
def babel_listing():
    """A babel@6.x listing mixing published packages, helpers and files."""
    return DirectoryListing(
        repo="babel",
        branch="6.x",
        entries=[
            DirectoryEntry("babel-plugin-a", "packages/babel-plugin-a", "dir"),
            DirectoryEntry("babel-plugin-b", "packages/babel-plugin-b", "dir"),
            DirectoryEntry("babel-helper-x", "packages/babel-helper-x", "dir"),
            DirectoryEntry("README.md", "packages/README.md", "file"),
        ],
    )


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects."""

    def _make(payload=None, text="", error=None):
        resp = MagicMock()
        resp.json.return_value = payload
        resp.text = text
        if error is not None:
            resp.raise_for_status.side_effect = error
        return resp

    return _make


@pytest.fixture
def readme_text():
    return README_TEXT
