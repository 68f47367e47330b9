"""Pytest configuration and fixtures"""

import pytest
import tempfile
import shutil
from pathlib import Path

from recipe_watch.errors import LookupFailed
from recipe_watch.recipe.types import ReleaseInfo


@pytest.fixture
def workspace():
    """Create a temporary workspace directory"""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


class FakeReleases:
    """ReleaseProvider answering from a dict; missing ids fail the lookup."""

    def __init__(self, versions=None):
        self.versions = dict(versions or {})
        self.calls = []

    def get_project(self, project_id):
        self.calls.append(project_id)
        if project_id not in self.versions:
            raise LookupFailed(f"unknown project {project_id}")
        return ReleaseInfo(version=self.versions[project_id], homepage="https://example.org")


class FakeVcs:
    """VcsProvider answering from a dict keyed by (url, version)."""

    def __init__(self, hashes=None):
        self.hashes = dict(hashes or {})
        self.calls = []

    def get_commit_hash(self, url, version):
        self.calls.append((url, version))
        return self.hashes.get((url, version), "")


@pytest.fixture
def fake_releases():
    return FakeReleases()


@pytest.fixture
def fake_vcs():
    return FakeVcs()


def write_recipe(directory, stone, monitoring):
    """Write stone.yaml and monitoring.yaml into ``directory`` (created if needed)."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "stone.yaml").write_text(stone)
    (directory / "monitoring.yaml").write_text(monitoring)
    return directory


ARCHIVE_STONE = """\
name: pkg
version: 1.2.0
release: 4
homepage: https://example.org
upstreams:
  - https://example.org/pkg-1.2.0.tar.gz: abcd1234
"""

TRACKED_MONITORING = """\
releases:
  id: 1234
  rss: https://example.org/releases.atom
security:
  cpe:
    - vendor: example
      product: pkg
"""


@pytest.fixture
def archive_recipe(workspace):
    return write_recipe(workspace / "p" / "pkg", ARCHIVE_STONE, TRACKED_MONITORING)
