"""Tests for File and YAMLHandle."""

import pytest

from recipe_watch.document import YAMLHandle
from recipe_watch.errors import DocumentError
from recipe_watch.file import File


def test_file_wraps_paths(workspace):
    path = workspace / "stone.yaml"
    path.write_text("name: pkg\n")
    file = File(path)
    assert file.read_text() == "name: pkg\n"
    assert str(file) == str(path)
    assert File(file.path).path == file.path


def test_file_rejects_other_types():
    with pytest.raises(TypeError, match="File expects a path"):
        File(42)


def test_yaml_handle_reads_lazily(workspace):
    path = workspace / "monitoring.yaml"
    path.write_text("releases:\n  id: 42\n")
    handle = YAMLHandle(File(path))
    assert handle.read() == {"releases": {"id": "42"}}


def test_yaml_handle_empty_document(workspace):
    path = workspace / "empty.yaml"
    path.write_text("")
    assert YAMLHandle(path).load().read() == {}


def test_yaml_handle_not_utf8(workspace):
    path = workspace / "stone.yaml"
    path.write_bytes(b"name: \xff\xfe\n")
    with pytest.raises(DocumentError):
        YAMLHandle(path).load()
