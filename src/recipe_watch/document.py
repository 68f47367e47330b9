"""YAML document handle for recipe files."""

from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .core import BaseHandle
from .errors import DocumentError
from .file import File


class YAMLHandle(BaseHandle):
    """Handle for YAML documents (stone.yaml, monitoring.yaml)."""

    def __init__(self, path: str | Path | File):
        super().__init__(path)
        self.document = {}
        # Each instance has its own YAML configuration; handles are used from worker threads.
        # The base loader keeps every scalar a string so "1.20" stays "1.20".
        self.yaml = YAML(typ="base")

    def _parse(self, content: str):
        try:
            self.document = self.yaml.load(content)
        except YAMLError as e:
            raise DocumentError(f"Invalid YAML in {self.path}: {e}") from e
        if self.document is None:
            self.document = {}

    def read(self):
        """Return the loaded document (mapping for any well-formed recipe file)."""
        self._ensure_loaded()
        return self.document
