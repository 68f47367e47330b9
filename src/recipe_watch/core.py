"""Core API for recipe-watch - BaseHandle only."""

from pathlib import Path

from .errors import DocumentError
from .file import File


class BaseHandle:
    """Base class for read-only document handles."""

    def __init__(self, path: str | Path | File):
        # Accept File instance or path
        self.file = path if isinstance(path, File) else File(path)
        self.path = self.file.path
        self._loaded = False

    def _parse(self, content: str):
        """Parse content into document. Format-specific implementation."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        """Ensure underlying state is loaded exactly once."""
        if not self._loaded:
            self.load()

    def load(self):
        """Load from file.

        Subclasses MUST implement `_parse`. Unlike a config file, a recipe
        document that does not exist is an error rather than an empty document.
        """
        try:
            content = self.file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentError(f"Cannot read {self.path}: {e}") from e
        self._parse(content)
        self._loaded = True
        return self
