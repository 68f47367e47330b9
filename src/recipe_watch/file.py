"""File wrapper over UPath for recipe documents."""

from __future__ import annotations

from pathlib import Path

from upath import UPath


class File:
    """Unified file wrapper over UPath supporting local and remote recipe trees."""

    def __init__(self, path: str | Path | UPath):
        if isinstance(path, (str, Path, UPath)):
            self.path = path if isinstance(path, UPath) else UPath(path)
        else:
            raise TypeError(f"File expects a path or URL, got {type(path).__name__}")

    # Delegate to self.path
    def __getattr__(self, name):
        return getattr(self.path, name)

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"File({self.path!r})"
