"""Discovery of recipe packages in a repository tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from .recipe.package import MANIFEST_NAME, MONITORING_NAME, Package
from .settings import Settings


@dataclass
class Repository:
    """A recipe repository and the packages found in it."""

    path: Path
    packages: list[Package] = field(default_factory=list)
    discovered_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def is_package_dir(path: Path) -> bool:
    """A directory is a package when it holds both stone.yaml and monitoring.yaml."""
    return path.is_dir() and (path / MANIFEST_NAME).is_file() and (path / MONITORING_NAME).is_file()


def discover_packages(root: Path, min_depth: int = 1, max_depth: int = 2) -> list[Package]:
    """Discover package directories below ``root``.

    Recipes live either directly below the root or in a one-letter bucket
    (``recipes/c/cosmic-applets``), hence the default depth range.

    Raises:
        FileNotFoundError: If ``root`` is not a directory
    """
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Recipe repository not found: {root}")

    found: list[Path] = []
    level = [root]
    for depth in range(1, max_depth + 1):
        children = []
        for directory in level:
            # Skip hidden directories such as .git
            children.extend(p for p in directory.iterdir() if p.is_dir() and not p.name.startswith("."))
        if depth >= min_depth:
            found.extend(p for p in children if is_package_dir(p))
        level = children

    return [Package(path) for path in sorted(found)]


def load_repository(settings: Settings) -> Repository:
    """Discover every package of the repository configured in ``settings``."""
    return Repository(
        path=settings.repo_path,
        packages=discover_packages(settings.repo_path),
    )
