"""Runtime settings, overridable via environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Self

from .recipe.release_monitoring import DEFAULT_API


def default_repo_path() -> Path:
    return Path.home() / "repos" / "aerynos" / "recipes"


def _env_float(name: str, default: float | None) -> float | None:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {value!r}") from e


@dataclass(frozen=True)
class Settings:
    """Everything a run needs to know about its environment."""

    repo_path: Path = field(default_factory=default_repo_path)
    updater: str = "boulder"
    release_api: str = DEFAULT_API
    http_timeout: float = 10.0
    updater_timeout: float | None = None
    max_workers: int = 32
    github_token: str | None = field(default=None, repr=False)

    @classmethod
    def from_env(cls) -> Self:
        """Build settings from ``RECIPE_WATCH_*`` environment variables and ``GITHUB_TOKEN``."""
        defaults = cls()
        repo = os.environ.get("RECIPE_WATCH_REPO")
        return cls(
            repo_path=Path(repo).expanduser() if repo else defaults.repo_path,
            updater=os.environ.get("RECIPE_WATCH_UPDATER") or defaults.updater,
            release_api=os.environ.get("RECIPE_WATCH_RELEASE_API") or defaults.release_api,
            http_timeout=_env_float("RECIPE_WATCH_HTTP_TIMEOUT", defaults.http_timeout),
            updater_timeout=_env_float("RECIPE_WATCH_UPDATER_TIMEOUT", defaults.updater_timeout),
            github_token=os.environ.get("GITHUB_TOKEN") or None,
        )

    def with_overrides(self, **changes) -> Self:
        """Return a copy with the non-None ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
