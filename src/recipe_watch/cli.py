"""CLI interface for recipe-watch."""

import logging
import sys
from pathlib import Path

import tyro

from .discovery import load_repository
from .dispatch import dispatch
from .settings import Settings

logger = logging.getLogger("recipe_watch")


def run(
    repo: Path | None = None,
    workers: int | None = None,
    verbose: bool = False,
) -> int:
    """Check every recipe against its upstream and update the outdated ones.

    Args:
        repo: Recipe repository root (default: $RECIPE_WATCH_REPO or ~/repos/aerynos/recipes)
        workers: Maximum number of packages processed at once
        verbose: Log debug output
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")

    try:
        settings = Settings.from_env().with_overrides(repo_path=repo, max_workers=workers)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    try:
        repository = load_repository(settings)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1

    if not repository.packages:
        logger.info("No recipes found in %s", repository.path)
        return 0

    logger.info("Checking %d recipe(s) in %s", len(repository.packages), repository.path)
    dispatch(repository.packages, settings)
    return 0


def main() -> None:
    """recipe-watch - update recipes whose upstream has a newer release."""
    sys.exit(tyro.cli(run))


if __name__ == "__main__":
    main()
