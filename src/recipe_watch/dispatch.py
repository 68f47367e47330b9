"""Concurrent update of every package in a repository."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from .recipe.package import Package, PackageReport, Status
from .recipe.provider import ForgeVcsProvider, ReleaseProvider, VcsProvider
from .recipe.release_monitoring import ReleaseMonitoringProvider
from .settings import Settings

logger = logging.getLogger(__name__)


def _run_package(
    package: Package,
    releases: ReleaseProvider,
    vcs: VcsProvider,
    settings: Settings,
) -> PackageReport:
    """Worker body: one package, failures contained."""
    try:
        return package.update(
            releases,
            vcs,
            updater=settings.updater,
            timeout=settings.updater_timeout,
        )
    except Exception as e:
        logger.error("Failed to process %s: %s", package.name, e)
        logger.debug("Traceback for %s", package.name, exc_info=True)
        return PackageReport(package.name, Status.FAILED, str(e))


def dispatch(
    packages: Iterable[Package],
    settings: Settings | None = None,
    *,
    releases: ReleaseProvider | None = None,
    vcs: VcsProvider | None = None,
    max_workers: int | None = None,
) -> list[PackageReport]:
    """Update all ``packages`` concurrently and wait for every worker.

    Each package is handed to exactly one worker. Reports are returned in the
    order of ``packages``, whatever order the workers finish in.
    """
    settings = settings or Settings()
    releases = releases or ReleaseMonitoringProvider(settings.release_api, timeout=settings.http_timeout)
    vcs = vcs or ForgeVcsProvider(token=settings.github_token)

    pending = [p for p in packages if not p.updated]
    if not pending:
        return []

    workers = max(1, min(len(pending), max_workers or settings.max_workers))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="recipe-watch") as executor:
        futures = [executor.submit(_run_package, package, releases, vcs, settings) for package in pending]
    return [future.result() for future in futures]
