"""A recipe directory tracked against its upstream."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from recipe_watch.errors import UpdaterError
from recipe_watch.updater import run_update

from .decision import decide
from .manifest import load_manifest, load_monitoring
from .provider import ReleaseProvider, VcsProvider
from .resolver import resolve
from .types import Decision, Outcome, ResolvedUpstream, ResolveReason

logger = logging.getLogger(__name__)

MANIFEST_NAME = "stone.yaml"
MONITORING_NAME = "monitoring.yaml"


class Status(str, Enum):
    UPDATED = "updated"
    UPDATE_FAILED = "update-failed"
    UP_TO_DATE = "up-to-date"
    SKIPPED = "skipped"
    FAILED = "failed"
    ALREADY_HANDLED = "already-handled"


@dataclass(frozen=True)
class PackageReport:
    name: str
    status: Status
    detail: str = ""


@dataclass
class Package:
    """Recipe directory with its manifest and monitoring file."""

    path: Path
    manifest: Path | None = None
    monitoring: Path | None = None
    updated: bool = False

    def __post_init__(self):
        self.path = Path(self.path)
        self.manifest = Path(self.manifest) if self.manifest else self.path / MANIFEST_NAME
        self.monitoring = Path(self.monitoring) if self.monitoring else self.path / MONITORING_NAME

    @property
    def name(self) -> str:
        return self.path.name

    def check(self, releases: ReleaseProvider, vcs: VcsProvider) -> Decision:
        """Load the recipe documents and decide whether an update is due.

        Raises:
            DocumentError: If stone.yaml or monitoring.yaml cannot be decoded
        """
        monitoring = load_monitoring(self.monitoring)
        manifest = load_manifest(self.manifest)

        entry = manifest.primary_upstream
        if entry is None:
            resolved = ResolvedUpstream(reason=ResolveReason.NO_UPSTREAM)
        else:
            resolved = resolve(monitoring, entry, manifest.version, releases=releases, vcs=vcs)
        return decide(manifest, resolved)

    def update(
        self,
        releases: ReleaseProvider,
        vcs: VcsProvider,
        *,
        updater: str = "boulder",
        timeout: float | None = None,
    ) -> PackageReport:
        """Check the package and run the updater when a newer upstream exists.

        Runs at most once per Package; later calls report ``already-handled``.

        Raises:
            DocumentError: If the recipe documents cannot be decoded
        """
        if self.updated:
            return PackageReport(self.name, Status.ALREADY_HANDLED)
        try:
            return self._update(releases, vcs, updater, timeout)
        finally:
            self.updated = True

    def _update(self, releases, vcs, updater, timeout) -> PackageReport:
        decision = self.check(releases, vcs)

        if decision.outcome is Outcome.SKIP:
            logger.warning("Skipping %s - %s", self.name, decision.reason)
            return PackageReport(self.name, Status.SKIPPED, decision.reason or "")

        if decision.outcome is Outcome.NOOP:
            logger.info("Nothing to update for %s", self.name)
            return PackageReport(self.name, Status.UP_TO_DATE)

        command = decision.command
        logger.info("Updating %s to %s", self.name, command.version)
        try:
            result = run_update(command, self.path, executable=updater, timeout=timeout)
        except UpdaterError as e:
            logger.error("Update failed for: %s - %s", self.name, e)
            return PackageReport(self.name, Status.UPDATE_FAILED, str(e))

        if result.ok:
            logger.info("Successfully updated %s to %s", self.name, command.version)
            return PackageReport(self.name, Status.UPDATED, command.version)

        logger.error("Update failed for: %s (exit %d)", self.name, result.returncode)
        if result.stderr.strip():
            logger.error("Error output: %s", result.stderr.rstrip())
        return PackageReport(self.name, Status.UPDATE_FAILED, result.stderr.strip())
