"""Type definitions for recipe metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

GIT_MARKER = "git|"


class SourceType(Enum):
    """How the latest identity of an upstream is computed."""

    GIT = "git"
    ARCHIVE = "archive"


@dataclass(frozen=True)
class SimpleHash:
    """Bare content hash, e.g. ``https://host/pkg-1.0.tar.gz: <sha256>``."""

    hash: str


@dataclass(frozen=True)
class GitHash:
    """Commit hash of a ``git|`` upstream."""

    hash: str


@dataclass(frozen=True)
class ExtendedHash:
    """Hash plus auxiliary properties (``rename``, ``strip-dirs``, ...)."""

    hash: str
    properties: dict[str, Any] = field(default_factory=dict)


UpstreamValue = SimpleHash | GitHash | ExtendedHash


@dataclass(frozen=True)
class UpstreamEntry:
    url: str
    value: UpstreamValue

    @property
    def hash(self) -> str:
        """Current identity pinned by this entry."""
        return self.value.hash


@dataclass(frozen=True)
class UpstreamParse:
    """Result of decoding a manifest's ``upstreams`` list.

    ``rejected`` holds the raw elements that could not be decoded so callers can
    choose to report them instead of losing them silently.
    """

    entries: list[UpstreamEntry] = field(default_factory=list)
    rejected: list[Any] = field(default_factory=list)


@dataclass
class Manifest:
    """Decoded ``stone.yaml``."""

    name: str
    version: str
    release: int | None = None
    upstreams: list[UpstreamEntry] = field(default_factory=list)
    homepage: str | None = None
    rejected_upstreams: list[Any] = field(default_factory=list)

    @property
    def primary_upstream(self) -> UpstreamEntry | None:
        """First upstream entry; it is authoritative for version tracking."""
        return self.upstreams[0] if self.upstreams else None


@dataclass(frozen=True)
class Releases:
    id: int | None = None
    rss: str | None = None


@dataclass
class MonitoringConfig:
    """Decoded ``monitoring.yaml``."""

    releases: Releases = field(default_factory=Releases)
    security: Any = None

    @property
    def tracking_id(self) -> int | None:
        return self.releases.id


@dataclass(frozen=True)
class ReleaseInfo:
    """Project answer from the release-tracking service."""

    version: str
    homepage: str | None = None


class ResolveReason(str, Enum):
    """Why a resolution produced no latest identity."""

    UNTRACKED = "untracked"
    LOOKUP_FAILED = "lookup-failed"
    VCS_HASH_UNAVAILABLE = "vcs-hash-unavailable"
    NO_UPSTREAM = "no-upstream"


@dataclass(frozen=True)
class ResolvedUpstream:
    """Latest version and identity (commit hash or download URL) of an upstream.

    An empty ``latest_identity`` means resolution failed or was inconclusive;
    ``reason`` says which.
    """

    latest_version: str = ""
    latest_identity: str = ""
    homepage: str | None = None
    reason: ResolveReason | None = None

    @property
    def is_empty(self) -> bool:
        return not self.latest_identity


UPDATER_SUBCOMMAND = ("recipe", "update")
UPDATER_TRAILER = ("stone.yaml", "-w", "--build", "--local")


@dataclass(frozen=True)
class UpdateCommand:
    """Arguments handed to the external recipe updater."""

    version: str
    upstream: str

    def argv(self, executable: str = "boulder") -> list[str]:
        return [
            executable,
            *UPDATER_SUBCOMMAND,
            "--ver",
            self.version,
            "--upstream",
            self.upstream,
            *UPDATER_TRAILER,
        ]


class Outcome(str, Enum):
    NOOP = "noop"
    SKIP = "skip"
    UPDATE = "update"


@dataclass(frozen=True)
class Decision:
    outcome: Outcome
    command: UpdateCommand | None = None
    reason: str | None = None

    @classmethod
    def noop(cls) -> Decision:
        return cls(Outcome.NOOP)

    @classmethod
    def skip(cls, reason: str) -> Decision:
        return cls(Outcome.SKIP, reason=reason)

    @classmethod
    def update(cls, command: UpdateCommand) -> Decision:
        return cls(Outcome.UPDATE, command=command)
