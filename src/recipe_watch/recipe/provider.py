"""Abstract provider interfaces for upstream release queries."""

from __future__ import annotations

import logging
from typing import Protocol
from urllib.parse import urlsplit

from .source import strip_git_marker
from .types import ReleaseInfo

logger = logging.getLogger(__name__)


class ReleaseProvider(Protocol):
    """Interface for release-tracking services.

    Providers answer "what is the latest version of project N" for the numeric
    tracking id stored in a recipe's monitoring.yaml.
    """

    def get_project(self, project_id: int) -> ReleaseInfo:
        """Get latest release information for a tracked project.

        Args:
            project_id: Tracking identifier

        Returns:
            ReleaseInfo with the latest known version

        Raises:
            LookupFailed: On transport errors, non-200 answers or undecodable bodies
        """
        ...


class VcsProvider(Protocol):
    """Interface for version-control forges."""

    def get_commit_hash(self, url: str, version: str) -> str:
        """Get the commit hash a version is tagged at.

        Args:
            url: Repository URL as written in the manifest
            version: Version to look up

        Returns:
            Commit hash, or an empty string if it cannot be determined
        """
        ...


def get_vcs_provider(url: str, token: str | None = None) -> VcsProvider | None:
    """Get the forge provider able to answer for ``url``.

    Returns:
        Provider instance, or None if no provider supports the host
    """
    host = urlsplit(strip_git_marker(url)).hostname or ""
    if host == "github.com" or host.endswith(".github.com"):
        from .github_provider import GitHubProvider

        return GitHubProvider(token)
    return None


class ForgeVcsProvider:
    """VcsProvider routing each URL to the provider for its host."""

    def __init__(self, token: str | None = None):
        self.token = token

    def get_commit_hash(self, url: str, version: str) -> str:
        provider = get_vcs_provider(url, self.token)
        if provider is None:
            logger.debug("No forge provider for %s", url)
            return ""
        return provider.get_commit_hash(url, version)
