"""GitHub implementation of VcsProvider."""

from __future__ import annotations

import logging
import threading
from urllib.parse import urlsplit

from githubkit import GitHub
from githubkit.exception import GitHubException, RequestFailed

from .source import GIT_SUFFIX, strip_git_marker

logger = logging.getLogger(__name__)


class GitHubClient:
    """Client for GitHub API (singleton)."""

    _instance: GitHubClient | None = None
    _github: GitHub | None = None
    _lock = threading.Lock()

    def __new__(cls, token: str | None = None) -> GitHubClient:
        # Workers may race to create the client; the first token wins
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._github = GitHub(token)
        return cls._instance

    def get_tag_ref(self, owner: str, repo: str, tag: str) -> dict | None:
        """Get the git ref of a tag.

        Returns:
            Ref object or None if not found
        """
        try:
            response = self._github.rest.git.get_ref(owner=owner, repo=repo, ref=f"tags/{tag}")
            return response.parsed_data.model_dump()
        except RequestFailed:
            return None

    def get_tag_object(self, owner: str, repo: str, tag_sha: str) -> dict | None:
        """Get an annotated tag object.

        Returns:
            Tag object or None if not found
        """
        try:
            response = self._github.rest.git.get_tag(owner=owner, repo=repo, tag_sha=tag_sha)
            return response.parsed_data.model_dump()
        except RequestFailed:
            return None


class GitHubProvider:
    """Provider for commit hashes of tagged GitHub releases."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub provider.

        Args:
            token: Optional GitHub token, raises the API rate limit
        """
        self._client = GitHubClient(token)

    def get_commit_hash(self, url: str, version: str) -> str:
        """Get the commit a release tag points to.

        Tries ``v{version}`` then ``{version}``; annotated tags are dereferenced
        to their commit.

        Args:
            url: Repository URL, optionally ``git|``-prefixed
            version: Release version

        Returns:
            Commit sha, or an empty string if no tag matches or the API fails
        """
        try:
            owner, repo = self._parse_url(url)
        except ValueError as e:
            logger.debug("%s", e)
            return ""

        try:
            for tag in (f"v{version}", version):
                ref = self._client.get_tag_ref(owner, repo, tag)
                if ref:
                    return self._resolve_ref(owner, repo, ref)
        except GitHubException as e:
            logger.warning("GitHub lookup for %s/%s failed: %s", owner, repo, e)
        return ""

    def _resolve_ref(self, owner: str, repo: str, ref: dict) -> str:
        target = ref.get("object") or {}
        sha = target.get("sha") or ""
        if target.get("type") == "tag" and sha:
            tag = self._client.get_tag_object(owner, repo, sha)
            return ((tag or {}).get("object") or {}).get("sha") or ""
        return sha

    def _parse_url(self, url: str) -> tuple[str, str]:
        """Parse ``https://github.com/owner/repo(.git)`` into (owner, repo).

        Raises:
            ValueError: If the URL has no owner/repo path
        """
        path = urlsplit(strip_git_marker(url)).path.strip("/")
        parts = path.split("/")
        if len(parts) < 2 or not parts[0] or not parts[1]:
            raise ValueError(f"Invalid GitHub repository URL: {url} (expected 'github.com/owner/repo')")
        repo = parts[1]
        if repo.endswith(GIT_SUFFIX):
            repo = repo[: -len(GIT_SUFFIX)]
        return parts[0], repo
