"""Upstream source classification and version substitution in download URLs."""

from __future__ import annotations

import re

from .types import GIT_MARKER, SourceType, UpstreamEntry

GIT_FORGES = (
    "github.com",
    "gitlab.com",
    "bitbucket.com",
    "git.kernel.org",
    "code.videolan.org",
    "git.savannah.gnu.org",
    "invent.kde.org",
)

GIT_SUFFIX = ".git"


def is_git_source(entry: UpstreamEntry) -> bool:
    """Return True for ``git|`` upstreams and repository URLs on known forges."""
    if entry.url.startswith(GIT_MARKER):
        return True
    return any(forge in entry.url for forge in GIT_FORGES) and GIT_SUFFIX in entry.url


def classify(entry: UpstreamEntry) -> SourceType:
    return SourceType.GIT if is_git_source(entry) else SourceType.ARCHIVE


def strip_git_marker(url: str) -> str:
    """Drop the ``git|`` prefix so the URL can be handed to a forge API."""
    return url[len(GIT_MARKER) :] if url.startswith(GIT_MARKER) else url


def replace_version_in_url(url: str, old_version: str, new_version: str) -> str:
    """Substitute ``new_version`` for every occurrence of ``old_version`` in ``url``.

    A leading ``v`` before the version (``.../v1.2.0/pkg-1.2.0.tar.gz``) is kept,
    so replacing a version with itself returns the URL unchanged.

    Examples:
        >>> replace_version_in_url("https://example.org/pkg-1.2.0.tar.gz", "1.2.0", "1.3.0")
        'https://example.org/pkg-1.3.0.tar.gz'
    """
    if not old_version:
        return url
    escaped = re.escape(old_version)
    for pattern in (rf"(v?){escaped}", rf"(){escaped}"):
        regex = re.compile(pattern)
        if regex.search(url):
            # Function replacement keeps backslashes in the version literal
            return regex.sub(lambda m: m.group(1) + new_version, url)

    # Fallback in case no pattern matched
    return url.replace(old_version, new_version)
