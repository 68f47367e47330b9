"""Resolution of the latest upstream version and identity of a recipe."""

from __future__ import annotations

import logging

from recipe_watch.errors import LookupFailed

from .provider import ReleaseProvider, VcsProvider
from .source import classify, replace_version_in_url
from .types import MonitoringConfig, ResolvedUpstream, ResolveReason, SourceType, UpstreamEntry

logger = logging.getLogger(__name__)


def resolve(
    monitoring: MonitoringConfig,
    entry: UpstreamEntry,
    current_version: str,
    *,
    releases: ReleaseProvider,
    vcs: VcsProvider,
) -> ResolvedUpstream:
    """Compute the latest version and identity for ``entry``.

    The identity is a commit hash for git upstreams and a download URL for
    archives. Lookup failures never raise: they come back as an empty identity
    with ``reason`` set, which callers must treat as "skip".

    Args:
        monitoring: Decoded monitoring.yaml
        entry: Authoritative (first) upstream of the manifest
        current_version: Version currently declared by the manifest
        releases: Release-tracking service
        vcs: Forge used to map a version to a commit hash

    Returns:
        ResolvedUpstream
    """
    project_id = monitoring.tracking_id
    if project_id is None:
        # Not yet tracked
        return ResolvedUpstream(reason=ResolveReason.UNTRACKED)

    try:
        release = releases.get_project(project_id)
    except LookupFailed as e:
        logger.warning("Release lookup for project %s failed: %s", project_id, e)
        return ResolvedUpstream(reason=ResolveReason.LOOKUP_FAILED)

    new_version = release.version
    if new_version == current_version:
        return ResolvedUpstream(new_version, entry.hash, homepage=release.homepage)

    if classify(entry) is SourceType.GIT:
        commit = vcs.get_commit_hash(entry.url, new_version)
        if not commit:
            return ResolvedUpstream(
                new_version, "", homepage=release.homepage, reason=ResolveReason.VCS_HASH_UNAVAILABLE
            )
        return ResolvedUpstream(new_version, commit, homepage=release.homepage)

    new_url = replace_version_in_url(entry.url, current_version, new_version)
    return ResolvedUpstream(new_version, new_url, homepage=release.homepage)
