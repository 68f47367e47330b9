"""Update decision: compare current and latest upstream identity."""

from __future__ import annotations

import unicodedata

from .source import classify
from .types import Decision, Manifest, ResolvedUpstream, ResolveReason, SourceType, UpdateCommand


def build_upstream_arg(url: str, source_type: SourceType, latest_identity: str) -> str:
    """Format the ``--upstream`` argument expected by the recipe updater.

    Git upstreams are passed as ``"<url>, <hash>"``; archives as the new URL.
    """
    if source_type is SourceType.GIT:
        return f"{url}, {latest_identity}"
    return latest_identity


def is_safe_argument(value: str) -> bool:
    """Reject values that could be read as an option or smuggle control characters."""
    if not value or value.startswith("-"):
        return False
    return not any(unicodedata.category(ch) == "Cc" for ch in value)


def decide(manifest: Manifest, resolved: ResolvedUpstream) -> Decision:
    """Decide whether ``manifest`` needs an update to ``resolved``."""
    entry = manifest.primary_upstream
    if entry is None:
        return Decision.skip(ResolveReason.NO_UPSTREAM.value)

    if resolved.is_empty:
        reason = resolved.reason or ResolveReason.LOOKUP_FAILED
        return Decision.skip(reason.value)

    if resolved.latest_version == manifest.version and resolved.latest_identity == entry.hash:
        return Decision.noop()

    upstream = build_upstream_arg(entry.url, classify(entry), resolved.latest_identity)
    if not upstream:
        return Decision.skip("empty-upstream-arg")
    if not is_safe_argument(upstream):
        return Decision.skip("unsafe-upstream-arg")
    if not is_safe_argument(resolved.latest_version):
        return Decision.skip("unsafe-version")

    return Decision.update(UpdateCommand(version=resolved.latest_version, upstream=upstream))
