"""Decoding of stone.yaml and monitoring.yaml into typed recipe models."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from recipe_watch.document import YAMLHandle
from recipe_watch.errors import ManifestError
from recipe_watch.file import File

from .types import (
    GIT_MARKER,
    ExtendedHash,
    GitHash,
    Manifest,
    MonitoringConfig,
    Releases,
    SimpleHash,
    UpstreamEntry,
    UpstreamParse,
)

logger = logging.getLogger(__name__)

# Recipe documents are loaded without scalar resolution, so YAML nulls arrive as text
_NULL_TOKENS = frozenset({"", "~", "null", "Null", "NULL"})


def _null_to_none(value: Any) -> Any:
    return None if isinstance(value, str) and value in _NULL_TOKENS else value


def _decode_upstream(element: Any) -> UpstreamEntry | None:
    """Decode one ``{url: value}`` element, or return None if it is malformed."""
    if not isinstance(element, Mapping) or not element:
        return None

    # Only the first key of the element is meaningful
    url, value = next(iter(element.items()))
    if not isinstance(url, str) or not url:
        return None

    is_git = url.startswith(GIT_MARKER)
    value = _null_to_none(value)

    if isinstance(value, str):
        return UpstreamEntry(url, GitHash(value) if is_git else SimpleHash(value))

    if isinstance(value, Mapping):
        hash_ = _null_to_none(value.get("hash"))
        if not isinstance(hash_, str):
            return None
        if is_git:
            # git| upstreams only carry a ref; auxiliary properties are discarded
            return UpstreamEntry(url, GitHash(hash_))
        properties = {k: v for k, v in value.items() if isinstance(k, str) and k != "hash"}
        return UpstreamEntry(url, ExtendedHash(hash_, properties))

    return None


def parse_upstreams(raw: Any, strict: bool = False) -> UpstreamParse:
    """Decode a manifest ``upstreams`` list.

    Args:
        raw: The raw ``upstreams`` value (None when absent)
        strict: Raise on the first malformed element instead of collecting it

    Returns:
        UpstreamParse with decoded entries (in document order) and rejected elements

    Raises:
        ManifestError: If ``raw`` is not a list, or in strict mode on a malformed element
    """
    if _null_to_none(raw) is None:
        return UpstreamParse()
    if not isinstance(raw, list):
        raise ManifestError(f"'upstreams' must be a list, got {type(raw).__name__}")

    entries: list[UpstreamEntry] = []
    rejected: list[Any] = []
    for element in raw:
        entry = _decode_upstream(element)
        if entry is None:
            if strict:
                raise ManifestError(f"Malformed upstream entry: {element!r}")
            rejected.append(element)
        else:
            entries.append(entry)
    return UpstreamParse(entries, rejected)


def _optional_int(value: Any, field_name: str) -> int | None:
    value = _null_to_none(value)
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug("Ignoring non-integer %s: %r", field_name, value)
        return None


def _optional_str(value: Any) -> str | None:
    value = _null_to_none(value)
    return value if isinstance(value, str) else None


def parse_manifest(doc: Any, strict: bool = False) -> Manifest:
    """Build a Manifest from a loaded stone.yaml document.

    Raises:
        ManifestError: If the document is not a mapping or lacks name/version
    """
    if not isinstance(doc, Mapping):
        raise ManifestError(f"Manifest must be a mapping, got {type(doc).__name__}")

    name = _null_to_none(doc.get("name"))
    version = _null_to_none(doc.get("version"))
    if not isinstance(name, str) or not name:
        raise ManifestError("Manifest is missing 'name'")
    if not isinstance(version, str) or not version:
        raise ManifestError(f"Manifest for {name} is missing 'version'")

    upstreams = parse_upstreams(doc.get("upstreams"), strict=strict)
    if upstreams.rejected:
        logger.debug("%s: dropped %d malformed upstream(s)", name, len(upstreams.rejected))

    return Manifest(
        name=name,
        version=version,
        release=_optional_int(doc.get("release"), "release"),
        upstreams=upstreams.entries,
        homepage=_optional_str(doc.get("homepage")),
        rejected_upstreams=upstreams.rejected,
    )


def parse_monitoring(doc: Any) -> MonitoringConfig:
    """Build a MonitoringConfig from a loaded monitoring.yaml document.

    Raises:
        ManifestError: If the document or its ``releases`` section is not a mapping
    """
    if not isinstance(doc, Mapping):
        raise ManifestError(f"Monitoring must be a mapping, got {type(doc).__name__}")

    releases = _null_to_none(doc.get("releases")) or {}
    if not isinstance(releases, Mapping):
        raise ManifestError("'releases' must be a mapping")

    return MonitoringConfig(
        releases=Releases(
            id=_optional_int(releases.get("id"), "releases.id"),
            rss=_optional_str(releases.get("rss")),
        ),
        security=_null_to_none(doc.get("security")),
    )


def load_manifest(path: str | Path | File, strict: bool = False) -> Manifest:
    """Read and decode a stone.yaml file."""
    return parse_manifest(YAMLHandle(path).load().read(), strict=strict)


def load_monitoring(path: str | Path | File) -> MonitoringConfig:
    """Read and decode a monitoring.yaml file."""
    return parse_monitoring(YAMLHandle(path).load().read())
