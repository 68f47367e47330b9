"""Tests for the update decision."""

import pytest

from recipe_watch.recipe.decision import build_upstream_arg, decide, is_safe_argument
from recipe_watch.recipe.resolver import resolve
from recipe_watch.recipe.types import (
    GitHash,
    Manifest,
    MonitoringConfig,
    Outcome,
    Releases,
    ResolvedUpstream,
    ResolveReason,
    SimpleHash,
    SourceType,
    UpdateCommand,
    UpstreamEntry,
)


def archive_manifest(version="1.2.0"):
    return Manifest(
        name="pkg",
        version=version,
        upstreams=[UpstreamEntry(f"https://example.org/pkg-{version}.tar.gz", SimpleHash("abcd1234"))],
    )


def git_manifest():
    return Manifest(
        name="applet",
        version="1.0.0",
        upstreams=[UpstreamEntry("git|https://github.com/o/r.git", GitHash("0ld"))],
    )


def test_same_version_and_identity_is_noop():
    manifest = archive_manifest("2.0.0")
    decision = decide(manifest, ResolvedUpstream("2.0.0", "abcd1234"))
    assert decision.outcome is Outcome.NOOP
    assert decision.command is None


@pytest.mark.parametrize("version", ["1.2.0", "9.9.9", ""])
def test_empty_identity_skips(version):
    decision = decide(archive_manifest(), ResolvedUpstream(version, "", reason=ResolveReason.LOOKUP_FAILED))
    assert decision.outcome is Outcome.SKIP
    assert decision.reason == "lookup-failed"


def test_skip_reason_from_resolver():
    resolved = ResolvedUpstream("2.0.0", "", reason=ResolveReason.VCS_HASH_UNAVAILABLE)
    assert decide(git_manifest(), resolved).reason == "vcs-hash-unavailable"


def test_no_upstream_skips():
    manifest = Manifest(name="pkg", version="1.0")
    decision = decide(manifest, ResolvedUpstream("1.1", "https://example.org/x"))
    assert decision.outcome is Outcome.SKIP
    assert decision.reason == "no-upstream"


def test_archive_update_uses_new_url():
    decision = decide(archive_manifest(), ResolvedUpstream("1.3.0", "https://example.org/pkg-1.3.0.tar.gz"))
    assert decision.outcome is Outcome.UPDATE
    assert decision.command == UpdateCommand(version="1.3.0", upstream="https://example.org/pkg-1.3.0.tar.gz")


def test_git_update_joins_url_and_hash():
    decision = decide(git_manifest(), ResolvedUpstream("2.0.0", "newsha"))
    assert decision.outcome is Outcome.UPDATE
    assert decision.command.upstream == "git|https://github.com/o/r.git, newsha"
    assert decision.command.version == "2.0.0"


def test_same_version_new_identity_updates():
    """A re-tagged release changes the hash without changing the version."""
    decision = decide(git_manifest(), ResolvedUpstream("1.0.0", "retagged"))
    assert decision.outcome is Outcome.UPDATE


def test_unsafe_arguments_skip():
    manifest = Manifest(
        name="pkg", version="1.0", upstreams=[UpstreamEntry("https://example.org/pkg-1.0.tar.gz", SimpleHash("aa"))]
    )
    assert decide(manifest, ResolvedUpstream("1.1", "https://example.org/\npkg")).reason == "unsafe-upstream-arg"
    assert decide(manifest, ResolvedUpstream("--local", "https://example.org/x")).reason == "unsafe-version"


def test_is_safe_argument():
    assert is_safe_argument("https://example.org/pkg-1.0.tar.gz")
    assert not is_safe_argument("")
    assert not is_safe_argument("-w")
    assert not is_safe_argument("a\x00b")


def test_build_upstream_arg():
    assert build_upstream_arg("git|u", SourceType.GIT, "h") == "git|u, h"
    assert build_upstream_arg("u", SourceType.ARCHIVE, "new") == "new"


def test_update_command_argv():
    command = UpdateCommand(version="1.3.0", upstream="https://example.org/pkg-1.3.0.tar.gz")
    assert command.argv() == [
        "boulder",
        "recipe",
        "update",
        "--ver",
        "1.3.0",
        "--upstream",
        "https://example.org/pkg-1.3.0.tar.gz",
        "stone.yaml",
        "-w",
        "--build",
        "--local",
    ]
    assert command.argv("/opt/bin/boulder")[0] == "/opt/bin/boulder"


class TestEndToEnd:
    """Resolution followed by decision for an archive recipe at 1.2.0."""

    monitoring = MonitoringConfig(releases=Releases(id=7))

    def test_newer_release_updates(self, fake_releases, fake_vcs):
        fake_releases.versions[7] = "1.3.0"
        manifest = archive_manifest()
        resolved = resolve(self.monitoring, manifest.primary_upstream, "1.2.0", releases=fake_releases, vcs=fake_vcs)
        assert resolved.latest_identity == "https://example.org/pkg-1.3.0.tar.gz"

        decision = decide(manifest, resolved)
        assert decision.outcome is Outcome.UPDATE
        assert decision.command.upstream == "https://example.org/pkg-1.3.0.tar.gz"
        assert decision.command.version == "1.3.0"

    def test_same_release_is_noop(self, fake_releases, fake_vcs):
        fake_releases.versions[7] = "1.2.0"
        manifest = archive_manifest()
        resolved = resolve(self.monitoring, manifest.primary_upstream, "1.2.0", releases=fake_releases, vcs=fake_vcs)
        assert decide(manifest, resolved).outcome is Outcome.NOOP
