"""Recipe metadata, upstream resolution and update decisions."""

from .decision import decide as decide
from .manifest import load_manifest as load_manifest
from .manifest import load_monitoring as load_monitoring
from .package import Package as Package
from .package import PackageReport as PackageReport
from .package import Status as Status
from .resolver import resolve as resolve
from .source import classify as classify
from .source import replace_version_in_url as replace_version_in_url
from .types import Decision as Decision
from .types import Manifest as Manifest
from .types import MonitoringConfig as MonitoringConfig
from .types import Outcome as Outcome
from .types import ResolvedUpstream as ResolvedUpstream
from .types import SourceType as SourceType
from .types import UpdateCommand as UpdateCommand
from .types import UpstreamEntry as UpstreamEntry

__all__ = [
    "Decision",
    "Manifest",
    "MonitoringConfig",
    "Outcome",
    "Package",
    "PackageReport",
    "ResolvedUpstream",
    "SourceType",
    "Status",
    "UpdateCommand",
    "UpstreamEntry",
    "classify",
    "decide",
    "load_manifest",
    "load_monitoring",
    "replace_version_in_url",
    "resolve",
]
