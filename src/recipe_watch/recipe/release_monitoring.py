"""release-monitoring.org implementation of ReleaseProvider."""

from __future__ import annotations

import httpx

from recipe_watch.errors import LookupFailed

from .types import ReleaseInfo

DEFAULT_API = "https://release-monitoring.org"


class ReleaseMonitoringProvider:
    """Provider for latest versions from the release-monitoring.org (Anitya) API."""

    def __init__(self, base_url: str = DEFAULT_API, timeout: float = 10.0):
        """Initialize release-monitoring provider.

        Args:
            base_url: Service root, without the ``/api`` path
            timeout: Per-request timeout in seconds
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def project_url(self, project_id: int) -> str:
        return f"{self._base_url}/api/project/{project_id}"

    def get_project(self, project_id: int) -> ReleaseInfo:
        """Get latest version and homepage of a project.

        Raises:
            LookupFailed: If the request fails or the body has no usable version
        """
        url = self.project_url(project_id)
        try:
            with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
                response = client.get(url)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            raise LookupFailed(f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise LookupFailed(f"Undecodable response from {url}") from e

        if not isinstance(payload, dict):
            raise LookupFailed(f"Unexpected response from {url}")

        version = payload.get("version")
        if not isinstance(version, str) or not version:
            raise LookupFailed(f"No version for project {project_id}")

        homepage = payload.get("homepage")
        return ReleaseInfo(version=version, homepage=homepage if isinstance(homepage, str) else None)
