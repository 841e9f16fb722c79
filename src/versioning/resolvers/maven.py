"""Maven repository lookups for GWT artifacts."""

import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

from packaging import version

from common.http_client import robust_get
from constants import Constants

logger = logging.getLogger(__name__)


class MavenMetadataResolver:
    """Reads published versions from a repository's maven-metadata.xml."""

    def __init__(self, repository_url: Optional[str] = None):
        self.repository_url = (repository_url or Constants.MAVEN_REPOSITORY_URL).rstrip("/")
        self._cache: Dict[str, List[str]] = {}

    def metadata_url(self, group_id: str, artifact_id: str) -> str:
        return f"{self.repository_url}/{group_id.replace('.', '/')}/{artifact_id}/maven-metadata.xml"

    def fetch_candidates(self, group_id: str, artifact_id: str) -> List[str]:
        """Fetch the published versions of an artifact.

        Returns:
            List of version strings; empty when the metadata is unavailable.
        """
        cache_key = f"{group_id}:{artifact_id}"
        if cache_key in self._cache:
            return self._cache[cache_key]

        url = self.metadata_url(group_id, artifact_id)
        status_code, _, text = robust_get(url)
        if status_code != 200 or not text:
            logger.warning("Could not fetch Maven metadata for %s (status %s)", cache_key, status_code)
            return []

        try:
            root = ET.fromstring(text)
        except ET.ParseError:
            logger.warning("Malformed Maven metadata for %s", cache_key)
            return []

        versions = []
        for version_elem in root.findall("./versioning/versions/version"):
            if version_elem.text and version_elem.text.strip():
                versions.append(version_elem.text.strip())

        self._cache[cache_key] = versions
        return versions

    def is_published(self, group_id: str, artifact_id: str, version_str: str) -> bool:
        return version_str in self.fetch_candidates(group_id, artifact_id)


def pick_latest(candidates: List[str]) -> Optional[str]:
    """Pick the highest stable (non-SNAPSHOT, non-prerelease) version."""
    parsed = []
    for v in candidates:
        if v.endswith("-SNAPSHOT"):
            continue
        try:
            pv = version.Version(v)
        except version.InvalidVersion:
            continue
        if not pv.is_prerelease:
            parsed.append((pv, v))
    if not parsed:
        return None
    parsed.sort(key=lambda item: item[0], reverse=True)
    return parsed[0][1]


def verify_plan(plan, resolver: MavenMetadataResolver) -> List[str]:
    """Return the coordinates of a DependencyPlan that are not published."""
    missing = []
    for dep in plan.dependencies:
        if not resolver.is_published(dep.group, dep.artifact, dep.version):
            missing.append(dep.coordinate)
    return missing
