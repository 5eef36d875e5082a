"""
Pydantic data models for the version manifests.

The root manifest lists every published version:

{
  "latest": {"release": "1.21.1", "snapshot": "24w33a"},
  "versions": [
    {
      "id": "1.21.1",
      "type": "release",
      "url": "https://piston-meta.mojang.com/v1/packages/.../1.21.1.json",
      "time": "2024-08-08T12:24:45+00:00",
      "releaseTime": "2024-08-08T12:24:45+00:00",
      "sha1": "...",
      "complianceLevel": 1
    }
  ]
}

Each version's `url` points at its version manifest. Only the parts needed to
download the game and its mappings are modelled; other keys are ignored.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pistonmeta.manifest_models.libraries import Library


class ReleaseKind(str, Enum):
    SNAPSHOT = "snapshot"
    RELEASE = "release"
    OLD_BETA = "old_beta"
    OLD_ALPHA = "old_alpha"


class MappingSide(str, Enum):
    """The two distributions that ship their own mappings."""

    CLIENT = "client"
    SERVER = "server"


class LatestReleases(BaseModel):
    release: str = Field(..., description="Id of the latest release")
    snapshot: str = Field(..., description="Id of the latest snapshot")


class VersionRelease(BaseModel):
    """
    An entry of the root manifest.
    """

    id: str
    kind: ReleaseKind = Field(..., alias="type")
    url: str = Field(..., description="URL of the version manifest")
    time: datetime
    release_time: datetime = Field(..., alias="releaseTime")
    sha1: str
    compliance_level: int = Field(..., alias="complianceLevel")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RootManifest(BaseModel):
    """
    Top-level manifest listing every published version, newest first.
    """

    latest: LatestReleases
    versions: List[VersionRelease]

    model_config = ConfigDict(extra="ignore")

    def get_version(self, version_id: str) -> Optional[VersionRelease]:
        """
        Get a version by id.

        Args:
            version_id: The version id (e.g., "1.21.1", "24w33a")

        Returns:
            VersionRelease or None if not found
        """
        for version in self.versions:
            if version.id == version_id:
                return version
        return None

    def latest_release(self) -> Optional[VersionRelease]:
        return self.get_version(self.latest.release)

    def latest_snapshot(self) -> Optional[VersionRelease]:
        return self.get_version(self.latest.snapshot)

    def versions_of_kind(self, kind: ReleaseKind) -> List[VersionRelease]:
        return [version for version in self.versions if version.kind == kind]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RootManifest":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the JSON layout with its camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class DownloadInfo(BaseModel):
    """A downloadable file of a version: the game jars and their mappings."""

    sha1: str
    size: int
    url: str


class VersionDownloads(BaseModel):
    client: DownloadInfo
    client_mappings: DownloadInfo
    server: DownloadInfo
    server_mappings: DownloadInfo

    model_config = ConfigDict(extra="ignore")

    def for_side(self, side: MappingSide, mappings: bool = False) -> DownloadInfo:
        """
        Get the jar, or with `mappings` the mapping file, of one side.
        """
        side = MappingSide(side)
        if side == MappingSide.CLIENT:
            return self.client_mappings if mappings else self.client
        return self.server_mappings if mappings else self.server


class VersionManifest(BaseModel):
    """
    Manifest of a single version.
    """

    downloads: VersionDownloads
    id: str
    libraries: List[Library]

    model_config = ConfigDict(extra="ignore")

    def allowed_libraries(self) -> List[Library]:
        """Libraries whose rules allow the current platform."""
        return [library for library in self.libraries if library.is_allowed()]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VersionManifest":
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "downloads": self.downloads.model_dump(mode="json"),
            "id": self.id,
            "libraries": [library.to_dict() for library in self.libraries],
        }
