"""
Manifest models.

This package provides Pydantic data models for the root version manifest and
the per-version manifests with their downloads and libraries.
"""

from .libraries import (
    Library,
    LibraryDownload,
    LibraryDownloads,
    LibraryExtractInstructions,
    OsName,
    OsRule,
    Rule,
    RuleAction,
)
from .manifests import (
    DownloadInfo,
    LatestReleases,
    MappingSide,
    ReleaseKind,
    RootManifest,
    VersionDownloads,
    VersionManifest,
    VersionRelease,
)

__all__ = [
    # Root manifest
    "RootManifest",
    "LatestReleases",
    "VersionRelease",
    "ReleaseKind",
    # Version manifest
    "VersionManifest",
    "VersionDownloads",
    "DownloadInfo",
    "MappingSide",
    # Libraries
    "Library",
    "LibraryDownload",
    "LibraryDownloads",
    "LibraryExtractInstructions",
    "OsName",
    "OsRule",
    "Rule",
    "RuleAction",
]
