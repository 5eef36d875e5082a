"""
Manifest fetcher.

This package handles:
1. Fetching and decoding the root and per-version manifests
2. Downloading artifacts as bytes, text or a stream of chunks
3. Selecting and downloading the libraries for the current platform
4. Fetching the mappings of a version
"""

from .fetcher import (
    DownloadedArtifact,
    LibraryArtifacts,
    LibraryStreams,
    ManifestFetcher,
    StreamedArtifact,
)

__all__ = [
    "ManifestFetcher",
    "DownloadedArtifact",
    "LibraryArtifacts",
    "StreamedArtifact",
    "LibraryStreams",
]
