"""
Manifest fetcher implementation.

Retrieves and decodes the version manifests and downloads the artifacts they
point at. Every failure, whether the request failed, the server answered with
an error status or the body could not be decoded, is raised as a FetchError.
Nothing is retried.
"""

import logging
from dataclasses import dataclass
from typing import AsyncIterator, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from pistonmeta.manifest_models import (
    DownloadInfo,
    Library,
    LibraryDownload,
    MappingSide,
    RootManifest,
    VersionManifest,
    VersionRelease,
)
from pistonmeta.mapping_converter import MappingConverter
from pistonmeta.pistonmeta_config import PistonMetaConfig
from pistonmeta.pistonmeta_exceptions import FetchError
from pistonmeta.pistonmeta_logger import PistonMetaLogger

ModelT = TypeVar("ModelT", bound=BaseModel)
Downloadable = Union[str, DownloadInfo, LibraryDownload]


@dataclass
class DownloadedArtifact:
    """Content of a library jar together with its path below the libraries directory."""

    path: str
    content: bytes


@dataclass
class LibraryArtifacts:
    artifact: DownloadedArtifact
    native: Optional[DownloadedArtifact] = None


@dataclass
class StreamedArtifact:
    """A library jar whose content is read chunk by chunk."""

    path: str
    chunks: AsyncIterator[bytes]


@dataclass
class LibraryStreams:
    artifact: StreamedArtifact
    native: Optional[StreamedArtifact] = None


def _url_of(target: Downloadable) -> str:
    return target if isinstance(target, str) else target.url


class ManifestFetcher:
    """
    Fetches manifests and artifacts over HTTP.

    Use as an async context manager so the underlying client is closed:

        async with ManifestFetcher() as fetcher:
            manifest = await fetcher.fetch_root_manifest()
    """

    def __init__(
        self,
        config: Optional[PistonMetaConfig] = None,
        logger: Optional[PistonMetaLogger] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            config: Manifest URL and request settings
            logger: Logger for progress and error messages
            client: Client to send requests with. When given, the caller owns it
                and it is not closed by the fetcher.
        """
        self.config = config or PistonMetaConfig()
        self.logger = logger or PistonMetaLogger()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=self.config.request_timeout,
            follow_redirects=self.config.follow_redirects,
            headers={"User-Agent": self.config.user_agent},
        )

    async def __aenter__(self) -> "ManifestFetcher":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def _get(self, url: str) -> httpx.Response:
        self.logger.log(f"GET {url}", logging.INFO)
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            error_msg = f"Failed to fetch {url}: {e}"
            self.logger.log(error_msg, logging.ERROR)
            raise FetchError(error_msg, url=url) from e
        return response

    async def _get_model(self, url: str, model: Type[ModelT]) -> ModelT:
        response = await self._get(url)
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            error_msg = f"Failed to decode {model.__name__} from {url}: {e}"
            self.logger.log(error_msg, logging.ERROR)
            raise FetchError(error_msg, url=url) from e

    async def fetch_root_manifest(self, url: Optional[str] = None) -> RootManifest:
        """
        Fetch the manifest listing every version.

        Args:
            url: Manifest URL, defaults to the configured one
        """
        return await self._get_model(url or self.config.manifest_url, RootManifest)

    async def fetch_version_manifest(
        self, release: Union[str, VersionRelease]
    ) -> VersionManifest:
        """
        Fetch the manifest of one version.

        Args:
            release: An entry of the root manifest, or the URL of the version manifest
        """
        url = release if isinstance(release, str) else release.url
        return await self._get_model(url, VersionManifest)

    async def fetch_bytes(self, target: Downloadable) -> bytes:
        response = await self._get(_url_of(target))
        return response.content

    async def fetch_text(self, target: Downloadable) -> str:
        response = await self._get(_url_of(target))
        return response.text

    async def stream_bytes(self, target: Downloadable) -> AsyncIterator[bytes]:
        """
        Download without holding the whole body in memory.

            async for chunk in fetcher.stream_bytes(download):
                out.write(chunk)
        """
        url = _url_of(target)
        self.logger.log(f"GET {url} (streaming)", logging.INFO)
        try:
            async with self.client.stream("GET", url) as response:
                response.raise_for_status()
                async for chunk in response.aiter_bytes():
                    yield chunk
        except httpx.HTTPError as e:
            error_msg = f"Failed to stream {url}: {e}"
            self.logger.log(error_msg, logging.ERROR)
            raise FetchError(error_msg, url=url) from e

    async def download_library(self, library: Library) -> Optional[LibraryArtifacts]:
        """
        Download a library jar and, if the current platform has one, its natives jar.

        Returns:
            LibraryArtifacts, or None if the library's rules exclude the current platform
        """
        if not library.is_allowed():
            self.logger.log(
                f"Skipping {library.name}, not allowed on this platform",
                logging.DEBUG,
            )
            return None

        artifact = library.artifact()
        downloaded = LibraryArtifacts(
            artifact=DownloadedArtifact(artifact.path, await self.fetch_bytes(artifact))
        )
        native = library.native()
        if native is not None:
            downloaded.native = DownloadedArtifact(native.path, await self.fetch_bytes(native))
        return downloaded

    def stream_library(self, library: Library) -> Optional[LibraryStreams]:
        """
        Like download_library, but each jar is returned as a stream of chunks.
        No request is sent until a stream is iterated.

        Returns:
            LibraryStreams, or None if the library's rules exclude the current platform
        """
        if not library.is_allowed():
            self.logger.log(
                f"Skipping {library.name}, not allowed on this platform",
                logging.DEBUG,
            )
            return None

        artifact = library.artifact()
        streams = LibraryStreams(
            artifact=StreamedArtifact(artifact.path, self.stream_bytes(artifact))
        )
        native = library.native()
        if native is not None:
            streams.native = StreamedArtifact(native.path, self.stream_bytes(native))
        return streams

    async def fetch_mappings(
        self, version_id: str, side: MappingSide = MappingSide.CLIENT
    ) -> str:
        """
        Fetch the ProGuard mappings of a version.

        Args:
            version_id: The version id (e.g., "1.21.1")
            side: Whether to fetch the client or the server mappings

        Returns:
            The mapping file as text
        """
        root = await self.fetch_root_manifest()
        release = root.get_version(version_id)
        if release is None:
            error_msg = f"Unknown version {version_id}"
            self.logger.log(error_msg, logging.ERROR)
            raise FetchError(error_msg, url=self.config.manifest_url)

        manifest = await self.fetch_version_manifest(release)
        return await self.fetch_text(manifest.downloads.for_side(side, mappings=True))

    async def fetch_converted_mappings(
        self, version_id: str, side: MappingSide = MappingSide.CLIENT
    ) -> str:
        """Fetch the mappings of a version, converted to descriptor mappings."""
        mappings = await self.fetch_mappings(version_id, side)
        return MappingConverter(self.logger).convert(mappings).text
