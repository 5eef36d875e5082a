"""Typer CLI entrypoint for pistonmeta."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from pistonmeta.manifest_fetcher import ManifestFetcher
from pistonmeta.manifest_models import MappingSide, ReleaseKind
from pistonmeta.mapping_converter import MappingConverter
from pistonmeta.pistonmeta_config import PistonMetaConfig
from pistonmeta.pistonmeta_exceptions import PistonMetaException
from pistonmeta.pistonmeta_logger import PistonMetaLogger

app = typer.Typer(help="Version manifests and mapping conversion", rich_markup_mode=None)


class CliState:
    def __init__(self, config: PistonMetaConfig, logger: PistonMetaLogger):
        self.config = config
        self.logger = logger


@app.callback()
def cli_callback(
    ctx: typer.Context,
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            exists=True,
            dir_okay=False,
            help="TOML file with a [pistonmeta] table.",
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log progress to stderr.")] = False,
) -> None:
    """Load configuration shared by all commands."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        loaded = PistonMetaConfig.from_toml(config) if config else PistonMetaConfig()
    except PistonMetaException as exc:
        typer.echo(f"ERROR: {exc}")
        raise typer.Exit(code=1)
    ctx.obj = CliState(loaded, PistonMetaLogger())


@app.command("convert")
def convert_command(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(exists=True, dir_okay=False)],
    destination: Annotated[Path, typer.Argument(dir_okay=False)],
    stats: Annotated[bool, typer.Option("--stats", help="Print what was converted.")] = False,
) -> None:
    """Convert a ProGuard mapping file into descriptor mappings."""
    state: CliState = ctx.obj
    try:
        result = MappingConverter(state.logger).convert_file(source, destination)
    except UnicodeDecodeError as exc:
        typer.echo(f"ERROR: {source} is not UTF-8 text: {exc}")
        raise typer.Exit(code=1)
    except OSError as exc:
        typer.echo(f"ERROR: {type(exc).__name__}: {exc}")
        raise typer.Exit(code=1)
    if stats:
        typer.echo(
            f"classes={result.class_count} methods={result.method_count} "
            f"fields={result.field_count} skipped={result.skipped_lines} "
            f"duplicate_classes={result.duplicate_classes}"
        )


@app.command("versions")
def versions_command(
    ctx: typer.Context,
    kind: Annotated[Optional[ReleaseKind], typer.Option("--kind")] = None,
    limit: Annotated[Optional[int], typer.Option("--limit", min=1)] = None,
) -> None:
    """List published versions, newest first."""
    state: CliState = ctx.obj

    async def _fetch():
        async with ManifestFetcher(state.config, state.logger) as fetcher:
            return await fetcher.fetch_root_manifest()

    try:
        root = asyncio.run(_fetch())
    except PistonMetaException as exc:
        typer.echo(f"ERROR: {exc}")
        raise typer.Exit(code=1)

    versions = root.versions_of_kind(kind) if kind else root.versions
    for version in versions[:limit]:
        typer.echo(f"{version.id}\t{version.kind.value}\t{version.release_time.isoformat()}")


@app.command("mappings")
def mappings_command(
    ctx: typer.Context,
    version: Annotated[str, typer.Argument(help="Version id, e.g. 1.21.1")],
    destination: Annotated[Path, typer.Argument(dir_okay=False)],
    side: Annotated[MappingSide, typer.Option("--side")] = MappingSide.CLIENT,
    raw: Annotated[bool, typer.Option("--raw", help="Write the ProGuard mappings unconverted.")] = False,
) -> None:
    """Fetch the mappings of a version and write them converted."""
    state: CliState = ctx.obj

    async def _fetch():
        async with ManifestFetcher(state.config, state.logger) as fetcher:
            if raw:
                return await fetcher.fetch_mappings(version, side)
            return await fetcher.fetch_converted_mappings(version, side)

    try:
        text = asyncio.run(_fetch())
    except PistonMetaException as exc:
        typer.echo(f"ERROR: {exc}")
        raise typer.Exit(code=1)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with open(destination, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as exc:
        typer.echo(f"ERROR: {type(exc).__name__}: {exc}")
        raise typer.Exit(code=1)
    typer.echo(f"INFO: wrote {side.value} mappings of {version} to {destination}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
