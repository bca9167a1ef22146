from __future__ import annotations

"""Top-level CLI for inspecting, resolving and loading mapping documents."""

import json
import logging
from pathlib import Path

import click
from tabulate import tabulate

from rmlIngest import __version__
from rmlIngest.config import IngestConfig, load_config
from rmlIngest.core.directives import base_uri_from_stream
from rmlIngest.core.formats import detect_format
from rmlIngest.core.language import is_valid_language_tag
from rmlIngest.core.resolver import resolve
from rmlIngest.core.scoped import open_stream, with_resource
from rmlIngest.core.search_roots import (
    ChainedSearchRoot,
    DirectorySearchRoot,
    PackageSearchRoot,
    SearchRoot,
)
from rmlIngest.core.uri import is_valid_uri
from rmlIngest.errors import RMLIngestError
from rmlIngest.loader import MappingLoader
from rmlIngest.utils.log_json import JsonLogger

search_root_option = click.option(
    "--search-root",
    "search_roots",
    multiple=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory searched for relative paths (repeatable).",
)
package_option = click.option(
    "--package",
    "packages",
    multiple=True,
    help="Python package whose resources are searched for relative paths (repeatable).",
)


def _search_root(search_roots: tuple[Path, ...], packages: tuple[str, ...]) -> SearchRoot | None:
    roots: list[SearchRoot] = []
    if search_roots:
        roots.append(DirectorySearchRoot(*search_roots))
    roots.extend(PackageSearchRoot(name) for name in packages)
    if not roots:
        return None
    if len(roots) == 1:
        return roots[0]
    return ChainedSearchRoot(*roots)


def _config(ctx: click.Context) -> IngestConfig:
    obj = ctx.ensure_object(dict)
    if "config" not in obj:
        obj["config"] = load_config()
    return obj["config"]


def _events(ctx: click.Context) -> JsonLogger:
    obj = ctx.ensure_object(dict)
    if "events" not in obj:
        cfg = _config(ctx)
        obj["events"] = JsonLogger(
            "cli",
            enabled=cfg.logging.json_events,
            max_details_bytes=cfg.logging.max_details_bytes,
        )
    return obj["events"].bind(command=ctx.info_name)


@click.group()
@click.version_option(__version__)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file (defaults to $RML_INGEST_CONFIG).",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None) -> None:
    """rmlIngest command line."""
    cfg = load_config(config_file)
    logging.basicConfig(
        level=cfg.logging.numeric_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)["config"] = cfg


@cli.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
def detect(ctx: click.Context, files: tuple[Path, ...]) -> None:
    """Show the serialization format and declared base URI of FILES."""
    rows = []
    for path in files:
        fmt = detect_format(path.name)
        try:
            base_uri = with_resource(open_stream(path), base_uri_from_stream)
        except (OSError, RMLIngestError) as exc:
            raise click.ClickException(f"{path}: {exc}")
        rows.append([str(path), fmt.value if fmt else "unknown", base_uri or "-"])
    click.echo(tabulate(rows, headers=["File", "Format", "Base URI"]))
    _events(ctx).info("detect", files=len(rows), status="ok")


@cli.command(name="resolve")
@click.argument("token")
@search_root_option
@package_option
@click.pass_context
def resolve_cmd(
    ctx: click.Context,
    token: str,
    search_roots: tuple[Path, ...],
    packages: tuple[str, ...],
) -> None:
    """Print the absolute location TOKEN resolves to."""
    try:
        location = resolve(token, _search_root(search_roots, packages))
    except RMLIngestError as exc:
        _events(ctx).error("resolve", token=token, error=str(exc), status="not_found")
        raise click.ClickException(str(exc))
    click.echo(str(location))
    _events(ctx).info("resolve", token=token, location=location, status="ok")


@cli.command(name="load")
@click.argument("path")
@search_root_option
@package_option
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the normalized mapping as JSON.")
@click.pass_context
def load_cmd(
    ctx: click.Context,
    path: str,
    search_roots: tuple[Path, ...],
    packages: tuple[str, ...],
    as_json: bool,
) -> None:
    """Load the mapping document at PATH and summarize its triples maps."""
    cfg = _config(ctx)
    loader = MappingLoader(
        search_root=_search_root(search_roots, packages),
        default_format=cfg.default_format,
    )
    try:
        mapping = loader.load(path)
    except RMLIngestError as exc:
        _events(ctx).error("load", path=path, error=str(exc), status="failed")
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(mapping.to_dict(), ensure_ascii=False, indent=2))
    else:
        click.echo(f"source: {mapping.source}")
        click.echo(f"format: {mapping.format.value}")
        click.echo(f"base: {mapping.base_uri or '-'}")
        rows = [
            [
                tm.iri,
                "joined" if tm.is_joined else "standard",
                tm.logical_source.source,
                len(tm.predicate_object_maps),
            ]
            for tm in mapping.triples_maps
        ]
        click.echo(tabulate(rows, headers=["Triples map", "Kind", "Source", "POMs"]))
    _events(ctx).info(
        "load",
        path=path,
        source=mapping.source,
        standard=len(mapping.standard_triples_maps),
        joined=len(mapping.joined_triples_maps),
        status="ok",
    )


@cli.command()
@click.argument("tags", nargs=-1, required=True)
def lang(tags: tuple[str, ...]) -> None:
    """Check that TAGS are well-formed BCP 47 language tags."""
    invalid = []
    for tag in tags:
        ok = is_valid_language_tag(tag)
        click.echo(f"{tag}\t{'valid' if ok else 'invalid'}")
        if not ok:
            invalid.append(tag)
    if invalid:
        raise click.ClickException(f"invalid language tags: {', '.join(invalid)}")


@cli.command()
@click.argument("values", nargs=-1, required=True)
def uri(values: tuple[str, ...]) -> None:
    """Check that VALUES are syntactically valid URLs."""
    invalid = []
    for value in values:
        ok = is_valid_uri(value)
        click.echo(f"{value}\t{'valid' if ok else 'invalid'}")
        if not ok:
            invalid.append(value)
    if invalid:
        raise click.ClickException(f"invalid URIs: {', '.join(invalid)}")


def main() -> None:  # pragma: no cover - CLI entrypoint
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
