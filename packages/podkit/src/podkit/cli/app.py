from __future__ import annotations

import json
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from ..build.io import load_builds
from ..build.models import Artifact
from ..config import DEFAULT_ANNOTATION_KEY, DebugConfig
from ..debug.image_config import StaticImageConfigRetriever, load_image_configs
from ..debug.manifests import join_manifests, split_manifests
from ..debug.pipeline import apply_debugging_transforms
from ..errors import PodkitError
from ..log import configure_logging
from ..pathing import common_roots
from ..sync.resolver import RuleSyncMapResolver, SyncMapResolver, load_sync_map


app = typer.Typer(add_completion=False, pretty_exceptions_show_locals=False)


def _require_file(value: str, *, param: str) -> Path:
    path = Path(value)
    if not path.is_file():
        raise typer.BadParameter(f"{param} path does not exist: {path}")
    return path


def _read_manifests(value: str) -> str:
    path = _require_file(value, param="--manifests")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"cannot read manifests {path}: {exc}") from exc


def _load_builds(value: str) -> list[Artifact]:
    path = _require_file(value, param="--builds")
    try:
        return load_builds(path)
    except (OSError, ValueError, ValidationError) as exc:
        raise typer.BadParameter(f"invalid build output {path}: {exc}") from exc


def _load_image_configs(value: str) -> StaticImageConfigRetriever:
    path = _require_file(value, param="--image-configs")
    try:
        return load_image_configs(path)
    except PodkitError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_resolver(value: str | None) -> SyncMapResolver:
    if value is None:
        return RuleSyncMapResolver()
    path = _require_file(value, param="--sync-map")
    try:
        return load_sync_map(path)
    except PodkitError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Build and debugging helpers for containerized apps."""
    configure_logging(verbose)


@app.command()
def roots(
    paths: list[str] = typer.Argument(..., help="Paths to group"),
    min_depth: int = typer.Option(1, min=0, help="Minimum components in each root"),
    os_name: str = typer.Option("linux", "--os", help="Path rules: windows | linux"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON list"),
):
    """Print the common roots of PATHS, one per line."""
    found = common_roots(paths, min_depth, os_name.strip().lower())
    if as_json:
        typer.echo(json.dumps(found))
        return
    for root in found:
        typer.echo(root)


@app.command()
def debug(
    manifests: str = typer.Option(..., help="Multi-document YAML manifest file"),
    builds: str = typer.Option(..., help="Build output file with the built artifacts"),
    image_configs: str = typer.Option(..., help="Image configs keyed by tag (JSON or YAML)"),
    sync_map: str | None = typer.Option(
        None, help="Sync maps keyed by image; defaults to each artifact's sync rules"
    ),
    insecure_registry: list[str] = typer.Option(
        [], help="Registry that may be reached over plain HTTP"
    ),
    annotation_key: str = typer.Option(
        DEFAULT_ANNOTATION_KEY, help="Annotation that receives the debug records"
    ),
):
    """Write the manifests to stdout with debugging annotations applied."""
    manifest_text = _read_manifests(manifests)
    artifacts = _load_builds(builds)
    retriever = _load_image_configs(image_configs)
    resolver = _load_resolver(sync_map)
    cfg = DebugConfig(insecure_registries=insecure_registry, annotation_key=annotation_key)

    docs = split_manifests(manifest_text)
    try:
        updated = apply_debugging_transforms(docs, artifacts, retriever, resolver, cfg)
    except PodkitError as exc:
        print(f"[bold red]error[/bold red] {escape(str(exc))}", file=sys.stderr)
        raise typer.Exit(code=1) from exc
    typer.echo(join_manifests(updated), nl=False)
