from __future__ import annotations

import fnmatch
import posixpath
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from ..build.models import ArtifactConfig, SyncRule
from ..documents import read_document
from ..errors import SyncMapError


SyncMap = dict[str, list[str]]


class SyncMapResolver(Protocol):
    def resolve(
        self,
        config: ArtifactConfig,
        insecure_registries: Iterable[str] = (),
    ) -> SyncMap: ...


class StaticSyncMapResolver:
    """Serves precomputed sync maps keyed by image name."""

    def __init__(self, maps: Mapping[str, Mapping[str, Iterable[str]]]) -> None:
        self._maps = {
            image: {local: list(remotes) for local, remotes in mapping.items()}
            for image, mapping in maps.items()
        }

    def resolve(
        self,
        config: ArtifactConfig,
        insecure_registries: Iterable[str] = (),
    ) -> SyncMap:
        mapping = self._maps.get(config.image)
        if mapping is None:
            raise SyncMapError(f"no sync map for image {config.image!r}")
        return {local: list(remotes) for local, remotes in mapping.items()}


def _matches(rel_path: str, pattern: str) -> bool:
    if fnmatch.fnmatchcase(rel_path, pattern):
        return True
    # `**/` also matches zero directories
    return "**/" in pattern and fnmatch.fnmatchcase(rel_path, pattern.replace("**/", ""))


def _destination(rel_path: str, rule: SyncRule) -> str:
    strip = rule.strip.strip("/")
    if strip and (rel_path == strip or rel_path.startswith(strip + "/")):
        rel_path = rel_path[len(strip) :].lstrip("/")
    return posixpath.join(rule.dest, rel_path)


class RuleSyncMapResolver:
    """Maps workspace files to container paths using an artifact's sync rules.

    Files are listed from the artifact workspace unless an explicit
    workspace-relative listing is given for the image.
    """

    def __init__(self, files: Mapping[str, Iterable[str]] | None = None) -> None:
        self._files = {image: list(paths) for image, paths in (files or {}).items()}

    def _list_files(self, config: ArtifactConfig) -> list[str]:
        if config.image in self._files:
            return sorted(p.replace("\\", "/") for p in self._files[config.image])
        root = Path(config.workspace)
        if not root.is_dir():
            raise SyncMapError(f"workspace is not a directory: {root}")
        return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())

    def resolve(
        self,
        config: ArtifactConfig,
        insecure_registries: Iterable[str] = (),
    ) -> SyncMap:
        if not config.sync:
            raise SyncMapError(f"no sync rules configured for image {config.image!r}")

        out: SyncMap = {}
        for rel_path in self._list_files(config):
            for rule in config.sync:
                if not _matches(rel_path, rule.src):
                    continue
                local = posixpath.join(config.workspace, rel_path)
                dests = out.setdefault(local, [])
                dest = _destination(rel_path, rule)
                if dest not in dests:
                    dests.append(dest)
        return out


def load_sync_map(path: str | Path) -> StaticSyncMapResolver:
    """Read `{image: {local: [remote, ...]}}` from a JSON or YAML file."""
    try:
        payload = read_document(path)
    except (OSError, ValueError) as exc:
        raise SyncMapError(f"cannot read sync map file {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise SyncMapError(f"sync map file must contain a mapping: {path}")
    maps: dict[str, dict[str, list[str]]] = {}
    for image, mapping in payload.items():
        if not isinstance(mapping, dict):
            raise SyncMapError(f"sync map for {image!r} must be a mapping")
        entry: dict[str, list[str]] = {}
        for local, remotes in mapping.items():
            if isinstance(remotes, str):
                remotes = [remotes]
            if not isinstance(remotes, list) or not all(isinstance(r, str) for r in remotes):
                raise SyncMapError(f"remote paths for {local!r} must be strings")
            entry[str(local)] = remotes
        maps[str(image)] = entry
    return StaticSyncMapResolver(maps)
