from __future__ import annotations

import re
from typing import Any, Protocol

import yaml

from ..errors import ManifestDecodeError, ManifestEncodeError

_DOCUMENT_SEPARATOR = re.compile(r"^---[ \t]*(?:#.*)?$", re.MULTILINE)


class ManifestCodec(Protocol):
    def decode(self, manifest: str) -> dict[str, Any]: ...

    def encode(self, obj: dict[str, Any]) -> str: ...


class YamlManifestCodec:
    def decode(self, manifest: str) -> dict[str, Any]:
        try:
            obj = yaml.safe_load(manifest)
        except yaml.YAMLError as exc:
            raise ManifestDecodeError(f"invalid manifest yaml: {exc}") from exc
        if not isinstance(obj, dict):
            raise ManifestDecodeError("manifest is not a mapping")
        if not obj.get("kind"):
            raise ManifestDecodeError("manifest has no kind")
        return obj

    def encode(self, obj: dict[str, Any]) -> str:
        try:
            return yaml.safe_dump(obj, sort_keys=False, default_flow_style=False)
        except yaml.YAMLError as exc:
            raise ManifestEncodeError(f"cannot encode manifest: {exc}") from exc


def split_manifests(text: str) -> list[str]:
    """Split a multi-document YAML stream, dropping empty documents."""
    return [doc.strip("\n") + "\n" for doc in _DOCUMENT_SEPARATOR.split(text) if doc.strip()]


def join_manifests(manifests: list[str]) -> str:
    return "---\n".join(m if m.endswith("\n") else m + "\n" for m in manifests)
