from __future__ import annotations

from pathlib import Path

from ..documents import read_document
from .models import Artifact, BuildOutput


def load_builds(path: str | Path) -> list[Artifact]:
    """Read a build output file (`{"builds": [{"imageName": ..., "tag": ...}]}`)."""
    payload = read_document(path)
    if isinstance(payload, list):
        payload = {"builds": payload}
    if not isinstance(payload, dict):
        raise ValueError(f"build output must be a mapping or a list: {path}")
    return BuildOutput.model_validate(payload).builds
