"""Stable external API for podkit.

Callers outside this package should import from here rather than from the
pathing, sync, or debug internals.
"""

from __future__ import annotations

from .build import Artifact, ArtifactConfig, SyncRule, load_builds
from .config import DebugConfig
from .debug import (
    ImageConfiguration,
    apply_debugging_transforms,
    infer_app_roots,
    retrieve_image_configuration,
)
from .errors import (
    ImageConfigError,
    ManifestDecodeError,
    ManifestEncodeError,
    PodkitError,
    SyncMapError,
)
from .pathing import common_roots
from .sync import SyncMapResolver

__all__ = [
    "Artifact",
    "ArtifactConfig",
    "DebugConfig",
    "ImageConfigError",
    "ImageConfiguration",
    "ManifestDecodeError",
    "ManifestEncodeError",
    "PodkitError",
    "SyncMapError",
    "SyncMapResolver",
    "SyncRule",
    "apply_debugging_transforms",
    "common_roots",
    "infer_app_roots",
    "load_builds",
    "retrieve_image_configuration",
]
