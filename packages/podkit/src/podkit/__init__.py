"""podkit: container build, sync and debug helpers for Kubernetes dev loops."""

from .build.models import Artifact, ArtifactConfig
from .config import DebugConfig
from .debug.app_roots import infer_app_roots
from .debug.pipeline import apply_debugging_transforms
from .pathing import common_roots

__all__ = [
    "Artifact",
    "ArtifactConfig",
    "DebugConfig",
    "apply_debugging_transforms",
    "common_roots",
    "infer_app_roots",
]
