from .io import load_builds
from .models import Artifact, ArtifactConfig, BuildOutput, SyncRule

__all__ = [
    "Artifact",
    "ArtifactConfig",
    "BuildOutput",
    "SyncRule",
    "load_builds",
]
