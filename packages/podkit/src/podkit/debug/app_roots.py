from __future__ import annotations

import logging
from collections.abc import Iterable

from ..build.models import Artifact
from ..pathing import common_roots
from ..sync.resolver import SyncMapResolver

logger = logging.getLogger(__name__)

APP_ROOT_MIN_DEPTH = 1
CONTAINER_OS = "linux"


def infer_app_roots(
    artifact: Artifact,
    resolver: SyncMapResolver,
    insecure_registries: Iterable[str] = (),
) -> list[str]:
    """Guess the in-container application directories of a built artifact.

    The guess is the set of common roots of every synced destination path.
    An empty list means no hint is available; it is never an error.
    """
    # TODO: ask the builder for its app dir when it has a fixed one
    # (jib uses /app, buildpacks use $CNB_APP_DIR) before falling back to sync.
    try:
        sync_map = resolver.resolve(artifact.config, insecure_registries)
    except Exception as exc:
        logger.warning("unable to obtain sync map for %s: %s", artifact.image_name, exc)
        return []

    remote_files = [remote for remotes in sync_map.values() for remote in remotes]
    return common_roots(remote_files, APP_ROOT_MIN_DEPTH, CONTAINER_OS)
