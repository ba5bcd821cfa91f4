from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..build.models import Artifact
from ..config import DebugConfig
from ..errors import ImageConfigError, ManifestDecodeError, ManifestEncodeError
from ..sync.resolver import SyncMapResolver
from .image_config import (
    ImageConfigRetriever,
    ImageConfiguration,
    find_artifact,
    retrieve_image_configuration,
)
from .manifests import ManifestCodec, YamlManifestCodec
from .transforms import ContainerTransform, default_transforms, transform_manifest

logger = logging.getLogger(__name__)


def apply_debugging_transforms(
    manifests: Iterable[str],
    builds: Iterable[Artifact],
    retriever: ImageConfigRetriever,
    resolver: SyncMapResolver,
    config: DebugConfig | None = None,
    *,
    codec: ManifestCodec | None = None,
    transforms: Sequence[ContainerTransform] | None = None,
) -> list[str]:
    """Annotate manifests whose containers run one of the built images.

    Manifests that cannot be decoded, or that no transform touches, are
    returned verbatim and in their original position.
    """
    cfg = config or DebugConfig()
    manifest_codec = codec or YamlManifestCodec()
    active = list(transforms) if transforms is not None else default_transforms()
    artifacts = list(builds)

    def configuration_for(image: str) -> ImageConfiguration:
        artifact = find_artifact(image, artifacts)
        if artifact is None:
            raise ImageConfigError(f"no build artifact for {image!r}")
        return retrieve_image_configuration(
            artifact, retriever, resolver, cfg.insecure_registries
        )

    updated: list[str] = []
    for manifest in manifests:
        try:
            obj = manifest_codec.decode(manifest)
        except ManifestDecodeError as exc:
            logger.debug("unable to interpret manifest for debugging: %s", exc)
            updated.append(manifest)
            continue

        if transform_manifest(obj, configuration_for, active, cfg.annotation_key):
            try:
                manifest = manifest_codec.encode(obj)
            except ManifestEncodeError:
                raise
            except Exception as exc:
                raise ManifestEncodeError("marshalling yaml") from exc
            logger.debug("applied debugging transform:\n%s", manifest)
        updated.append(manifest)

    return updated
