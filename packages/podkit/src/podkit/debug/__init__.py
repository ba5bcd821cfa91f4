from .app_roots import infer_app_roots
from .image_config import (
    ContainerConfig,
    ImageConfigRetriever,
    ImageConfiguration,
    StaticImageConfigRetriever,
    env_as_map,
    find_artifact,
    load_image_configs,
    retrieve_image_configuration,
)
from .manifests import ManifestCodec, YamlManifestCodec, join_manifests, split_manifests
from .pipeline import apply_debugging_transforms
from .transforms import (
    AppRootsAnnotationTransform,
    ContainerTransform,
    available_transforms,
    get_transform,
    register_transform,
    transform_manifest,
)

__all__ = [
    "AppRootsAnnotationTransform",
    "ContainerConfig",
    "ContainerTransform",
    "ImageConfigRetriever",
    "ImageConfiguration",
    "ManifestCodec",
    "StaticImageConfigRetriever",
    "YamlManifestCodec",
    "apply_debugging_transforms",
    "available_transforms",
    "env_as_map",
    "find_artifact",
    "get_transform",
    "infer_app_roots",
    "join_manifests",
    "load_image_configs",
    "register_transform",
    "retrieve_image_configuration",
    "split_manifests",
    "transform_manifest",
]
