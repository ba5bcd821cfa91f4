from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any, Callable, Protocol

from ..errors import ImageConfigError
from .image_config import ImageConfiguration

logger = logging.getLogger(__name__)

ConfigurationRetriever = Callable[[str], ImageConfiguration]


class ContainerTransform(Protocol):
    """Describes, and may rewrite, one pod-spec container.

    `apply` receives the live container mapping from the decoded manifest,
    so a transform can rewrite fields such as `command` in place. Returning
    a record claims the container; returning None lets the next transform try.
    """

    transform_id: str

    def apply(
        self, container: dict[str, Any], config: ImageConfiguration
    ) -> dict[str, Any] | None: ...


class AppRootsAnnotationTransform:
    """Records where a container's application files live, when that is known."""

    transform_id = "app_roots.v1"

    def apply(
        self, container: dict[str, Any], config: ImageConfiguration
    ) -> dict[str, Any] | None:
        if not config.app_roots:
            return None
        record: dict[str, Any] = {
            "artifact": config.artifact,
            "appRoots": list(config.app_roots),
        }
        if config.working_dir:
            record["workingDir"] = config.working_dir
        return record


TransformFactory = Callable[[], ContainerTransform]

_TRANSFORM_FACTORIES: dict[str, TransformFactory] = {}
_TRANSFORM_ALIASES: dict[str, str] = {}


def register_transform(
    *,
    transform_id: str,
    factory: TransformFactory,
    aliases: tuple[str, ...] = (),
) -> None:
    key = transform_id.strip().lower()
    if not key:
        raise ValueError("transform_id cannot be empty")
    _TRANSFORM_FACTORIES[key] = factory
    for alias in aliases:
        alias_key = alias.strip().lower()
        if alias_key:
            _TRANSFORM_ALIASES[alias_key] = key


def available_transforms() -> tuple[str, ...]:
    return tuple(sorted(_TRANSFORM_FACTORIES))


def get_transform(transform_id: str) -> ContainerTransform:
    tid = transform_id.strip().lower()
    key = _TRANSFORM_ALIASES.get(tid, tid)
    factory = _TRANSFORM_FACTORIES.get(key)
    if factory is not None:
        return factory()
    raise KeyError(f"unknown debug transform: {transform_id}")


def default_transforms() -> list[ContainerTransform]:
    return [get_transform(tid) for tid in available_transforms()]


# path from the manifest root to the object that owns the pod spec
_POD_SPEC_OWNERS: dict[str, tuple[str, ...]] = {
    "Pod": (),
    "Deployment": ("spec", "template"),
    "StatefulSet": ("spec", "template"),
    "DaemonSet": ("spec", "template"),
    "ReplicaSet": ("spec", "template"),
    "ReplicationController": ("spec", "template"),
    "Job": ("spec", "template"),
    "CronJob": ("spec", "jobTemplate", "spec", "template"),
}


def pod_spec_owner(obj: dict[str, Any]) -> dict[str, Any] | None:
    """The object whose `spec` is a pod spec and whose `metadata` gets annotated."""
    path = _POD_SPEC_OWNERS.get(str(obj.get("kind", "")))
    if path is None:
        return None
    node: Any = obj
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    if not isinstance(node, dict) or not isinstance(node.get("spec"), dict):
        return None
    return node


def _annotations(owner: dict[str, Any]) -> dict[str, Any]:
    metadata = owner.get("metadata")
    if not isinstance(metadata, dict):
        metadata = {}
        owner["metadata"] = metadata
    annotations = metadata.get("annotations")
    if not isinstance(annotations, dict):
        annotations = {}
        metadata["annotations"] = annotations
    return annotations


def transform_manifest(
    obj: dict[str, Any],
    retriever: ConfigurationRetriever,
    transforms: Sequence[ContainerTransform],
    annotation_key: str,
) -> bool:
    """Apply the first matching transform to each container; True if anything changed."""
    owner = pod_spec_owner(obj)
    if owner is None:
        return False

    records: dict[str, dict[str, Any]] = {}
    for container in owner["spec"].get("containers") or []:
        if not isinstance(container, dict):
            continue
        name = container.get("name")
        image = container.get("image")
        if not name or not image:
            continue
        try:
            config = retriever(str(image))
        except ImageConfigError as exc:
            logger.debug("skipping container %s: %s", name, exc)
            continue
        for transform in transforms:
            record = transform.apply(container, config)
            if record is not None:
                records[str(name)] = record
                break

    if not records:
        return False
    _annotations(owner)[annotation_key] = json.dumps(
        records, sort_keys=True, separators=(",", ":")
    )
    return True


register_transform(
    transform_id=AppRootsAnnotationTransform.transform_id,
    factory=AppRootsAnnotationTransform,
    aliases=("app_roots",),
)
