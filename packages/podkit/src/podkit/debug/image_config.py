from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..build.models import Artifact
from ..documents import read_document
from ..errors import ImageConfigError
from ..sync.resolver import SyncMapResolver
from .app_roots import infer_app_roots

logger = logging.getLogger(__name__)


class ContainerConfig(BaseModel):
    """The part of an image's container config that debug transforms look at."""

    model_config = ConfigDict(populate_by_name=True)

    env: list[str] = Field(default_factory=list, validation_alias=AliasChoices("env", "Env"))
    entrypoint: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("entrypoint", "Entrypoint")
    )
    cmd: list[str] = Field(default_factory=list, validation_alias=AliasChoices("cmd", "Cmd"))
    labels: dict[str, str] = Field(
        default_factory=dict, validation_alias=AliasChoices("labels", "Labels")
    )
    working_dir: str = Field(
        default="", validation_alias=AliasChoices("working_dir", "workingDir", "WorkingDir")
    )

    @field_validator("env", "entrypoint", "cmd", mode="before")
    @classmethod
    def _null_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("labels", mode="before")
    @classmethod
    def _null_labels(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("working_dir", mode="before")
    @classmethod
    def _null_working_dir(cls, value: Any) -> Any:
        return "" if value is None else value


@dataclass(frozen=True)
class ImageConfiguration:
    artifact: str
    app_roots: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    entrypoint: list[str] = field(default_factory=list)
    arguments: list[str] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)
    working_dir: str = ""


class ImageConfigRetriever(Protocol):
    def config_file(self, tag: str) -> ContainerConfig: ...


class StaticImageConfigRetriever:
    """Serves container configs keyed by image tag."""

    def __init__(self, configs: Mapping[str, ContainerConfig]) -> None:
        self._configs = dict(configs)

    def config_file(self, tag: str) -> ContainerConfig:
        config = self._configs.get(tag)
        if config is None:
            raise ImageConfigError(f"no image config for {tag!r}")
        return config


def load_image_configs(path: str | Path) -> StaticImageConfigRetriever:
    """Read `{tag: {"Env": [...], "Entrypoint": [...], ...}}` from JSON or YAML."""
    try:
        payload = read_document(path)
    except (OSError, ValueError) as exc:
        raise ImageConfigError(f"cannot read image config file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ImageConfigError(f"image config file must contain a mapping: {path}")

    configs: dict[str, ContainerConfig] = {}
    for tag, raw in payload.items():
        # accept both a bare config and a full config file with a `config` key
        if isinstance(raw, dict) and isinstance(raw.get("config"), dict):
            raw = raw["config"]
        try:
            configs[str(tag)] = ContainerConfig.model_validate(raw or {})
        except ValidationError as exc:
            raise ImageConfigError(f"invalid image config for {tag!r}: {exc}") from exc
    return StaticImageConfigRetriever(configs)


def find_artifact(image: str, builds: Iterable[Artifact]) -> Artifact | None:
    for artifact in builds:
        if image == artifact.image_name or image == artifact.tag:
            logger.debug("found artifact for image %r", image)
            return artifact
    return None


def env_as_map(env: Iterable[str]) -> dict[str, str]:
    """Turn `NAME=value` strings into a mapping; a missing `=` means an empty value."""
    result: dict[str, str] = {}
    for pair in env:
        name, _, value = pair.partition("=")
        result[name] = value
    return result


def retrieve_image_configuration(
    artifact: Artifact,
    retriever: ImageConfigRetriever,
    resolver: SyncMapResolver,
    insecure_registries: Iterable[str] = (),
) -> ImageConfiguration:
    try:
        config = retriever.config_file(artifact.tag)
    except ImageConfigError:
        logger.debug("error retrieving image config for %s", artifact.tag)
        raise
    except Exception as exc:
        logger.debug("error retrieving image config for %s: %s", artifact.tag, exc)
        raise ImageConfigError(f"retrieving image config for {artifact.tag!r}") from exc

    app_roots = infer_app_roots(artifact, resolver, insecure_registries)
    logger.debug("retrieved image configuration for %s: %s", artifact.tag, config)
    return ImageConfiguration(
        artifact=artifact.image_name,
        app_roots=app_roots,
        env=env_as_map(config.env),
        entrypoint=list(config.entrypoint),
        arguments=list(config.cmd),
        labels=dict(config.labels),
        working_dir=config.working_dir,
    )
