from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class SyncRule(BaseModel):
    """Copy local files matching `src` into `dest`, dropping the `strip` prefix."""

    src: str
    dest: str
    strip: str = ""

    @field_validator("src", "dest")
    @classmethod
    def _require_non_empty(cls, value: str) -> str:
        v = str(value).strip()
        if not v:
            raise ValueError("sync rule src and dest cannot be empty")
        return v


class ArtifactConfig(BaseModel):
    image: str = ""
    workspace: str = "."
    sync: list[SyncRule] = Field(default_factory=list)


class Artifact(BaseModel):
    """A built image: its configured name, the tag it was pushed as, and its config."""

    model_config = ConfigDict(populate_by_name=True)

    image_name: str = Field(validation_alias=AliasChoices("image_name", "imageName"))
    tag: str
    config: ArtifactConfig = Field(default_factory=ArtifactConfig)

    @model_validator(mode="after")
    def _default_config_image(self) -> "Artifact":
        if not self.config.image:
            self.config.image = self.image_name
        return self


class BuildOutput(BaseModel):
    builds: list[Artifact] = Field(default_factory=list)
