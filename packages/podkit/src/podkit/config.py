from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_ANNOTATION_KEY = "debug.podkit.dev/config"


class DebugConfig(BaseModel):
    insecure_registries: list[str] = Field(default_factory=list)
    annotation_key: str = DEFAULT_ANNOTATION_KEY

    @field_validator("insecure_registries")
    @classmethod
    def _normalize_registries(cls, value: list[str]) -> list[str]:
        out: list[str] = []
        for v in value:
            host = str(v).strip()
            if host and host not in out:
                out.append(host)
        return out

    @field_validator("annotation_key")
    @classmethod
    def _normalize_annotation_key(cls, value: str) -> str:
        return str(value).strip() or DEFAULT_ANNOTATION_KEY
