from __future__ import annotations

import logging

from podkit.build.models import Artifact, ArtifactConfig
from podkit.debug.app_roots import infer_app_roots
from podkit.errors import SyncMapError
from podkit.sync.resolver import StaticSyncMapResolver


class _FailingResolver:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc
        self.calls = 0

    def resolve(self, config: ArtifactConfig, insecure_registries=()) -> dict[str, list[str]]:
        self.calls += 1
        raise self.exc


class _RecordingResolver:
    def __init__(self, mapping: dict[str, list[str]]) -> None:
        self.mapping = mapping
        self.seen: list[tuple[str, tuple[str, ...]]] = []

    def resolve(self, config: ArtifactConfig, insecure_registries=()) -> dict[str, list[str]]:
        self.seen.append((config.image, tuple(insecure_registries)))
        return self.mapping


def _artifact() -> Artifact:
    return Artifact(image_name="web", tag="registry.local/web:abc123")


def test_infer_app_roots_collapses_synced_destinations() -> None:
    resolver = StaticSyncMapResolver(
        {
            "web": {
                "src/main.py": ["/app/main.py"],
                "src/lib/util.py": ["/app/lib/util.py"],
                "static/index.html": ["/srv/www/index.html", "/app/static/index.html"],
            }
        }
    )
    assert infer_app_roots(_artifact(), resolver) == ["/app", "/srv/www/index.html"]


def test_infer_app_roots_passes_config_and_registries_to_resolver() -> None:
    resolver = _RecordingResolver({"a.py": ["/workspace/a.py"], "b.py": ["/workspace/b.py"]})
    roots = infer_app_roots(_artifact(), resolver, ["registry.local"])
    assert roots == ["/workspace"]
    assert resolver.seen == [("web", ("registry.local",))]


def test_infer_app_roots_treats_destinations_as_linux_paths() -> None:
    resolver = _RecordingResolver({"a": [r"c:\app\a"], "b": [r"c:\app\b"]})
    # backslashes are not separators inside a linux container
    assert infer_app_roots(_artifact(), resolver) == [r"c:\app\a", r"c:\app\b"]


def test_infer_app_roots_with_empty_sync_map_has_no_hint() -> None:
    assert infer_app_roots(_artifact(), _RecordingResolver({})) == []


def test_infer_app_roots_requires_depth_one() -> None:
    resolver = _RecordingResolver({"a": ["/a"], "b": ["/"]})
    assert infer_app_roots(_artifact(), resolver) == []


def test_infer_app_roots_logs_and_degrades_on_resolver_failure(caplog) -> None:
    resolver = _FailingResolver(SyncMapError("registry unreachable"))
    with caplog.at_level(logging.WARNING, logger="podkit.debug.app_roots"):
        roots = infer_app_roots(_artifact(), resolver)

    assert roots == []
    assert resolver.calls == 1
    assert "unable to obtain sync map for web" in caplog.text
    assert "registry unreachable" in caplog.text


def test_infer_app_roots_survives_unexpected_resolver_errors() -> None:
    assert infer_app_roots(_artifact(), _FailingResolver(OSError("boom"))) == []


def test_static_resolver_rejects_unknown_images() -> None:
    resolver = StaticSyncMapResolver({})
    artifact = Artifact(image_name="api", tag="api:1", config=ArtifactConfig(image="api"))
    assert infer_app_roots(artifact, resolver) == []
