from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


def read_document(path: str | Path) -> Any:
    """Load a JSON or YAML file; the suffix decides which parser is used.

    Parse failures of either format surface as `ValueError`.
    """
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    if p.suffix.lower() == ".json":
        return json.loads(text)
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML in {p}: {exc}") from exc
