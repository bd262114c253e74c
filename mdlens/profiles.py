"""YAML-based per-directory profiles."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from mdlens.extractors.paths import normalize_path


def _covers(prefix: str, target: str) -> bool:
    """True when directory *prefix* is *target* or one of its parent folders."""
    return target == prefix or target.startswith(prefix + "/")


def _path_overrides(entries: Any, file_path: str) -> dict[str, Any]:
    """Return the ``paths`` entry with the longest prefix covering *file_path*."""
    if not isinstance(entries, dict):
        return {}
    target = normalize_path(file_path)
    candidates = [
        (len(prefix), overrides)
        for prefix, overrides in (
            (normalize_path(key).rstrip("/"), value)
            for key, value in entries.items()
            if isinstance(key, str) and isinstance(value, dict)
        )
        if _covers(prefix, target)
    ]
    if not candidates:
        return {}
    return max(candidates, key=lambda candidate: candidate[0])[1]


def load_profile(path: str | Path, file_path: str) -> dict[str, Any]:
    """Load YAML profile and return merged settings for the given markdown file.

    The profile has a ``default`` mapping and a ``paths`` mapping keyed by
    directory prefix; the longest prefix that contains *file_path* wins::

        default:
          words_per_minute: 200
        paths:
          docs/reference:
            words_per_minute: 120
            max_heading_level: 3
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        return {}

    default = data.get("default")
    merged: dict[str, Any] = dict(default) if isinstance(default, dict) else {}
    merged.update(_path_overrides(data.get("paths"), file_path))
    return merged
