from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import yaml

from ..errors import ConfigError


def _package_root() -> Path:
    # luna_builder/lib/manifests.py -> luna_builder
    return Path(__file__).resolve().parents[1]


def load_yaml_rel(rel_path: str) -> Dict[str, object]:
    """Load a YAML file bundled inside the package (manifests/...)."""
    p = _package_root() / rel_path.lstrip("/")
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Manifest must be a mapping/dict: {p}")
    return data


def load_package_manifest() -> Dict[str, List[str]]:
    """Return the default package lists keyed by list name."""
    raw = load_yaml_rel("manifests/packages.yaml")
    lists: Dict[str, List[str]] = {}
    for name, packages in raw.items():
        if not isinstance(packages, list):
            raise ConfigError(f"Package list {name!r} must be a list")
        lists[str(name)] = [str(pkg) for pkg in packages]
    return lists
