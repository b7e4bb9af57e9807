"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from api_surface.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "report": {
        "indent": "  ",
        "file_suffix": ".api.ts",
    },
    "pages": {
        "file_extension": ".yaml",
        "line_width": 120,
        "delete_stale": True,
        "check_links": False,
    },
}


def _check_known_keys(
    user_config: dict[str, Any], defaults: dict[str, Any], prefix: str = ""
) -> None:
    for key, value in user_config.items():
        dotted = f"{prefix}{key}"
        if key not in defaults:
            msg = f"Unknown configuration key: {dotted}"
            raise ValueError(msg)
        if isinstance(value, dict) and isinstance(defaults[key], dict):
            _check_known_keys(value, defaults[key], f"{dotted}.")


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            _check_known_keys(user_config, config)
            config = deep_merge(config, user_config)
    return config
