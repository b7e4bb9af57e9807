"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from api_surface.deep_merge import deep_merge
from api_surface.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = deep_merge(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced."""
    merged = deep_merge({"arr": [1, 2]}, {"arr": [3, 4]})
    assert merged == {"arr": [3, 4]}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["report"]["indent"] == "  "
    assert config["pages"]["file_extension"] == ".yaml"
    assert config["pages"]["delete_stale"] is True


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "nope.yml")) == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {"pages": {"line_width": 80}, "report": {"indent": "\t"}}
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["pages"]["line_width"] == 80  # noqa: PLR2004
    assert loaded["pages"]["file_extension"] == ".yaml"  # Default
    assert loaded["report"]["indent"] == "\t"


def test_load_config_does_not_mutate_defaults() -> None:
    """Verify callers cannot change the defaults through a loaded config."""
    config = load_config(None)
    config["pages"]["delete_stale"] = False
    assert DEFAULT_CONFIG["pages"]["delete_stale"] is True


def test_load_config_rejects_unknown_key(tmp_path: Path) -> None:
    """Verify a misspelled key is reported with its dotted path."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(yaml.dump({"pages": {"line_widht": 80}}))
    with pytest.raises(ValueError, match=r"pages\.line_widht"):
        load_config(str(config_file))
