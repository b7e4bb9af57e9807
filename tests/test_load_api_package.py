"""Tests for loading API item trees."""

import json
from pathlib import Path

import pytest

from api_surface.api_item import (
    ApiEnum,
    ApiEnumValue,
    ApiItemKind,
    ApiMember,
    ApiStructuredType,
)
from api_surface.load_api_package import api_item_from_json, load_api_package
from api_surface.surface_report import render_surface_report


def _write(tmp_path: Path, raw: dict) -> Path:
    f = tmp_path / "colors.items.json"
    f.write_text(json.dumps(raw), encoding="utf-8")
    return f


def test_load_enum_package(tmp_path: Path) -> None:
    """Verify enum values keep their value and the report renders."""
    f = _write(
        tmp_path,
        {
            "kind": "package",
            "members": {
                "Color": {
                    "kind": "enum",
                    "documentation": "colors",
                    "members": {"Green": {"value": 1}, "Red": {"value": 0}},
                }
            },
        },
    )
    package = load_api_package(f)
    assert package.name == "colors"
    color = package.members["Color"]
    assert isinstance(color, ApiEnum)
    assert color.members["Red"] == ApiEnumValue(name="Red", value="0")
    report = render_surface_report(package)
    assert "enum Color {\r\n  Red = 0,\r\n  Green = 1\r\n}" in report


def test_member_with_type_literal() -> None:
    """Verify camelCase flags and nested type literals."""
    item = api_item_from_json(
        {
            "kind": "class",
            "members": {
                "opts": {
                    "kind": "property",
                    "isReadOnly": True,
                    "accessModifier": "public",
                    "typeLiteral": {"members": {"a": {"kind": "property"}}},
                },
                "run": {
                    "kind": "method",
                    "parameters": [{"name": "x", "type": "number"}],
                    "type": "void",
                },
            },
        },
        "Widget",
    )
    assert isinstance(item, ApiStructuredType)
    assert item.name == "Widget"
    opts = item.members["opts"]
    assert isinstance(opts, ApiMember)
    assert opts.is_read_only
    assert opts.access_modifier == "public"
    assert opts.type_literal is not None
    assert opts.type_literal.kind == ApiItemKind.TYPE_LITERAL
    run = item.members["run"]
    assert isinstance(run, ApiMember)
    assert run.parameters[0].type == "number"
    assert run.type == "void"


def test_unknown_kind_rejected() -> None:
    """Verify an unknown kind is reported with its location."""
    with pytest.raises(ValueError, match="/Widget"):
        api_item_from_json({"kind": "struct"}, "Widget", "/Widget")


def test_root_must_be_package(tmp_path: Path) -> None:
    """Verify the file root must be a package."""
    f = _write(tmp_path, {"kind": "namespace", "name": "x"})
    with pytest.raises(ValueError, match="expected a package"):
        load_api_package(f)


def test_parameter_without_name_rejected() -> None:
    """Verify a nameless parameter is reported with its location."""
    with pytest.raises(ValueError, match="/run/parameters/0"):
        api_item_from_json(
            {"kind": "method", "parameters": [{"type": "number"}]}, "run", "/run"
        )


def test_non_object_item_rejected() -> None:
    """Verify a member that is not an object is reported with its location."""
    with pytest.raises(ValueError, match="/Widget/size"):
        api_item_from_json(
            {"kind": "class", "members": {"size": "number"}}, "Widget", "/Widget"
        )
