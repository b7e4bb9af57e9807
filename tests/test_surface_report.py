"""Tests for the surface report engine."""

import pytest

from api_surface.api_item import (
    ApiEnum,
    ApiEnumValue,
    ApiFunction,
    ApiItemKind,
    ApiMember,
    ApiModuleVariable,
    ApiNamespace,
    ApiPackage,
    ApiParameter,
    ApiStructuredType,
)
from api_surface.errors import UnsupportedKindError
from api_surface.surface_report import SurfaceReportGenerator, render_surface_report


def _lines(*lines: str) -> str:
    return "\r\n".join(lines)


def _widget_package(member_order: list[str]) -> ApiPackage:
    members = {
        "build": ApiMember(
            name="build",
            kind=ApiItemKind.METHOD,
            access_modifier="public",
            is_static=True,
            parameters=(ApiParameter("count", "number"),),
            type="Widget",
            documentation="Builds one.\nFast.",
        ),
        "size": ApiMember(
            name="size", kind=ApiItemKind.PROPERTY, is_read_only=True, type="number"
        ),
    }
    return ApiPackage(
        name="@scope/widgets",
        members={
            "Widget": ApiStructuredType(
                name="Widget",
                kind=ApiItemKind.CLASS,
                documentation="A widget.",
                members={name: members[name] for name in member_order},
            )
        },
    )


def test_enum_scenario() -> None:
    """Verify enum values are comma separated with no trailing comma."""
    package = ApiPackage(
        name="colors",
        members={
            "Color": ApiEnum(
                name="Color",
                members={
                    "Green": ApiEnumValue("Green", value="1", declaration="Green"),
                    "Red": ApiEnumValue("Red", value="0", declaration="Red"),
                },
            )
        },
    )
    assert render_surface_report(package) == _lines(
        "// colors",
        "",
        "enum Color {",
        "  Red,",
        "  Green",
        "}",
        "",
        "",
    )


def test_class_with_jsdoc() -> None:
    """Verify class layout, member sorting and jsdoc blocks."""
    assert render_surface_report(_widget_package(["size", "build"])) == _lines(
        "// @scope/widgets",
        "",
        "",
        "/**",
        " * A widget.",
        " */",
        "class Widget {",
        "",
        "  /**",
        "   * Builds one.",
        "   * Fast.",
        "   */",
        "  public static build(count: number): Widget;",
        "  readonly size: number;",
        "}",
        "",
        "",
    )


def test_render_is_deterministic() -> None:
    """Verify repeated renders and reordered inputs give identical bytes."""
    first = render_surface_report(_widget_package(["build", "size"]))
    second = render_surface_report(_widget_package(["build", "size"]))
    reordered = render_surface_report(_widget_package(["size", "build"]))
    assert first == second == reordered


def test_type_literal_member() -> None:
    """Verify an inline type literal renders after its member without jsdoc."""
    literal = ApiStructuredType(
        name="",
        kind=ApiItemKind.TYPE_LITERAL,
        documentation="ignored",
        members={"a": ApiMember(name="a", kind=ApiItemKind.PROPERTY, type="string")},
    )
    package = ApiPackage(
        name="pkg",
        members={
            "Opts": ApiStructuredType(
                name="Opts",
                kind=ApiItemKind.INTERFACE,
                members={
                    "options": ApiMember(
                        name="options", kind=ApiItemKind.PROPERTY, type_literal=literal
                    )
                },
            )
        },
    )
    assert render_surface_report(package) == _lines(
        "// pkg",
        "",
        "interface Opts {",
        "  options: {",
        "    a: string;",
        "  }",
        "}",
        "",
        "",
    )


def test_namespace_rendered_as_module() -> None:
    """Verify namespaces use the "module" label and double spacing."""
    package = ApiPackage(
        name="pkg",
        documentation="Line one\nLine two",
        members={
            "util": ApiNamespace(
                name="util",
                members={
                    "PI": ApiModuleVariable(name="PI", type="number", value="3.14"),
                    "helper": ApiFunction(name="helper", return_type="void"),
                },
            )
        },
    )
    assert render_surface_report(package) == _lines(
        "// pkg",
        "",
        "// Line one",
        "// Line two",
        "",
        "module util {",
        "  function helper(): void;",
        "",
        "  PI: number = 3.14;",
        "",
        "}",
        "",
        "",
    )


def test_undocumented_items_have_no_jsdoc() -> None:
    """Verify that no empty jsdoc block is written."""
    package = ApiPackage(name="pkg", members={"f": ApiFunction(name="f")})
    report = render_surface_report(package)
    assert "/**" not in report


def test_parameter_visit_not_implemented() -> None:
    """Verify that parameters cannot be visited on their own."""
    with pytest.raises(NotImplementedError):
        SurfaceReportGenerator().visit(ApiParameter("count", "number"))


def test_unknown_kind_fails() -> None:
    """Verify that an item kind without a handler is fatal."""
    package = ApiPackage(
        name="pkg", members={"S": ApiStructuredType(name="S", kind="struct")}
    )
    with pytest.raises(UnsupportedKindError) as exc:
        render_surface_report(package)
    assert exc.value.kind == "struct"


def test_custom_indent() -> None:
    """Verify the indent unit is configurable."""
    package = ApiPackage(
        name="pkg",
        members={
            "E": ApiEnum(name="E", members={"A": ApiEnumValue("A", value="0")})
        },
    )
    assert "\r\n\tA = 0\r\n" in render_surface_report(package, indent="\t")


def test_unnamed_package_has_no_empty_comment() -> None:
    """Verify an empty package name writes no bare comment marker."""
    package = ApiPackage(
        name="",
        members={"A": ApiStructuredType(name="A", kind=ApiItemKind.CLASS)},
    )
    assert render_surface_report(package) == _lines("", "class A {", "}", "", "")
