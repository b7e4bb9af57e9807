"""Tests for page serialization and validation."""

import pytest

from api_surface.build_pages import build_pages
from api_surface.doc_item import DocClass, DocMethod, DocPackage, DocParam
from api_surface.errors import IncompletePageError
from api_surface.page_element import TextPageElement
from api_surface.page_records import MethodPage, PageHeader, PropertyPage
from api_surface.page_to_dict import camel_case, page_to_dict
from api_surface.validate_no_undefined_members import validate_no_undefined_members


def _header(pid: str = "pkg.c.m") -> PageHeader:
    return PageHeader(
        page_id=pid,
        title="C.m method",
        package="pkg",
        deprecated_message="",
        beta_warning="",
        summary=[TextPageElement("Does m.")],
        remarks=[],
    )


def test_camel_case() -> None:
    """Verify field name conversion."""
    assert camel_case("page_id") == "pageId"
    assert camel_case("is_deprecated") == "isDeprecated"
    assert camel_case("linked_page_id") == "linkedPageId"
    assert camel_case("title") == "title"


def test_method_page_layout() -> None:
    """Verify key order, flattened header and nested rows."""
    package = DocPackage(
        name="pkg",
        exports={
            "C": DocClass(
                members={
                    "m": DocMethod(
                        is_static=True,
                        parameters={"x": DocParam(name="x", is_spread=True)},
                    )
                }
            )
        },
    )
    value = page_to_dict(build_pages(package).method_pages[0])
    assert list(value) == [
        "pageSchema",
        "pageId",
        "title",
        "package",
        "deprecatedMessage",
        "betaWarning",
        "summary",
        "remarks",
        "fullSignature",
        "returnType",
        "returnDescription",
        "parametersTable",
        "accessModifier",
        "isStatic",
    ]
    assert value["pageSchema"] == "method"
    assert value["pageId"] == "pkg.c.m"
    assert value["fullSignature"] == [{"elementKind": "text", "text": "m(...x)"}]
    assert value["parametersTable"] == [
        {
            "parameterColumn": [{"elementKind": "text", "text": "x"}],
            "typeColumn": [{"elementKind": "text", "text": "x"}],
            "descriptionColumn": [{"elementKind": "text", "text": "x"}],
            "isOptional": False,
            "isSpread": True,
        }
    ]
    assert value["isStatic"] is True


def test_code_link_serialization() -> None:
    """Verify code links carry their kind and target page id."""
    pages = build_pages(DocPackage(name="pkg", exports={"C": DocClass()}))
    value = page_to_dict(pages.package_page)
    assert value["classesTable"][0]["classColumn"] == [
        {"elementKind": "codeLink", "linkedPageId": "pkg.c", "text": "C"}
    ]


def test_property_page_schema() -> None:
    """Verify the property page shape."""
    page = PropertyPage(
        header=_header("pkg.c.p"),
        property_type=[TextPageElement("string")],
        access_modifier="",
        is_static=False,
    )
    value = page_to_dict(page)
    assert value["pageSchema"] == "property"
    assert value["propertyType"] == [{"elementKind": "text", "text": "string"}]
    validate_no_undefined_members(value)


def test_validate_reports_path() -> None:
    """Verify the first unset field is named by its path."""
    with pytest.raises(IncompletePageError) as exc:
        validate_no_undefined_members({"a": [{"b": 1}, {"c": None}]})
    assert exc.value.path == "/a/1/c"


def test_incomplete_page_detected() -> None:
    """Verify an unset field on a page record fails validation."""
    page = MethodPage(
        header=_header(),
        full_signature=[],
        return_type=[],
        return_description=[],
        parameters_table=[],
        access_modifier=None,  # type: ignore[arg-type]
        is_static=False,
    )
    with pytest.raises(IncompletePageError) as exc:
        validate_no_undefined_members(page_to_dict(page))
    assert exc.value.path == "/accessModifier"


def test_falsy_values_are_valid() -> None:
    """Verify empty strings, lists and False are not treated as unset."""
    validate_no_undefined_members({"a": "", "b": [], "c": False, "d": 0})
