"""Tests for deterministic member ordering."""

from api_surface.api_item import (
    ApiEnum,
    ApiEnumValue,
    ApiFunction,
    ApiPackage,
)
from api_surface.sorted_member_items import member_sort_key, sorted_member_items


def _package(names: list[str]) -> ApiPackage:
    return ApiPackage(name="pkg", members={n: ApiFunction(name=n) for n in names})


def test_order_independent_of_insertion() -> None:
    """Verify that insertion order does not affect the result."""
    a = [m.name for m in sorted_member_items(_package(["b", "Alpha", "alpha", "C"]))]
    b = [m.name for m in sorted_member_items(_package(["C", "alpha", "b", "Alpha"]))]
    assert a == b == ["Alpha", "alpha", "b", "C"]


def test_sort_is_idempotent() -> None:
    """Verify that sorting an already sorted list changes nothing."""
    first = [m.name for m in sorted_member_items(_package(["z", "Y", "x"]))]
    again = sorted(first, key=member_sort_key)
    assert again == first


def test_enum_values_order_by_value() -> None:
    """Verify numeric enum values order by constant, then the rest by text."""
    enum = ApiEnum(
        name="Level",
        members={
            "Other": ApiEnumValue("Other", value="x"),
            "High": ApiEnumValue("High", value="10"),
            "Low": ApiEnumValue("Low", value="2"),
            "Unset": ApiEnumValue("Unset"),
        },
    )
    assert [v.name for v in sorted_member_items(enum)] == [
        "Low",
        "High",
        "Unset",
        "Other",
    ]


def test_items_without_members() -> None:
    """Verify leaf items sort to an empty list."""
    assert sorted_member_items(ApiFunction(name="f")) == []
