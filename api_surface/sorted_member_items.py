"""Deterministic ordering of the members of an API item container."""

from decimal import Decimal, InvalidOperation

from api_surface.api_item import ApiEnum, ApiItem


def member_sort_key(name: str) -> tuple[str, str]:
    """Sort key shared by the report and the page builder.

    Case-insensitive name first; the exact name breaks ties so that the order
    is total over distinct names.
    """
    return (name.lower(), name)


def enum_value_sort_key(
    name: str, value: str
) -> tuple[int, Decimal, str, tuple[str, str]]:
    """Order enum values by numeric constant, then by text, then by name."""
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        number = None
    if number is None or not number.is_finite():
        return (1, Decimal(0), value, member_sort_key(name))
    return (0, number, "", member_sort_key(name))


def sorted_member_items(container: ApiItem) -> list[ApiItem]:
    """Return the container's members in a reproducible order.

    The order never depends on the insertion order of ``members``.
    """
    members = getattr(container, "members", None) or {}
    if isinstance(container, ApiEnum):
        return sorted(
            members.values(), key=lambda v: enum_value_sort_key(v.name, v.value)
        )
    return [members[name] for name in sorted(members, key=member_sort_key)]
