"""Canonical page addressing shared by every page and cross-reference."""

CONSTRUCTOR_MEMBER_NAME = "__constructor"


def unscoped_package_name(package_name: str) -> str:
    """Return everything after the last "/" of a scoped package name."""
    return package_name.split("/")[-1]


def page_id(
    package_name: str,
    export_name: str | None = None,
    member_name: str | None = None,
) -> str:
    """Build the lowercase dotted page id for a package, export or member.

    ``@scope/widgets``, ``Widget``, ``build`` -> ``widgets.widget.build``.
    The constructor marker maps to ``-ctor``.
    """
    result = unscoped_package_name(package_name)
    if export_name:
        result += "." + export_name
        if member_name == CONSTRUCTOR_MEMBER_NAME:
            result += ".-ctor"
        elif member_name:
            result += "." + member_name
    return result.lower()
