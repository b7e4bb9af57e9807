"""Table row shapes used by the documentation page schemas."""

from dataclasses import dataclass

from api_surface.page_element import PageElement


@dataclass(frozen=True)
class ClassesRow:
    """A class listed on a package page."""

    class_column: list[PageElement]
    description_column: list[PageElement]

    is_deprecated: bool
    is_beta: bool


@dataclass(frozen=True)
class InterfacesRow:
    """An interface listed on a package page."""

    interface_column: list[PageElement]
    description_column: list[PageElement]

    is_deprecated: bool
    is_beta: bool


@dataclass(frozen=True)
class EnumsRow:
    """An enum listed on a package page."""

    enum_column: list[PageElement]
    description_column: list[PageElement]

    is_deprecated: bool
    is_beta: bool


@dataclass(frozen=True)
class FunctionsRow:
    """A function listed on a package page."""

    function_column: list[PageElement]
    returns_column: list[PageElement]
    description_column: list[PageElement]

    is_deprecated: bool
    is_beta: bool


@dataclass(frozen=True)
class MethodsRow:
    """A member function listed on a class or interface page."""

    method_column: list[PageElement]
    access_modifier_column: list[PageElement]
    returns_column: list[PageElement]
    description_column: list[PageElement]

    is_deprecated: bool
    is_beta: bool
    is_static: bool


@dataclass(frozen=True)
class PropertiesRow:
    """A property listed on a class or interface page."""

    property_column: list[PageElement]
    access_modifier_column: list[PageElement]
    type_column: list[PageElement]
    description_column: list[PageElement]

    is_deprecated: bool
    is_beta: bool
    is_read_only: bool
    is_static: bool


@dataclass(frozen=True)
class EnumMembersRow:
    """A value listed on an enum page."""

    member_column: list[PageElement]
    value_column: list[PageElement]
    description_column: list[PageElement]

    is_deprecated: bool
    is_beta: bool


@dataclass(frozen=True)
class ParametersRow:
    """A parameter of a method or function."""

    parameter_column: list[PageElement]
    type_column: list[PageElement]
    description_column: list[PageElement]

    is_optional: bool
    is_spread: bool
