"""Data models for the API item tree consumed by the surface report."""

from dataclasses import dataclass, field
from typing import Union


class ApiItemKind:
    """Discriminant values for the ``kind`` field of every API item."""

    PACKAGE = "package"
    NAMESPACE = "namespace"
    CLASS = "class"
    INTERFACE = "interface"
    TYPE_LITERAL = "typeLiteral"
    ENUM = "enum"
    ENUM_VALUE = "enumValue"
    FUNCTION = "function"
    MODULE_VARIABLE = "moduleVariable"
    PROPERTY = "property"
    METHOD = "method"
    PARAMETER = "parameter"


STRUCTURED_TYPE_KINDS = frozenset(
    {ApiItemKind.CLASS, ApiItemKind.INTERFACE, ApiItemKind.TYPE_LITERAL}
)
MEMBER_KINDS = frozenset({ApiItemKind.PROPERTY, ApiItemKind.METHOD})


@dataclass(frozen=True)
class ApiParameter:
    """A parameter of a method or function signature."""

    name: str
    type: str = ""
    is_optional: bool = False
    is_spread: bool = False
    documentation: str = ""
    kind: str = ApiItemKind.PARAMETER


@dataclass(frozen=True)
class ApiEnumValue:
    """A single value of an enum.

    ``value`` is the constant the discovery step evaluated for the member and
    is used to order values; ``declaration`` is the text shown in the report.
    """

    name: str
    value: str = ""
    declaration: str = ""
    documentation: str = ""
    kind: str = ApiItemKind.ENUM_VALUE


@dataclass(frozen=True)
class ApiStructuredType:
    """A class, interface or anonymous type literal."""

    name: str
    kind: str = ApiItemKind.CLASS
    members: dict[str, "ApiItem"] = field(default_factory=dict)
    declaration: str = ""
    extends: str = ""
    implements: str = ""
    documentation: str = ""


@dataclass(frozen=True)
class ApiMember:
    """A property or method owned by a structured type."""

    name: str
    kind: str = ApiItemKind.METHOD
    access_modifier: str = ""
    is_static: bool = False
    is_optional: bool = False
    is_read_only: bool = False
    type: str = ""  # property type or method return type
    parameters: tuple[ApiParameter, ...] = ()
    type_literal: ApiStructuredType | None = None
    declaration: str = ""
    documentation: str = ""


@dataclass(frozen=True)
class ApiFunction:
    """A function exported from a package or namespace."""

    name: str
    parameters: tuple[ApiParameter, ...] = ()
    return_type: str = ""
    declaration: str = ""
    documentation: str = ""
    kind: str = ApiItemKind.FUNCTION


@dataclass(frozen=True)
class ApiModuleVariable:
    """A constant exported from a namespace."""

    name: str
    type: str = ""
    value: str = ""
    documentation: str = ""
    kind: str = ApiItemKind.MODULE_VARIABLE


@dataclass(frozen=True)
class ApiEnum:
    """An enum and its values."""

    name: str
    members: dict[str, ApiEnumValue] = field(default_factory=dict)
    documentation: str = ""
    kind: str = ApiItemKind.ENUM


@dataclass(frozen=True)
class ApiNamespace:
    """A namespace; reported under the label ``module``."""

    name: str
    members: dict[str, "ApiItem"] = field(default_factory=dict)
    documentation: str = ""
    kind: str = ApiItemKind.NAMESPACE


@dataclass(frozen=True)
class ApiPackage:
    """The root of an API item tree."""

    name: str
    members: dict[str, "ApiItem"] = field(default_factory=dict)
    documentation: str = ""
    kind: str = ApiItemKind.PACKAGE


ApiItem = Union[
    ApiPackage,
    ApiNamespace,
    ApiStructuredType,
    ApiEnum,
    ApiEnumValue,
    ApiFunction,
    ApiModuleVariable,
    ApiMember,
    ApiParameter,
]
