"""Data models for the documentation JSON of one package."""

from dataclasses import dataclass, field
from typing import Union

from api_surface.doc_element import DocElement

DocElements = tuple[DocElement, ...]


@dataclass(frozen=True)
class DocParam:
    """A parameter of a method or function."""

    name: str
    type: str = ""
    description: DocElements = ()
    is_optional: bool = False
    is_spread: bool = False


@dataclass(frozen=True)
class DocReturnValue:
    """The declared return value of a method or function."""

    type: str = ""
    description: DocElements = ()


@dataclass(frozen=True)
class DocProperty:
    """A property of a class or interface."""

    type: str = ""
    is_optional: bool = False
    is_read_only: bool = False
    is_static: bool = False
    summary: DocElements = ()
    remarks: DocElements = ()
    deprecated_message: DocElements = ()
    is_beta: bool = False
    kind: str = "property"


@dataclass(frozen=True)
class DocMethod:
    """A member function of a class or interface."""

    signature: str = ""
    access_modifier: str = ""
    is_optional: bool = False
    is_static: bool = False
    parameters: dict[str, DocParam] = field(default_factory=dict)
    return_value: DocReturnValue | None = None
    summary: DocElements = ()
    remarks: DocElements = ()
    deprecated_message: DocElements = ()
    is_beta: bool = False
    kind: str = "method"


DocMember = Union[DocProperty, DocMethod]


@dataclass(frozen=True)
class DocFunction:
    """A function exported by a package."""

    signature: str = ""
    parameters: dict[str, DocParam] = field(default_factory=dict)
    return_value: DocReturnValue | None = None
    summary: DocElements = ()
    remarks: DocElements = ()
    deprecated_message: DocElements = ()
    is_beta: bool = False
    kind: str = "function"


@dataclass(frozen=True)
class DocClass:
    """A class exported by a package."""

    members: dict[str, DocMember] = field(default_factory=dict)
    extends: str = ""
    implements: str = ""
    type_parameters: tuple[str, ...] = ()
    summary: DocElements = ()
    remarks: DocElements = ()
    deprecated_message: DocElements = ()
    is_beta: bool = False
    kind: str = "class"


@dataclass(frozen=True)
class DocInterface:
    """An interface exported by a package."""

    members: dict[str, DocMember] = field(default_factory=dict)
    extends: str = ""
    implements: str = ""
    type_parameters: tuple[str, ...] = ()
    summary: DocElements = ()
    remarks: DocElements = ()
    deprecated_message: DocElements = ()
    is_beta: bool = False
    kind: str = "interface"


@dataclass(frozen=True)
class DocEnumValue:
    """One value of an enum; enum values carry no beta flag."""

    value: str = ""
    summary: DocElements = ()
    remarks: DocElements = ()
    deprecated_message: DocElements = ()


@dataclass(frozen=True)
class DocEnum:
    """An enum exported by a package."""

    values: dict[str, DocEnumValue] = field(default_factory=dict)
    summary: DocElements = ()
    remarks: DocElements = ()
    deprecated_message: DocElements = ()
    is_beta: bool = False
    kind: str = "enum"


DocItem = Union[DocClass, DocInterface, DocEnum, DocFunction]


@dataclass(frozen=True)
class DocPackage:
    """The exported definitions of one package."""

    name: str
    exports: dict[str, DocItem] = field(default_factory=dict)
    summary: DocElements = ()
    remarks: DocElements = ()
    deprecated_message: DocElements = ()
    is_beta: bool = False
