"""Page record schemas, one per kind of documentation page.

Every page embeds a ``PageHeader``; when serialized, the header fields are
flattened next to the page's own fields and ``pageSchema`` comes first.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Union

from api_surface.page_element import PageElement
from api_surface.page_rows import (
    ClassesRow,
    EnumMembersRow,
    EnumsRow,
    FunctionsRow,
    InterfacesRow,
    MethodsRow,
    ParametersRow,
    PropertiesRow,
)


@dataclass(frozen=True)
class PageHeader:
    """Fields shared by every page."""

    page_id: str  # e.g. "sp-http.httpclient.fetch"
    title: str  # e.g. "HttpClient.fetch method"
    package: str  # e.g. "@microsoft/sp-http"
    deprecated_message: str
    beta_warning: str
    summary: list[PageElement]
    remarks: list[PageElement]


@dataclass(frozen=True)
class PackagePage:
    """Documents a package and lists its exports."""

    page_schema: ClassVar[str] = "package"
    header: PageHeader
    classes_table: list[ClassesRow] = field(default_factory=list)
    interfaces_table: list[InterfacesRow] = field(default_factory=list)
    functions_table: list[FunctionsRow] = field(default_factory=list)
    enums_table: list[EnumsRow] = field(default_factory=list)


@dataclass(frozen=True)
class ClassPage:
    """Documents a class."""

    page_schema: ClassVar[str] = "class"
    header: PageHeader
    extends: list[PageElement]
    implements: list[PageElement]
    properties_table: list[PropertiesRow] = field(default_factory=list)
    methods_table: list[MethodsRow] = field(default_factory=list)


@dataclass(frozen=True)
class InterfacePage:
    """Documents an interface."""

    page_schema: ClassVar[str] = "interface"
    header: PageHeader
    extends: list[PageElement]
    implements: list[PageElement]
    properties_table: list[PropertiesRow] = field(default_factory=list)
    methods_table: list[MethodsRow] = field(default_factory=list)


@dataclass(frozen=True)
class EnumPage:
    """Documents an enum."""

    page_schema: ClassVar[str] = "enum"
    header: PageHeader
    enum_members_table: list[EnumMembersRow] = field(default_factory=list)


@dataclass(frozen=True)
class MethodPage:
    """Documents a member function of a class or interface."""

    page_schema: ClassVar[str] = "method"
    header: PageHeader
    full_signature: list[PageElement]
    return_type: list[PageElement]
    return_description: list[PageElement]
    parameters_table: list[ParametersRow]
    access_modifier: str
    is_static: bool


@dataclass(frozen=True)
class FunctionPage:
    """Documents a function exported by a package."""

    page_schema: ClassVar[str] = "function"
    header: PageHeader
    full_signature: list[PageElement]
    return_type: list[PageElement]
    return_description: list[PageElement]
    parameters_table: list[ParametersRow]
    access_modifier: str


@dataclass(frozen=True)
class PropertyPage:
    """Documents a property of a class or interface."""

    page_schema: ClassVar[str] = "property"
    header: PageHeader
    property_type: list[PageElement]
    access_modifier: str
    is_static: bool


Page = Union[
    PackagePage,
    ClassPage,
    InterfacePage,
    EnumPage,
    MethodPage,
    FunctionPage,
    PropertyPage,
]


@dataclass
class DocumentationPages:
    """All pages built for one package."""

    package_page: PackagePage
    class_pages: list[ClassPage] = field(default_factory=list)
    interface_pages: list[InterfacePage] = field(default_factory=list)
    enum_pages: list[EnumPage] = field(default_factory=list)
    function_pages: list[FunctionPage] = field(default_factory=list)
    method_pages: list[MethodPage] = field(default_factory=list)

    def all_pages(self) -> Iterator[Page]:
        """Yield the package page, then every detail page."""
        yield self.package_page
        yield from self.class_pages
        yield from self.interface_pages
        yield from self.enum_pages
        yield from self.function_pages
        yield from self.method_pages
