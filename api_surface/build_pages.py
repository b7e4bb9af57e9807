"""Logic for building documentation page records from a doc package."""

import logging

from api_surface.as_text import as_text
from api_surface.beta_warning import beta_warning
from api_surface.doc_item import (
    DocClass,
    DocElements,
    DocEnum,
    DocFunction,
    DocInterface,
    DocItem,
    DocMethod,
    DocPackage,
    DocParam,
    DocProperty,
)
from api_surface.page_element import (
    PageElement,
    create_code_link_element,
    create_text_element,
)
from api_surface.page_id import page_id
from api_surface.page_records import (
    ClassPage,
    DocumentationPages,
    EnumPage,
    FunctionPage,
    InterfacePage,
    MethodPage,
    PackagePage,
    PageHeader,
)
from api_surface.page_rows import (
    ClassesRow,
    EnumMembersRow,
    EnumsRow,
    FunctionsRow,
    InterfacesRow,
    MethodsRow,
    ParametersRow,
)
from api_surface.render_doc_elements import render_doc_elements
from api_surface.sorted_member_items import enum_value_sort_key, member_sort_key

logger = logging.getLogger(__name__)


def build_pages(doc_package: DocPackage) -> DocumentationPages:
    """Build the package page and every detail page for one package.

    Exports and members are visited in the same order as the surface report,
    so both artifacts list the API in one canonical order.
    """
    package_name = doc_package.name
    class_pages: list[ClassPage] = []
    interface_pages: list[InterfacePage] = []
    enum_pages: list[EnumPage] = []
    function_pages: list[FunctionPage] = []
    method_pages: list[MethodPage] = []

    classes_table: list[ClassesRow] = []
    interfaces_table: list[InterfacesRow] = []
    functions_table: list[FunctionsRow] = []
    enums_table: list[EnumsRow] = []

    for export_name in sorted(doc_package.exports, key=member_sort_key):
        item = doc_package.exports[export_name]
        link = create_code_link_element(export_name, page_id(package_name, export_name))
        description = render_doc_elements(item.summary, package_name)
        is_deprecated = _is_deprecated(item, package_name)

        if isinstance(item, DocClass):
            classes_table.append(
                ClassesRow(
                    class_column=link,
                    description_column=description,
                    is_deprecated=is_deprecated,
                    is_beta=item.is_beta,
                )
            )
            class_pages.append(
                _build_class_page(item, export_name, package_name, method_pages)
            )
        elif isinstance(item, DocInterface):
            interfaces_table.append(
                InterfacesRow(
                    interface_column=link,
                    description_column=description,
                    is_deprecated=is_deprecated,
                    is_beta=item.is_beta,
                )
            )
            interface_pages.append(
                _build_interface_page(item, export_name, package_name, method_pages)
            )
        elif isinstance(item, DocFunction):
            functions_table.append(
                FunctionsRow(
                    function_column=link,
                    returns_column=_return_type(item),
                    description_column=description,
                    is_deprecated=is_deprecated,
                    is_beta=item.is_beta,
                )
            )
            function_pages.append(
                _build_function_page(item, export_name, package_name)
            )
        elif isinstance(item, DocEnum):
            enums_table.append(
                EnumsRow(
                    enum_column=link,
                    description_column=description,
                    is_deprecated=is_deprecated,
                    is_beta=item.is_beta,
                )
            )
            enum_pages.append(_build_enum_page(item, export_name, package_name))
        else:
            logger.warning(
                "Skipping export %s of %s: unsupported kind %r",
                export_name,
                package_name,
                getattr(item, "kind", None),
            )

    package_page = PackagePage(
        header=_header(
            doc_package,
            page_id(package_name),
            f"{package_name} package",
            package_name,
        ),
        classes_table=classes_table,
        interfaces_table=interfaces_table,
        functions_table=functions_table,
        enums_table=enums_table,
    )
    return DocumentationPages(
        package_page=package_page,
        class_pages=class_pages,
        interface_pages=interface_pages,
        enum_pages=enum_pages,
        function_pages=function_pages,
        method_pages=method_pages,
    )


def _header(
    item: DocItem | DocMethod | DocPackage,
    pid: str,
    title: str,
    package_name: str,
) -> PageHeader:
    """Build the fields shared by every page."""
    return PageHeader(
        page_id=pid,
        title=title,
        package=package_name,
        deprecated_message=deprecated_text(item.deprecated_message, package_name),
        beta_warning=beta_warning(item.is_beta),
        summary=render_doc_elements(item.summary, package_name),
        remarks=render_doc_elements(item.remarks, package_name),
    )


def deprecated_text(message: DocElements, package_name: str = "") -> str:
    """Flatten a deprecation message into a single line of text."""
    return as_text(render_doc_elements(message, package_name))


def _is_deprecated(item: DocItem | DocMethod, package_name: str) -> bool:
    return bool(deprecated_text(item.deprecated_message, package_name))


def _return_type(item: DocFunction | DocMethod) -> list[PageElement]:
    if item.return_value is None:
        return []
    return create_text_element(item.return_value.type)


def concise_signature(method_name: str, parameters: dict[str, DocParam]) -> str:
    """Return ``name(p1, p2)`` for use as a link label."""
    return method_name + "(" + ", ".join(parameters) + ")"


def create_parameters_table(parameters: dict[str, DocParam]) -> list[ParametersRow]:
    """Build one row per parameter, in signature order.

    Type and description are not yet distinctly available at this layer, so
    the parameter name fills all three cells.
    """
    return [
        ParametersRow(
            parameter_column=create_text_element(name),
            type_column=create_text_element(name),
            description_column=create_text_element(name),
            is_optional=param.is_optional,
            is_spread=param.is_spread,
        )
        for name, param in parameters.items()
    ]


def _build_methods_table(
    members: dict[str, DocMethod | DocProperty],
    owner_name: str,
    package_name: str,
    method_pages: list[MethodPage],
) -> list[MethodsRow]:
    """Build the methods table of a class or interface and its method pages.

    Properties are accepted but produce neither a row nor a page.
    """
    rows: list[MethodsRow] = []
    for member_name in sorted(members, key=member_sort_key):
        member = members[member_name]
        if not isinstance(member, DocMethod):
            continue
        rows.append(
            MethodsRow(
                method_column=create_code_link_element(
                    concise_signature(member_name, member.parameters),
                    page_id(package_name, owner_name, member_name),
                ),
                access_modifier_column=create_text_element(member.access_modifier),
                returns_column=_return_type(member),
                description_column=render_doc_elements(member.summary, package_name),
                is_deprecated=_is_deprecated(member, package_name),
                is_beta=member.is_beta,
                is_static=member.is_static,
            )
        )
        method_pages.append(
            _build_method_page(member, member_name, owner_name, package_name)
        )
    return rows


def _build_class_page(
    doc_class: DocClass,
    class_name: str,
    package_name: str,
    method_pages: list[MethodPage],
) -> ClassPage:
    return ClassPage(
        header=_header(
            doc_class,
            page_id(package_name, class_name),
            f"{class_name} class",
            package_name,
        ),
        extends=create_text_element(doc_class.extends),
        implements=create_text_element(doc_class.implements),
        properties_table=[],
        methods_table=_build_methods_table(
            doc_class.members, class_name, package_name, method_pages
        ),
    )


def _build_interface_page(
    doc_interface: DocInterface,
    interface_name: str,
    package_name: str,
    method_pages: list[MethodPage],
) -> InterfacePage:
    return InterfacePage(
        header=_header(
            doc_interface,
            page_id(package_name, interface_name),
            f"{interface_name} interface",
            package_name,
        ),
        extends=create_text_element(doc_interface.extends),
        implements=create_text_element(doc_interface.implements),
        properties_table=[],
        methods_table=_build_methods_table(
            doc_interface.members, interface_name, package_name, method_pages
        ),
    )


def _build_enum_page(doc_enum: DocEnum, enum_name: str, package_name: str) -> EnumPage:
    ordered = sorted(
        doc_enum.values.items(),
        key=lambda kv: enum_value_sort_key(kv[0], kv[1].value),
    )
    rows = [
        EnumMembersRow(
            member_column=create_text_element(name),
            value_column=create_text_element(value.value),
            description_column=render_doc_elements(value.summary, package_name),
            is_deprecated=bool(deprecated_text(value.deprecated_message, package_name)),
            is_beta=False,
        )
        for name, value in ordered
    ]
    return EnumPage(
        header=_header(
            doc_enum,
            page_id(package_name, enum_name),
            f"{enum_name} enum",
            package_name,
        ),
        enum_members_table=rows,
    )


def _full_signature(name: str, item: DocFunction | DocMethod) -> str:
    if item.signature:
        return item.signature
    params = []
    for pname, param in item.parameters.items():
        text = ("..." if param.is_spread else "") + pname
        if param.is_optional:
            text += "?"
        if param.type:
            text += f": {param.type}"
        params.append(text)
    sig = f"{name}({', '.join(params)})"
    if item.return_value is not None and item.return_value.type:
        sig += f": {item.return_value.type}"
    return sig


def _build_function_page(
    doc_function: DocFunction, function_name: str, package_name: str
) -> FunctionPage:
    return_value = doc_function.return_value
    return FunctionPage(
        header=_header(
            doc_function,
            page_id(package_name, function_name),
            f"{function_name} function",
            package_name,
        ),
        full_signature=create_text_element(
            _full_signature(function_name, doc_function)
        ),
        return_type=_return_type(doc_function),
        return_description=(
            render_doc_elements(return_value.description, package_name)
            if return_value is not None
            else []
        ),
        parameters_table=create_parameters_table(doc_function.parameters),
        access_modifier="",
    )


def _build_method_page(
    doc_method: DocMethod,
    method_name: str,
    owner_name: str,
    package_name: str,
) -> MethodPage:
    return_value = doc_method.return_value
    return MethodPage(
        header=_header(
            doc_method,
            page_id(package_name, owner_name, method_name),
            f"{owner_name}.{method_name} method",
            package_name,
        ),
        full_signature=create_text_element(_full_signature(method_name, doc_method)),
        return_type=_return_type(doc_method),
        return_description=(
            render_doc_elements(return_value.description, package_name)
            if return_value is not None
            else []
        ),
        parameters_table=create_parameters_table(doc_method.parameters),
        access_modifier=doc_method.access_modifier or "",
        is_static=doc_method.is_static,
    )
