"""Logic for rendering the pseudocode API surface report.

For a package such as ``example-package`` the report is a ``*.d.ts``-like
pseudocode file that is committed alongside the code. Whenever the exported
surface changes, the file changes, which makes API changes visible in review.
The report records *whether* an item is documented and the stored comment
text, and is byte-stable for an unchanged tree.
"""

from collections.abc import Callable

from api_surface.api_item import (
    ApiEnum,
    ApiEnumValue,
    ApiFunction,
    ApiItem,
    ApiItemKind,
    ApiMember,
    ApiModuleVariable,
    ApiNamespace,
    ApiPackage,
    ApiParameter,
    ApiStructuredType,
)
from api_surface.declaration_line import declaration_line
from api_surface.errors import UnsupportedKindError
from api_surface.indented_writer import IndentedWriter
from api_surface.sorted_member_items import sorted_member_items


class SurfaceReportGenerator:
    """Visits an API item tree and writes the report into an IndentedWriter."""

    def __init__(self, writer: IndentedWriter | None = None) -> None:
        """Initialize the visitor and its per-kind dispatch table."""
        self.writer = writer or IndentedWriter()
        self._handlers: dict[str, Callable[[ApiItem], None]] = {
            ApiItemKind.PACKAGE: self._visit_package,
            ApiItemKind.NAMESPACE: self._visit_namespace,
            ApiItemKind.CLASS: self._visit_structured_type,
            ApiItemKind.INTERFACE: self._visit_structured_type,
            ApiItemKind.TYPE_LITERAL: self._visit_structured_type,
            ApiItemKind.ENUM: self._visit_enum,
            ApiItemKind.ENUM_VALUE: self._visit_enum_value,
            ApiItemKind.MODULE_VARIABLE: self._visit_module_variable,
            ApiItemKind.PROPERTY: self._visit_member,
            ApiItemKind.METHOD: self._visit_member,
            ApiItemKind.FUNCTION: self._visit_function,
            ApiItemKind.PARAMETER: self._visit_parameter,
        }

    def visit(self, item: ApiItem) -> None:
        """Dispatch on the item's kind."""
        handler = self._handlers.get(item.kind)
        if handler is None:
            raise UnsupportedKindError(item.kind)
        handler(item)

    def _visit_structured_type(self, item: ApiStructuredType) -> None:
        if item.kind != ApiItemKind.TYPE_LITERAL:
            self._write_jsdoc(item)

        self.writer.write_line(declaration_line(item) + " {")
        with self.writer.indent_scope():
            for member in sorted_member_items(item):
                self.visit(member)
                self.writer.write_line()
        self.writer.write("}")

    def _visit_enum(self, item: ApiEnum) -> None:
        self._write_jsdoc(item)

        self.writer.write_line(f"enum {item.name} {{")
        with self.writer.indent_scope():
            values = sorted_member_items(item)
            for i, value in enumerate(values):
                self.visit(value)
                self.writer.write_line("," if i < len(values) - 1 else "")
        self.writer.write("}")

    def _visit_enum_value(self, item: ApiEnumValue) -> None:
        self._write_jsdoc(item)
        self.writer.write(declaration_line(item))

    def _visit_package(self, item: ApiPackage) -> None:
        self._write_comment(item.name)
        if item.documentation:
            self.writer.write_line()
            self._write_comment(item.documentation)
        self.writer.write_line()

        for export in sorted_member_items(item):
            self.visit(export)
            self.writer.write_line()
            self.writer.write_line()

    def _visit_namespace(self, item: ApiNamespace) -> None:
        self._write_jsdoc(item)

        # Namespaces are published as "module" in the public API documentation.
        self.writer.write_line(f"module {item.name} {{")
        with self.writer.indent_scope():
            for member in sorted_member_items(item):
                self.visit(member)
                self.writer.write_line()
                self.writer.write_line()
        self.writer.write("}")

    def _visit_module_variable(self, item: ApiModuleVariable) -> None:
        self._write_jsdoc(item)
        self.writer.write(f"{item.name}: {item.type} = {item.value};")

    def _visit_member(self, item: ApiMember) -> None:
        if item.documentation:
            self._write_jsdoc(item)

        self.writer.write(declaration_line(item))

        if item.type_literal is not None:
            self.visit(item.type_literal)

    def _visit_function(self, item: ApiFunction) -> None:
        self._write_jsdoc(item)
        self.writer.write(declaration_line(item))

    def _visit_parameter(self, item: ApiParameter) -> None:
        msg = f"Parameter {item.name!r} is rendered only as part of a signature"
        raise NotImplementedError(msg)

    def _write_jsdoc(self, item: ApiItem) -> None:
        doc = item.documentation
        if doc:
            self.writer.write_line()
            self.writer.write_line("/**")
            for line in doc.split("\n"):
                self.writer.write_line(" * " + line)
            self.writer.write_line(" */")

    def _write_comment(self, text: str) -> None:
        if not text:
            return
        for line in text.split("\n"):
            self.writer.write_line("// " + line)


def render_surface_report(package: ApiPackage, indent: str = "  ") -> str:
    """Render the surface report for a package as CRLF-terminated text."""
    generator = SurfaceReportGenerator(IndentedWriter(indent))
    generator.visit(package)
    return generator.writer.to_string()
