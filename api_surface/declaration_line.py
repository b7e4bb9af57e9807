"""Logic for deriving the one-line declaration text of an API item."""

from api_surface.api_item import (
    ApiEnumValue,
    ApiFunction,
    ApiItem,
    ApiItemKind,
    ApiMember,
    ApiParameter,
    ApiStructuredType,
)


def parameter_text(param: ApiParameter) -> str:
    """Render a parameter as it appears inside a signature."""
    text = ("..." if param.is_spread else "") + param.name
    if param.is_optional:
        text += "?"
    if param.type:
        text += f": {param.type}"
    return text


def parameter_list(params: tuple[ApiParameter, ...]) -> str:
    """Render a parameter list in signature order."""
    return ", ".join(parameter_text(p) for p in params)


def declaration_line(item: ApiItem) -> str:
    """Return the declaration text of an item.

    Discovery may supply the text verbatim in ``declaration``; otherwise it is
    derived from the item's fields. Type literals are anonymous and have an
    empty declaration, so their opening brace follows the owning member line.
    """
    explicit = getattr(item, "declaration", "")
    if explicit:
        return explicit

    if isinstance(item, ApiStructuredType):
        return _structured_type_line(item)
    if isinstance(item, ApiMember):
        return _member_line(item)
    if isinstance(item, ApiFunction):
        line = f"function {item.name}({parameter_list(item.parameters)})"
        if item.return_type:
            line += f": {item.return_type}"
        return line + ";"
    if isinstance(item, ApiEnumValue):
        return f"{item.name} = {item.value}" if item.value else item.name
    if isinstance(item, ApiParameter):
        return parameter_text(item)
    return item.name


def _structured_type_line(item: ApiStructuredType) -> str:
    if item.kind == ApiItemKind.TYPE_LITERAL:
        return ""
    line = f"{item.kind} {item.name}"
    if item.extends:
        line += f" extends {item.extends}"
    if item.implements and item.kind == ApiItemKind.CLASS:
        line += f" implements {item.implements}"
    return line


def _member_line(member: ApiMember) -> str:
    words = []
    if member.access_modifier:
        words.append(member.access_modifier)
    if member.is_static:
        words.append("static")
    if member.kind == ApiItemKind.PROPERTY and member.is_read_only:
        words.append("readonly")

    name = member.name + ("?" if member.is_optional else "")
    if member.type_literal is not None:
        # The literal renders " {" ... "}" right after this text.
        return " ".join([*words, name + ":"])

    if member.kind == ApiItemKind.METHOD:
        sig = f"{name}({parameter_list(member.parameters)})"
        if member.type:
            sig += f": {member.type}"
    else:
        sig = f"{name}: {member.type}" if member.type else name
    return " ".join([*words, sig]) + ";"
