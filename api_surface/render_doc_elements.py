"""Logic for converting doc elements into page elements."""

from collections.abc import Iterable

from api_surface.doc_element import (
    DocElement,
    LinkElement,
    ParagraphElement,
    SeeElement,
    TextElement,
)
from api_surface.page_element import (
    PageElement,
    ParagraphPageElement,
    WebLinkPageElement,
    create_code_link_element,
    create_text_element,
)
from api_surface.page_id import page_id


def render_doc_elements(
    elements: Iterable[DocElement] | None,
    default_package: str = "",
) -> list[PageElement]:
    """Render a doc element sequence, preserving order.

    Code links that name no package resolve against ``default_package``.
    "See" elements are flattened in place behind a ``"see "`` text element.
    """
    result: list[PageElement] = []
    for element in elements or ():
        if isinstance(element, TextElement):
            result.extend(create_text_element(element.value))
        elif isinstance(element, LinkElement):
            result.extend(_render_link(element, default_package))
        elif isinstance(element, SeeElement):
            result.extend(create_text_element("see "))
            result.extend(render_doc_elements(element.see_elements, default_package))
        elif isinstance(element, ParagraphElement):
            result.append(ParagraphPageElement())
        else:
            msg = f"Unknown doc element: {element!r}"
            raise TypeError(msg)
    return result


def _render_link(link: LinkElement, default_package: str) -> list[PageElement]:
    if link.is_code_link:
        target = page_id(
            link.package_name or default_package,
            link.export_name,
            link.member_name,
        )
        return create_code_link_element(link.display_text, target)
    return [WebLinkPageElement(target_url=link.target_url, text=link.display_text)]
