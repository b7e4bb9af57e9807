"""Logic for flattening page elements into plain text."""

from api_surface.page_element import PageElement


def as_text(v: object) -> str:
    """Convert a value to a string, handling element lists and None."""
    if v is None:
        return ""
    if isinstance(v, str):
        return v.strip()
    if isinstance(v, list):
        return "".join(_element_text(x) for x in v).strip()
    return str(v).strip()


def _element_text(element: PageElement | str) -> str:
    if isinstance(element, str):
        return element
    text = getattr(element, "text", None)
    if text is not None:
        return text
    # Paragraph breaks become spaces in a single-line message.
    return " "
