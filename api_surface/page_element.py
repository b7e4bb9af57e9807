"""Rich-text elements as they appear on documentation pages."""

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class TextPageElement:
    """Plain text content."""

    element_kind: ClassVar[str] = "text"
    text: str


@dataclass(frozen=True)
class WebLinkPageElement:
    """A web hyperlink."""

    element_kind: ClassVar[str] = "webLink"
    target_url: str
    text: str


@dataclass(frozen=True)
class CodeLinkPageElement:
    """A hyperlink to another API page of the documentation set."""

    element_kind: ClassVar[str] = "codeLink"
    linked_page_id: str
    text: str


@dataclass(frozen=True)
class ParagraphPageElement:
    """Start of a new paragraph."""

    element_kind: ClassVar[str] = "paragraph"


PageElement = Union[
    TextPageElement, WebLinkPageElement, CodeLinkPageElement, ParagraphPageElement
]


def create_text_element(text: str | None) -> list[PageElement]:
    """Wrap text in a one-element sequence; empty text yields no element."""
    if not text:
        return []
    return [TextPageElement(text=text)]


def create_code_link_element(text: str, linked_page_id: str) -> list[PageElement]:
    """Create a one-element sequence holding a code link."""
    return [CodeLinkPageElement(linked_page_id=linked_page_id, text=text)]
