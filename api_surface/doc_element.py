"""Data models for structured documentation text (doc elements)."""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class TextElement:
    """Plain text."""

    value: str


@dataclass(frozen=True)
class LinkElement:
    """A hyperlink to another API item ("code") or to a web URL ("href")."""

    reference_type: str  # "code" or "href"
    value: str = ""
    package_name: str = ""
    export_name: str = ""
    member_name: str = ""
    target_url: str = ""

    @property
    def is_code_link(self) -> bool:
        """Whether the link targets an API item rather than a URL."""
        return self.reference_type == "code"

    @property
    def display_text(self) -> str:
        """Explicit text, or ``export``/``export.member`` for code links."""
        if self.value:
            return self.value
        if self.is_code_link:
            if self.member_name:
                return f"{self.export_name}.{self.member_name}"
            return self.export_name
        return self.target_url


@dataclass(frozen=True)
class SeeElement:
    """A "see also" reference wrapping a nested sequence of elements."""

    see_elements: tuple["DocElement", ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ParagraphElement:
    """Start of a new paragraph."""


DocElement = Union[TextElement, LinkElement, SeeElement, ParagraphElement]
