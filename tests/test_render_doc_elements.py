"""Tests for rich-text conversion."""

from api_surface.doc_element import (
    LinkElement,
    ParagraphElement,
    SeeElement,
    TextElement,
)
from api_surface.page_element import (
    CodeLinkPageElement,
    ParagraphPageElement,
    TextPageElement,
    WebLinkPageElement,
)
from api_surface.render_doc_elements import render_doc_elements


def test_empty_input() -> None:
    """Verify None and empty sequences render to nothing."""
    assert render_doc_elements(None) == []
    assert render_doc_elements(()) == []


def test_text_elements_keep_order() -> None:
    """Verify text order is preserved and empty text is dropped."""
    elements = (TextElement("a"), TextElement(""), TextElement("b"))
    assert render_doc_elements(elements) == [
        TextPageElement("a"),
        TextPageElement("b"),
    ]


def test_code_link_label_synthesized() -> None:
    """Verify a code link without text is labelled export.member."""
    link = LinkElement(
        reference_type="code",
        package_name="@scope/widgets",
        export_name="Widget",
        member_name="build",
    )
    assert render_doc_elements((link,)) == [
        CodeLinkPageElement(linked_page_id="widgets.widget.build", text="Widget.build")
    ]


def test_code_link_uses_default_package() -> None:
    """Verify links that name no package resolve against the current one."""
    link = LinkElement(reference_type="code", export_name="Widget", value="the widget")
    assert render_doc_elements((link,), "@scope/widgets") == [
        CodeLinkPageElement(linked_page_id="widgets.widget", text="the widget")
    ]


def test_web_link() -> None:
    """Verify href links become web links."""
    link = LinkElement(reference_type="href", target_url="https://example.com")
    assert render_doc_elements((link,)) == [
        WebLinkPageElement(target_url="https://example.com", text="https://example.com")
    ]


def test_see_is_flattened() -> None:
    """Verify "see" content is inlined after a "see " text element."""
    see = SeeElement(
        (
            LinkElement(reference_type="code", package_name="pkg", export_name="Other"),
        )
    )
    assert render_doc_elements((TextElement("x"), see, ParagraphElement())) == [
        TextPageElement("x"),
        TextPageElement("see "),
        CodeLinkPageElement(linked_page_id="pkg.other", text="Other"),
        ParagraphPageElement(),
    ]
