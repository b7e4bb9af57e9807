"""Logic for finding code links that point at pages not in the set."""

from collections.abc import Iterable
from typing import Any

from api_surface.page_records import Page
from api_surface.page_to_dict import page_to_dict


def find_broken_links(pages: Iterable[Page]) -> list[tuple[str, str]]:
    """Return ``(page_id, linked_page_id)`` for every unresolved code link."""
    serialized = [page_to_dict(p) for p in pages]
    known = {p["pageId"] for p in serialized}
    broken: list[tuple[str, str]] = []
    for page in serialized:
        for target in _code_link_targets(page):
            if target not in known:
                broken.append((page["pageId"], target))
    return broken


def _code_link_targets(value: Any) -> Iterable[str]:
    if isinstance(value, dict):
        if value.get("elementKind") == "codeLink":
            yield value["linkedPageId"]
        for child in value.values():
            yield from _code_link_targets(child)
    elif isinstance(value, list):
        for child in value:
            yield from _code_link_targets(child)
