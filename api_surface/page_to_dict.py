"""Logic for converting page records into plain nested values."""

import dataclasses
import re
from typing import Any

from api_surface.page_records import Page

_SNAKE_RE = re.compile(r"_([a-z])")


def camel_case(name: str) -> str:
    """Convert a snake_case field name to camelCase."""
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), name)


def page_to_dict(page: Page) -> dict[str, Any]:
    """Convert a page record to a dict ready for a YAML or JSON sink.

    ``pageSchema`` comes first, then the header fields, then the page's own
    fields. ``None`` values are kept so that validation can report them.
    """
    result: dict[str, Any] = {"pageSchema": page.page_schema}
    result.update(to_plain_value(page.header))
    for f in dataclasses.fields(page):
        if f.name == "header":
            continue
        result[camel_case(f.name)] = to_plain_value(getattr(page, f.name))
    return result


def to_plain_value(value: Any) -> Any:
    """Recursively convert rows and elements into dicts and lists."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        element_kind = getattr(type(value), "element_kind", None)
        if element_kind is not None:
            out["elementKind"] = element_kind
        for f in dataclasses.fields(value):
            out[camel_case(f.name)] = to_plain_value(getattr(value, f.name))
        return out
    if isinstance(value, (list, tuple)):
        return [to_plain_value(v) for v in value]
    return value
