"""Last-line check that a serialized page has no unset fields."""

from typing import Any

from api_surface.errors import IncompletePageError


def validate_no_undefined_members(value: Any, path: str = "") -> None:
    """Raise IncompletePageError naming the first ``None`` found.

    Dict keys and list indices both extend the path, e.g.
    ``/methodsTable/0/returnsColumn``.
    """
    if isinstance(value, dict):
        children = value.items()
    elif isinstance(value, list):
        children = enumerate(value)
    else:
        return
    for key, child in children:
        child_path = f"{path}/{key}"
        if child is None:
            raise IncompletePageError(child_path)
        validate_no_undefined_members(child, child_path)
