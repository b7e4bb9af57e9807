"""Shape check used by the JSON loaders."""

from typing import Any


def expect_object(raw: Any, path: str) -> dict[str, Any]:
    """Return ``raw`` if it is a JSON object, else raise ValueError naming ``path``."""
    if not isinstance(raw, dict):
        msg = f"Expected an object at {path or '/'}, got {type(raw).__name__}"
        raise ValueError(msg)
    return raw
