"""Error types raised by the report and page engines."""


class ApiSurfaceError(Exception):
    """Base class for all api-surface errors."""


class UnsupportedKindError(ApiSurfaceError):
    """Raised when the report visitor meets an item kind it has no handler for."""

    def __init__(self, kind: str) -> None:
        """Record the offending kind."""
        super().__init__(f'No rendering rule for API item kind "{kind}"')
        self.kind = kind


class IncompletePageError(ApiSurfaceError):
    """Raised when a page record still holds an unset field at write time."""

    def __init__(self, path: str) -> None:
        """Record the path of the unset field."""
        super().__init__(f'The key "{path}" is undefined')
        self.path = path


class DuplicatePageIdError(ApiSurfaceError):
    """Raised when two pages resolve to the same page id in one run."""

    def __init__(self, page_id: str) -> None:
        """Record the colliding page id."""
        super().__init__(f'Page id "{page_id}" was emitted twice')
        self.page_id = page_id
