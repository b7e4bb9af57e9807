"""The warning shown on pages of preview APIs."""

BETA_WARNING = (
    "This API is provided as a preview for developers and may change based on"
    " feedback that we receive.  Do not use this API in a production environment."
)


def beta_warning(is_beta: bool | None) -> str:
    """Return the preview warning for beta items, otherwise an empty string."""
    return BETA_WARNING if is_beta else ""
