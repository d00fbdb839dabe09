"""perch exception hierarchy.

None of the page helpers raise under normal inputs: missing translations,
unknown actions and unknown flash categories all fall back to a default.
These types only guard misuse of the composition layer.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when a ``PerchConfig`` value is invalid.

    Typically raised once, at application setup.
    """


class NoActivePage(PerchError, LookupError):  # noqa: N818
    """A page helper was called outside ``page_scope()``."""
