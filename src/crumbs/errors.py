"""Crumbs exception hierarchy.

Shared across the cookie collection, the sealed views, and configuration
so every module raises and catches the same types.
"""


class CrumbsError(Exception):
    """Base for all crumbs-specific errors."""


class ConfigurationError(CrumbsError):
    """Raised when a ``CookiesConfig`` is invalid.

    Raised at construction time, before any cookies are touched.
    """


class FrozenCookiesError(CrumbsError):
    """Raised when a read-only cookie view is asked to mutate.

    The message is fixed: callers get the same explanation whichever
    mutation (``set``, ``delete``, ``clear``) they attempted.
    """

    MESSAGE = (
        "ReadonlyRequestCookies cannot be modified. Cookies can only be "
        "changed when an outgoing response is available to carry them."
    )

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)
