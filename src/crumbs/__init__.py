"""Crumbs — sealed and tracked views over a request's cookies.

A handler without an outgoing response gets a read-only view; one with a
response gets a mutable view that keeps the response's ``Set-Cookie``
header in step with every change.

Basic usage::

    from crumbs import RequestCookies, ResponseHeaders, seal_mutable

    cookies = RequestCookies("session=abc; theme=light")
    headers = ResponseHeaders()

    view = seal_mutable(cookies, headers)
    view.set("theme", "dark")
    headers.get_list("Set-Cookie")  # ["theme=dark"]
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "CookiesConfig",
    "CrumbsError",
    "FrozenCookiesError",
    "HeaderTarget",
    "MutableRequestCookies",
    "ReadonlyRequestCookies",
    "RequestCookie",
    "RequestCookies",
    "ResponseHeaders",
    "parse_cookies",
    "seal_mutable",
    "seal_readonly",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "crumbs.errors",
    "CookiesConfig": "crumbs.config",
    "CrumbsError": "crumbs.errors",
    "FrozenCookiesError": "crumbs.errors",
    "HeaderTarget": "crumbs.http.response",
    "MutableRequestCookies": "crumbs.http.sealed",
    "ReadonlyRequestCookies": "crumbs.http.sealed",
    "RequestCookie": "crumbs.http.cookies",
    "RequestCookies": "crumbs.http.cookies",
    "ResponseHeaders": "crumbs.http.response",
    "parse_cookies": "crumbs.http.cookies",
    "seal_mutable": "crumbs.http.sealed",
    "seal_readonly": "crumbs.http.sealed",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumbs`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_path), name)
