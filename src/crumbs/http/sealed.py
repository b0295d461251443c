"""Sealed views over a request's cookies.

Two wrappers, neither of which copies the collection:

- ``ReadonlyRequestCookies`` (from ``seal_readonly``) — for handlers with
  no outgoing response. ``set``, ``delete`` and ``clear`` raise
  ``FrozenCookiesError`` when called; everything else forwards.
- ``MutableRequestCookies`` (from ``seal_mutable``) — for handlers with a
  response. Every mutation records the names it touched, runs, and then
  rewrites the response's ``Set-Cookie`` header from the current state of
  those names.

Usage::

    cookies = RequestCookies.from_headers(request_headers)
    headers = ResponseHeaders()

    view = seal_mutable(cookies, headers)
    view.set("theme", "dark")
    headers.get_list("Set-Cookie")  # ["theme=dark"]

Thread safety:
    A view holds request-local mutable state with no locks. Create one
    per request and never share it between concurrent requests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any, NoReturn

from crumbs.config import DEFAULT_CONFIG, CookiesConfig
from crumbs.errors import FrozenCookiesError
from crumbs.http.cookies import CookieLike, RequestCookie, RequestCookies
from crumbs.http.response import HeaderTarget

logger = logging.getLogger("crumbs.cookies")


class _ForwardingCookies:
    """Read-side pass-through shared by both views."""

    __slots__ = ("_cookies",)

    def __init__(self, cookies: RequestCookies) -> None:
        self._cookies = cookies

    def get(self, cookie: str | CookieLike) -> RequestCookie | None:
        return self._cookies.get(cookie)

    def get_all(self, cookie: str | CookieLike | None = None) -> list[RequestCookie]:
        return self._cookies.get_all(cookie)

    def has(self, name: str) -> bool:
        return self._cookies.has(name)

    def to_header_value(self) -> str:
        return self._cookies.to_header_value()

    def __iter__(self) -> Iterator[RequestCookie]:
        return iter(self._cookies)

    def __len__(self) -> int:
        return len(self._cookies)

    def __contains__(self, name: object) -> bool:
        return name in self._cookies

    def __getattr__(self, name: str) -> Any:
        # Only reached for members the view doesn't define itself
        if name == "_cookies":
            raise AttributeError(name)
        return getattr(self._cookies, name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._cookies!r})"


# -- Read-only --


class ReadonlyRequestCookies(_ForwardingCookies):
    """Request cookies with the mutation methods disabled.

    The methods still exist so that ``view.set`` can be looked up, passed
    around, and stored; the failure happens when it is called.
    """

    __slots__ = ()

    def set(self, *args: Any, **kwargs: Any) -> NoReturn:  # noqa: ARG002
        _refuse("set")

    def delete(self, *args: Any, **kwargs: Any) -> NoReturn:  # noqa: ARG002
        _refuse("delete")

    def clear(self, *args: Any, **kwargs: Any) -> NoReturn:  # noqa: ARG002
        _refuse("clear")


def _refuse(operation: str) -> NoReturn:
    logger.debug("Refused %s() on read-only request cookies", operation)
    raise FrozenCookiesError()


def seal_readonly(cookies: RequestCookies) -> ReadonlyRequestCookies:
    """Wrap *cookies* so that any attempt to mutate them raises."""
    return ReadonlyRequestCookies(cookies)


# -- Mutable, tracked --


class MutableRequestCookies(_ForwardingCookies):
    """Request cookies whose changes are mirrored onto a response.

    Every name passed to ``set``, ``delete`` or ``clear`` joins
    ``modified_names`` for the lifetime of the view. After each of those
    calls, whether it returned or raised, the response's ``Set-Cookie``
    header is replaced with ``name=value`` for every modified name still
    present, in collection order.

    Without a response nothing is published, but tracking still happens
    and ``pending_changes()`` reports what would have been sent.
    """

    __slots__ = ("_config", "_modified_names", "_modified_values", "_response")

    def __init__(
        self,
        cookies: RequestCookies,
        response: HeaderTarget | None = None,
        config: CookiesConfig = DEFAULT_CONFIG,
    ) -> None:
        super().__init__(cookies)
        self._response = response
        self._config = config
        self._modified_names: set[str] = set()
        self._modified_values: tuple[tuple[str, str], ...] = ()

    @property
    def modified_names(self) -> frozenset[str]:
        """Every name mutated through this view so far. Never shrinks."""
        return frozenset(self._modified_names)

    def pending_changes(self) -> tuple[tuple[str, str], ...]:
        """Modified ``(name, value)`` pairs as of the last mutation, in collection order."""
        return self._modified_values

    # TODO: raise once the response headers have been sent; the view has
    # no way to know that yet.

    def clear(self) -> Any:
        # Every current name is touched, not only the ones that differ afterwards
        self._modified_names.update(c.name for c in self._cookies.get_all())
        try:
            return self._cookies.clear()
        finally:
            self._update_response_cookies()

    def delete(self, names: str | Iterable[str]) -> Any:
        try:
            if isinstance(names, str):
                self._modified_names.add(names)
            else:
                if isinstance(names, bytes | bytearray):
                    msg = "Cookie names must be str, not bytes"
                    raise TypeError(msg)
                names = list(names)
                self._modified_names.update(names)
            return self._cookies.delete(names)
        finally:
            self._update_response_cookies()

    def set(self, cookie: str | CookieLike, value: str | None = None, /) -> Any:
        self._modified_names.add(cookie if isinstance(cookie, str) else cookie.name)
        args = (cookie,) if value is None else (cookie, value)
        try:
            return self._cookies.set(*args)  # type: ignore[call-overload]
        finally:
            self._update_response_cookies()

    def _update_response_cookies(self) -> None:
        """Recompute the modified snapshot and publish it."""
        self._modified_values = tuple(
            (c.name, c.value) for c in self._cookies.get_all() if c.name in self._modified_names
        )
        if self._response is None:
            return
        self._response.set_header(
            self._config.set_cookie_header,
            [f"{name}={value}" for name, value in self._modified_values],
        )
        logger.debug(
            "Published %d modified cookie(s) to %s",
            len(self._modified_values),
            self._config.set_cookie_header,
        )


def seal_mutable(
    cookies: RequestCookies,
    response: HeaderTarget | None = None,
    *,
    config: CookiesConfig | None = None,
) -> MutableRequestCookies:
    """Wrap *cookies* so that mutations are mirrored onto *response*."""
    return MutableRequestCookies(cookies, response, config or DEFAULT_CONFIG)
