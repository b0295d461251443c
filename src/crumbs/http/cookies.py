"""Request cookie collection.

``parse_cookies`` reads a ``Cookie`` header; ``RequestCookies`` holds the
parsed records for one request and is the collection the sealed views in
``crumbs.http.sealed`` wrap.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Protocol, overload

from crumbs.config import DEFAULT_CONFIG, CookiesConfig


def parse_cookies(header: str) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    Returns an empty dict for empty or missing headers.
    """
    if not header:
        return {}
    cookies: dict[str, str] = {}
    for pair in header.split(";"):
        pair = pair.strip()
        if "=" in pair:
            key, _, value = pair.partition("=")
            cookies[key.strip()] = value.strip()
    return cookies


class CookieLike(Protocol):
    """Anything carrying a cookie name and value."""

    @property
    def name(self) -> str: ...

    @property
    def value(self) -> str: ...


@dataclass(frozen=True, slots=True)
class RequestCookie:
    """A single cookie as sent by the client."""

    name: str
    value: str

    def to_header_value(self) -> str:
        return f"{self.name}={self.value}"


class RequestCookies:
    """Ordered, name-keyed cookies for one request.

    Names are unique; setting an existing name replaces its value in
    place, new names are appended. Iteration yields ``RequestCookie``
    records in insertion order.
    """

    __slots__ = ("_parsed",)

    def __init__(self, header: str = "") -> None:
        self._parsed: dict[str, RequestCookie] = {
            name: RequestCookie(name, value) for name, value in parse_cookies(header).items()
        }

    @classmethod
    def from_headers(
        cls,
        headers: Mapping[str, str],
        config: CookiesConfig = DEFAULT_CONFIG,
    ) -> RequestCookies:
        """Build from request headers, matching the cookie header case-insensitively."""
        wanted = config.cookie_header.lower()
        for key, value in headers.items():
            if key.lower() == wanted:
                return cls(value)
        return cls()

    # -- Reads --

    def get(self, cookie: str | CookieLike) -> RequestCookie | None:
        """Return the cookie named *cookie* (or ``cookie.name``), or ``None``."""
        name = cookie if isinstance(cookie, str) else cookie.name
        return self._parsed.get(name)

    def get_all(self, cookie: str | CookieLike | None = None) -> list[RequestCookie]:
        """Return every cookie, or only those matching a name when given."""
        if cookie is None:
            return list(self._parsed.values())
        found = self.get(cookie)
        return [found] if found is not None else []

    def has(self, name: str) -> bool:
        return name in self._parsed

    # -- Writes --

    @overload
    def set(self, cookie: str, value: str, /) -> RequestCookies: ...
    @overload
    def set(self, cookie: CookieLike, /) -> RequestCookies: ...

    def set(self, cookie: str | CookieLike, value: str | None = None, /) -> RequestCookies:
        """Set a cookie from a name/value pair or from a record.

        Raises:
            TypeError: If a name is given without a value, or a record with one.
            ValueError: If the cookie name is empty.
        """
        if isinstance(cookie, str):
            if value is None:
                msg = f"set({cookie!r}) needs a value"
                raise TypeError(msg)
            name = cookie
        else:
            if value is not None:
                msg = "set(cookie) takes no separate value"
                raise TypeError(msg)
            name, value = cookie.name, cookie.value
        if not name:
            msg = "Cookie name must not be empty"
            raise ValueError(msg)
        self._parsed[name] = RequestCookie(name, str(value))
        return self

    @overload
    def delete(self, names: str) -> bool: ...
    @overload
    def delete(self, names: Iterable[str]) -> list[bool]: ...

    def delete(self, names: str | Iterable[str]) -> bool | list[bool]:
        """Delete one name or several.

        Returns whether the name existed, or a list of those flags in
        input order when several names are given. Missing names are not
        an error.

        Raises:
            TypeError: If *names* is ``bytes``.
        """
        if isinstance(names, str):
            return self._parsed.pop(names, None) is not None
        if isinstance(names, bytes | bytearray):
            msg = "Cookie names must be str, not bytes"
            raise TypeError(msg)
        return [self._parsed.pop(name, None) is not None for name in names]

    def clear(self) -> RequestCookies:
        self._parsed.clear()
        return self

    # -- Serialization --

    def to_header_value(self) -> str:
        """Serialize back to a ``Cookie`` header value."""
        return "; ".join(c.to_header_value() for c in self._parsed.values())

    # -- Container protocol --

    def __iter__(self) -> Iterator[RequestCookie]:
        return iter(list(self._parsed.values()))

    def __len__(self) -> int:
        return len(self._parsed)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._parsed

    def __repr__(self) -> str:
        items = ", ".join(f"{c.name!r}: {c.value!r}" for c in self._parsed.values())
        return f"RequestCookies({{{items}}})"
