"""Outgoing response headers.

``HeaderTarget`` is the one capability the mutable cookie view needs
from a response: replace every value of a header at once.
``ResponseHeaders`` is the concrete, case-insensitive implementation.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class HeaderTarget(Protocol):
    """Anything that can receive a header, replacing earlier values."""

    def set_header(self, name: str, value: str | Sequence[str]) -> None: ...


class ResponseHeaders(Mapping[str, str]):
    """Mutable, case-insensitive outgoing headers.

    ``__getitem__`` returns the first value for a header.
    ``get_list`` returns all values (e.g. multiple ``Set-Cookie``).
    ``set_header`` replaces; ``append`` adds. Original name casing
    from the first write is kept for ``raw``.
    """

    __slots__ = ("_store",)

    def __init__(self, headers: Mapping[str, str] | None = None) -> None:
        # lowercased name -> (display name, values)
        self._store: dict[str, tuple[str, list[str]]] = {}
        for name, value in (headers or {}).items():
            self.append(name, value)

    def set_header(self, name: str, value: str | Sequence[str]) -> None:
        """Replace all values of *name*.

        A sequence sets one header line per item; an empty sequence
        removes the header.
        """
        values = [value] if isinstance(value, str) else list(value)
        key = name.lower()
        if not values:
            self._store.pop(key, None)
            return
        display = self._store[key][0] if key in self._store else name
        self._store[key] = (display, values)

    def append(self, name: str, value: str) -> None:
        """Add a value to *name*, keeping existing ones."""
        key = name.lower()
        if key in self._store:
            self._store[key][1].append(value)
        else:
            self._store[key] = (name, [value])

    def remove_header(self, name: str) -> None:
        self._store.pop(name.lower(), None)

    def has_header(self, name: str) -> bool:
        return name.lower() in self._store

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, or an empty list."""
        entry = self._store.get(key.lower())
        return list(entry[1]) if entry else []

    def __getitem__(self, key: str) -> str:
        entry = self._store.get(key.lower())
        if entry is None:
            raise KeyError(key)
        return entry[1][0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._store

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._store))

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        items = ", ".join(f"{display!r}: {values!r}" for display, values in self._store.values())
        return f"ResponseHeaders({{{items}}})"

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Header byte pairs, one per value, for ASGI ``http.response.start``."""
        return tuple(
            (display.lower().encode("latin-1"), value.encode("latin-1"))
            for display, values in self._store.values()
            for value in values
        )
