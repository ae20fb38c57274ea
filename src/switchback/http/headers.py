"""Immutable, case-insensitive HTTP headers.

Implements ``Mapping[str, str]``. Accepts the raw byte pairs of an
ASGI scope or plain string pairs; names are lower-cased once on the
way in.
"""

from collections.abc import Iterable, Iterator, Mapping


def _text(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns every value sent under a name.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[tuple[str | bytes, str | bytes]] = ()) -> None:
        normalized = tuple((_text(name).lower(), _text(value)) for name, value in items)
        object.__setattr__(self, "_items", normalized)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Headers is immutable")

    def __getitem__(self, key: str) -> str:
        wanted = key.lower()
        for name, value in self._items:
            if name == wanted:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        wanted = key.lower()
        return any(name == wanted for name, _ in self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(dict.fromkeys(name for name, _ in self._items))

    def __len__(self) -> int:
        return len(dict.fromkeys(name for name, _ in self._items))

    def __repr__(self) -> str:
        return f"Headers({list(self._items)!r})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in the order they were sent."""
        wanted = key.lower()
        return [value for name, value in self._items if name == wanted]

    def raw(self) -> list[tuple[bytes, bytes]]:
        """Header pairs encoded for an ASGI message."""
        return [(name.encode("latin-1"), value.encode("latin-1")) for name, value in self._items]
