from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from typing import Any


class OsmTags(Mapping[str, str]):
    """Element tags; repeated keys keep the last value, equality ignores order."""

    __slots__ = ("_items", "_read_only")

    def __init__(
        self,
        items: Mapping[str, str] | Iterable[tuple[str, str]] = (),
        read_only: bool = False,
    ) -> None:
        if isinstance(items, Mapping):
            items = items.items()
        self._items: dict[str, str] = dict(items)
        self._read_only = read_only

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, OsmTags):
            return self._items == other._items
        if isinstance(other, Mapping):
            return self._items == dict(other.items())
        return NotImplemented

    def __hash__(self) -> int:
        if not self._read_only:
            raise TypeError("unhashable type: writable 'OsmTags'")
        return hash(frozenset(self._items.items()))

    def __repr__(self) -> str:
        return f"OsmTags({self._items!r})"

    @property
    def read_only(self) -> bool:
        return self._read_only

    def is_empty(self) -> bool:
        return not self._items

    def insert(self, key: str, value: str) -> str | None:
        """Set ``key`` to ``value`` and return the value it replaced, if any."""
        if self._read_only:
            raise TypeError("Tags attached to an element are read-only")
        previous = self._items.get(key)
        self._items[key] = value
        return previous

    def copy(self) -> OsmTags:
        return OsmTags(self._items)

    def frozen(self) -> OsmTags:
        """Return an independent read-only copy."""
        return OsmTags(self._items, read_only=True)
