from __future__ import annotations

from collections.abc import Iterator


class OrderedRootSet:
    """Insertion-ordered set of root paths; duplicates are ignored."""

    def __init__(self) -> None:
        self._items: dict[str, None] = {}

    def add(self, path: str) -> None:
        self._items.setdefault(path, None)

    def to_list(self) -> list[str]:
        return list(self._items)

    def __contains__(self, path: object) -> bool:
        return path in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedRootSet({self.to_list()!r})"
