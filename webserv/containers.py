"""A double-ended queue, list search by comparator, and an ordered int-to-str map."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

Comparator = Callable[[Any, Any], int]


def _equality(a: Any, b: Any) -> int:
    return 0 if a == b else 1


def index_of(
    items: Iterable[Any], content: Any, cmp: Optional[Comparator] = None
) -> int:
    """Position of the first item for which ``cmp(item, content)`` is zero.

    Without ``cmp`` items are compared with ``==``. Raises ValueError when
    no item matches.
    """
    compare = cmp or _equality
    for position, item in enumerate(items):
        if compare(item, content) == 0:
            return position
    raise ValueError(f"{content!r} not found")


class Deque:
    """A double-ended queue that silently ignores ``None`` contents."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque()
        for item in items:
            self.append_rear(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"

    def append_rear(self, content: Any) -> None:
        """Add ``content`` at the rear; ``None`` is ignored."""
        if content is not None:
            self._items.append(content)

    def append_head(self, content: Any) -> None:
        """Add ``content`` at the head; ``None`` is ignored."""
        if content is not None:
            self._items.appendleft(content)

    def pop_head(self) -> Any:
        """Remove and return the head item; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.popleft()

    def pop_rear(self) -> Any:
        """Remove and return the rear item; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.pop()

    def index(self, content: Any, cmp: Optional[Comparator] = None) -> int:
        """Position from the head of the first item matching ``content``."""
        return index_of(self._items, content, cmp)

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every item from the head onwards, passing each to ``delete``."""
        while self._items:
            content = self._items.popleft()
            if delete is not None:
                delete(content)


class IntStrDict:
    """A mapping from int keys to str values that keeps insertion order.

    Replacing the value of an existing key keeps the key's position.
    """

    def __init__(self) -> None:
        self._entries: dict[int, str] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)

    def items(self) -> Iterator[tuple[int, str]]:
        """Key and value pairs in insertion order."""
        return iter(self._entries.items())

    def get(self, key: int) -> Optional[str]:
        """Value stored under ``key``, or None when the key is absent."""
        return self._entries.get(key)

    def put(self, key: int, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if not isinstance(key, int):
            raise TypeError(f"key must be an int, got {type(key).__name__}")
        if not isinstance(value, str):
            raise TypeError(f"value must be a str, got {type(value).__name__}")
        self._entries[key] = value

    def render(self) -> str:
        """Text such as ``{2: "W", 3: "B"}`` listing the entries in order."""
        body = ", ".join(f'{key}: "{value}"' for key, value in self._entries.items())
        return "{" + body + "}"

    def __str__(self) -> str:
        return self.render()