"""A hash table of key-value pairs using bucket chaining."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from cslib.gtypes import real_to_string
from cslib.hashing import hash_code

INITIAL_BUCKET_COUNT = 101
MAX_LOAD_PERCENTAGE = 70


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return real_to_string(value)
    return str(value)


class HashMap:
    """An association between keys and values kept in a chained hash table.

    Keys must be supported by :func:`cslib.hashing.hash_code`.  Iteration
    visits the buckets in order and, within a bucket, the most recently
    inserted entry first, so the order looks arbitrary but is deterministic.
    """

    def __init__(self) -> None:
        self._create_buckets(INITIAL_BUCKET_COUNT)

    def _create_buckets(self, n_buckets: int) -> None:
        n_buckets = max(n_buckets, 1)
        self._buckets: list[list[list[Any]]] = [[] for _ in range(n_buckets)]
        self._size = 0

    def _bucket_index(self, key: Any) -> int:
        return hash_code(key) % len(self._buckets)

    def _find_cell(self, key: Any) -> list[Any] | None:
        for cell in self._buckets[self._bucket_index(key)]:
            if cell[0] == key:
                return cell
        return None

    def _expand_and_rehash(self) -> None:
        old = self._buckets
        self._create_buckets(len(old) * 2 + 1)
        for chain in old:
            for key, value in chain:
                self.put(key, value)

    def put(self, key: Any, value: Any) -> None:
        """Associate key with value, replacing any earlier value."""
        cell = self._find_cell(key)
        if cell is not None:
            cell[1] = value
            return
        if self._size > MAX_LOAD_PERCENTAGE * len(self._buckets) / 100.0:
            self._expand_and_rehash()
        self._buckets[self._bucket_index(key)].insert(0, [key, value])
        self._size += 1

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value for key, or default if the key is absent."""
        cell = self._find_cell(key)
        return default if cell is None else cell[1]

    def contains_key(self, key: Any) -> bool:
        """Return True if the map has an entry for key."""
        return self._find_cell(key) is not None

    def remove(self, key: Any) -> None:
        """Remove any entry for key; an absent key is ignored."""
        chain = self._buckets[self._bucket_index(key)]
        for position, cell in enumerate(chain):
            if cell[0] == key:
                del chain[position]
                self._size -= 1
                return

    def clear(self) -> None:
        """Remove every entry."""
        for chain in self._buckets:
            chain.clear()
        self._size = 0

    def keys(self) -> list[Any]:
        """Return the keys in iteration order."""
        return list(self)

    def values(self) -> list[Any]:
        """Return the values in the same order as keys()."""
        return [value for _, value in self.items()]

    def items(self) -> list[tuple[Any, Any]]:
        """Return (key, value) pairs in iteration order."""
        return [(key, value) for chain in self._buckets for key, value in chain]

    def is_empty(self) -> bool:
        """Return True if the map holds no entries."""
        return self._size == 0

    def map_all(self, fn: Callable[[Any, Any], Any]) -> None:
        """Call fn(key, value) for every entry."""
        for key, value in self.items():
            fn(key, value)

    def copy(self) -> HashMap:
        """Return an independent map with the same entries."""
        clone = HashMap()
        clone._create_buckets(len(self._buckets))
        for key, value in self.items():
            clone.put(key, value)
        return clone

    def __getitem__(self, key: Any) -> Any:
        cell = self._find_cell(key)
        if cell is None:
            raise KeyError(key)
        return cell[1]

    def __setitem__(self, key: Any, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: Any) -> None:
        if not self.contains_key(key):
            raise KeyError(key)
        self.remove(key)

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter([key for chain in self._buckets for key, _ in chain])

    def __str__(self) -> str:
        return (
            "{"
            + ", ".join(
                f"{_format_value(k)}:{_format_value(v)}" for k, v in self.items()
            )
            + "}"
        )

    def __repr__(self) -> str:
        return f"HashMap({self})"