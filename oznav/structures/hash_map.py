"""Separate-chaining hash table used for adjacency and search bookkeeping.

AssociativeMap keeps its own bucket array instead of delegating to ``dict`` so
that bucket layout and resize points are fixed and reproducible:

- Initial bucket count is 19.
- After every insertion, if ``size >= 0.75 * bucket_count`` the bucket array
  doubles and every entry is rehashed.
- Bucket index is ``abs(hash(key)) % bucket_count``; ``None`` always lands in
  bucket 0 and only equals itself.

There is no delete operation. Lookups report a missing key through the
caller-supplied default (``get``/``get_or_default``) or ``KeyError``
(``m[key]``).
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")

INITIAL_CAPACITY = 19
LOAD_FACTOR = 0.75


class _Entry(Generic[K, V]):
    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value


def _keys_equal(a: object, b: object) -> bool:
    if a is None:
        return b is None
    return a == b


class AssociativeMap(Generic[K, V]):
    """Hash map with chained buckets and load-factor driven doubling."""

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._buckets: List[List[_Entry[K, V]]] = [[] for _ in range(capacity)]
        self._size = 0

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self._find(key) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key

    def __getitem__(self, key: K) -> V:
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key: K, value: V) -> None:
        self.put(key, value)

    def items(self) -> Iterator[Tuple[K, V]]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def put(self, key: K, value: V) -> None:
        """Insert ``key`` or overwrite its current value."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._insert(key, value)

    def put_if_absent(self, key: K, value: V) -> V:
        """Insert only when ``key`` is missing; return the value now stored."""
        entry = self._find(key)
        if entry is not None:
            return entry.value
        self._insert(key, value)
        return value

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        entry = self._find(key)
        return default if entry is None else entry.value

    def get_or_default(self, key: K, default: V) -> V:
        """Return the stored value, or ``default`` when the key is absent.

        Callers pass an "empty" default (for example ``()`` for adjacency
        lists) so a missing key reads as "no entries".
        """
        entry = self._find(key)
        return default if entry is None else entry.value

    def _index(self, key: object, bucket_count: int) -> int:
        if key is None:
            return 0
        return abs(hash(key)) % bucket_count

    def _find(self, key: K) -> Optional[_Entry[K, V]]:
        bucket = self._buckets[self._index(key, len(self._buckets))]
        for entry in bucket:
            if _keys_equal(entry.key, key):
                return entry
        return None

    def _insert(self, key: K, value: V) -> None:
        self._buckets[self._index(key, len(self._buckets))].append(_Entry(key, value))
        self._size += 1
        if self._size >= LOAD_FACTOR * len(self._buckets):
            self._resize()

    def _resize(self) -> None:
        new_count = len(self._buckets) * 2
        buckets: List[List[_Entry[K, V]]] = [[] for _ in range(new_count)]
        for bucket in self._buckets:
            for entry in bucket:
                buckets[self._index(entry.key, new_count)].append(entry)
        self._buckets = buckets

    def __repr__(self) -> str:
        return f"AssociativeMap(size={self._size}, buckets={len(self._buckets)})"
