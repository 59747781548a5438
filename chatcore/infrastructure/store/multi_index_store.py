"""
Store - ordered, multi-valued index over one projection of an entity.

Keys are normalized by an optional key function (e.g. str.casefold for
case-insensitive text) and kept in a sorted list for range queries; values
live in per-key buckets in insertion order. Duplicate keys are allowed.

Every read returns a snapshot list taken under the store lock. A registry
shares one lock across all of its stores so a multi-index insert is atomic
for readers.
"""

from __future__ import annotations

import bisect
import logging
import threading
from typing import Callable, Generic, Optional, TypeVar

from chatcore.domain.ports.store_accessor import StoreAccessor

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


def _identity(key):
    return key


class Store(StoreAccessor[K, V], Generic[K, V]):
    def __init__(
        self,
        key: Optional[Callable[[K], object]] = None,
        *,
        name: str = "",
        lock: Optional[threading.RLock] = None,
    ):
        self._normalize = key or _identity
        self._name = name or "store"
        self._lock = lock if lock is not None else threading.RLock()
        self._keys: list = []  # sorted, unique normalized keys
        self._buckets: dict = {}  # normalized key -> [values] in insertion order
        self._size = 0

    @property
    def name(self) -> str:
        return self._name

    def check(self, key: K) -> None:
        """Raise if key cannot be placed in this index. Never mutates."""
        norm = self._normalize(key)
        with self._lock:
            if norm not in self._buckets:
                bisect.bisect_right(self._keys, norm)

    def insert(self, key: K, value: V) -> None:
        norm = self._normalize(key)
        with self._lock:
            bucket = self._buckets.get(norm)
            if bucket is None:
                bisect.insort(self._keys, norm)
                bucket = self._buckets[norm] = []
            bucket.append(value)
            self._size += 1
        logger.debug(f"[Store:{self._name}] Inserted value under {key!r}")

    def first(self, key: K) -> Optional[V]:
        with self._lock:
            bucket = self._buckets.get(self._normalize(key))
            return bucket[0] if bucket else None

    def at(self, key: K) -> list[V]:
        with self._lock:
            return list(self._buckets.get(self._normalize(key), ()))

    def all(self) -> list[V]:
        with self._lock:
            return self._collect(0, len(self._keys))

    def after(self, start: K) -> list[V]:
        """Values with key >= start, in key order."""
        with self._lock:
            lo = bisect.bisect_left(self._keys, self._normalize(start))
            return self._collect(lo, len(self._keys))

    def before(self, end: K) -> list[V]:
        """Values with key <= end, in key order."""
        with self._lock:
            hi = bisect.bisect_right(self._keys, self._normalize(end))
            return self._collect(0, hi)

    def range(self, start: K, end: K) -> list[V]:
        """Values with start <= key <= end, in key order."""
        with self._lock:
            lo = bisect.bisect_left(self._keys, self._normalize(start))
            hi = bisect.bisect_right(self._keys, self._normalize(end))
            return self._collect(lo, hi) if lo < hi else []

    def prefix(self, text: str) -> list[V]:
        """Values whose (normalized) text key starts with text. Text indices only."""
        norm = self._normalize(text)
        with self._lock:
            lo = bisect.bisect_left(self._keys, norm)
            hi = lo
            while hi < len(self._keys) and self._keys[hi].startswith(norm):
                hi += 1
            return self._collect(lo, hi)

    def _collect(self, lo: int, hi: int) -> list[V]:
        values: list[V] = []
        for norm in self._keys[lo:hi]:
            values.extend(self._buckets[norm])
        return values

    def __len__(self) -> int:
        with self._lock:
            return self._size

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return self._normalize(key) in self._buckets
