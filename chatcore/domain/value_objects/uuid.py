"""
Uuid Value Object - Hierarchical identifier.

A Uuid is a numeric id under an optional parent ("root") Uuid. Ordering is by
id first, then recursively by root, with a missing root ordering before any
present one.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional


@total_ordering
@dataclass(frozen=True)
class Uuid:
    id: int
    root: Optional[Uuid] = None

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError(f"Uuid id must be an integer: {self.id!r}")
        if self.id < 0:
            raise ValueError(f"Uuid id cannot be negative: {self.id}")

    def sort_key(self) -> tuple:
        # () sorts before any non-empty tuple, so a missing root comes first
        return (self.id, self.root.sort_key() if self.root is not None else ())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Uuid):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def chain(self) -> list[int]:
        """Ids from the outermost root down to this one."""
        ids = [] if self.root is None else self.root.chain()
        ids.append(self.id)
        return ids

    def __str__(self) -> str:
        return ".".join(str(part) for part in self.chain())

    @classmethod
    def parse(cls, text: str) -> Uuid:
        if not text or not text.strip():
            raise ValueError("Uuid text cannot be empty")
        current: Optional[Uuid] = None
        for part in text.strip().split("."):
            try:
                current = cls(int(part), current)
            except ValueError as exc:
                raise ValueError(f"Invalid Uuid text: {text!r}") from exc
        return current


class UuidGenerator:
    """Issues monotonically increasing Uuids under a fixed root."""

    def __init__(self, root: Optional[Uuid] = None, start: int = 1):
        self._root = root
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def make(self) -> Uuid:
        with self._lock:
            return Uuid(next(self._counter), self._root)
