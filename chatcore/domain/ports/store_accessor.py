"""
StoreAccessor Port - Read-only, ordered view over one index.
Implementation: chatcore/infrastructure/store/multi_index_store.py
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class StoreAccessor(ABC, Generic[K, V]):
    @abstractmethod
    def first(self, key: K) -> Optional[V]: ...

    @abstractmethod
    def at(self, key: K) -> list[V]: ...

    @abstractmethod
    def all(self) -> list[V]: ...

    @abstractmethod
    def after(self, start: K) -> list[V]: ...

    @abstractmethod
    def before(self, end: K) -> list[V]: ...

    @abstractmethod
    def range(self, start: K, end: K) -> list[V]: ...

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __contains__(self, key: object) -> bool: ...
