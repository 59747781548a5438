"""In-memory index stores and the registry composing them."""

from chatcore.infrastructure.store.multi_index_store import Store
from chatcore.infrastructure.store.entity_registry import EntityRegistry

__all__ = [
    "Store",
    "EntityRegistry",
]
