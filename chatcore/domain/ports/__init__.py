"""
PORTS - Interfaces that infrastructure implements

A port defines WHAT the domain needs from an index without saying how the
index is laid out. Domain services (the activity tracker) read entities only
through StoreAccessor, and the registry's Store implements it.
"""

from chatcore.domain.ports.store_accessor import StoreAccessor

__all__ = [
    "StoreAccessor",
]
