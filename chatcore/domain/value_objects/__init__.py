"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Is compared by value, not by identity
- Is immutable
- Validates itself on creation
"""

from chatcore.domain.value_objects.uuid import Uuid, UuidGenerator
from chatcore.domain.value_objects.permission import Permission, PERMISSION_DENIED

__all__ = [
    "Uuid",
    "UuidGenerator",
    "Permission",
    "PERMISSION_DENIED",
]
