"""
Permission Value Object - Conversation permission bits.

Bits are independent: a participant may hold any subset. Requests are built
by XOR-combining bit names and applied to a participant by XOR as well, so
repeating a request undoes it.
"""

from __future__ import annotations

from enum import IntFlag
from typing import Iterable

from chatcore.domain.exceptions.validation_error import DomainValidationError

# Sentinel returned by a rejected permission toggle
PERMISSION_DENIED = -1


class Permission(IntFlag):
    NONE = 0
    MEMBER = 0b001
    ADMIN = 0b010
    OWNER = 0b100
    ALL = 0b111

    @classmethod
    def from_names(cls, names: Iterable[str]) -> int:
        """Combine bit names ("member", "admin", "owner") into a request."""
        lookup = {"member": cls.MEMBER, "admin": cls.ADMIN, "owner": cls.OWNER}
        request = 0
        for name in names:
            bit = lookup.get(name.strip().lower())
            if bit is None:
                raise DomainValidationError(f"Unknown permission: {name!r}")
            request ^= bit
        return int(request)

    @classmethod
    def validate(cls, value: int) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DomainValidationError(f"Permission must be an integer: {value!r}")
        if value < 0 or value & ~int(cls.ALL):
            raise DomainValidationError(
                f"Permission bits out of range (0..{int(cls.ALL)}): {value}"
            )
        return value
