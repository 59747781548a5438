"""
User Entity - A registered chat user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from chatcore.domain.value_objects.uuid import Uuid


@dataclass(eq=False)
class User:
    id: Uuid
    name: str
    creation: datetime
    # Outgoing follow edges (directional)
    follows: set[Uuid] = field(default_factory=set)
    created_conversations: set[Uuid] = field(default_factory=set)

    def follow(self, other: Uuid) -> None:
        self.follows.add(other)

    def unfollow(self, other: Uuid) -> bool:
        if other not in self.follows:
            return False
        self.follows.discard(other)
        return True

    def add_created_conversation(self, conversation_id: Uuid) -> None:
        self.created_conversations.add(conversation_id)

    @classmethod
    def create(cls, id: Uuid, name: str, creation: Optional[datetime] = None) -> User:
        """Factory method stamping the creation time when none is given."""
        return cls(id=id, name=name, creation=creation or datetime.now(timezone.utc))


@dataclass(eq=False)
class BotUser(User):
    """Automated participant attached to a conversation payload."""

    description: str = ""
