"""
Message Entity - A single message posted to a conversation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from chatcore.domain.value_objects.uuid import Uuid


@dataclass(frozen=True)
class Message:
    id: Uuid
    author: Uuid
    content: str
    creation: datetime

    @classmethod
    def create(
        cls,
        id: Uuid,
        author: Uuid,
        content: str,
        creation: Optional[datetime] = None,
    ) -> Message:
        """Factory method stamping the creation time when none is given."""
        return cls(
            id=id,
            author=author,
            content=content,
            creation=creation or datetime.now(timezone.utc),
        )
