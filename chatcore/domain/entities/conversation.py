"""
Conversation Entities.

A conversation is split in two records sharing one Uuid:
- ConversationHeader: title, owner, per-user permission bits and message count
- ConversationPayload: ordered message ids and attached bots
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from chatcore.domain.entities.user import BotUser
from chatcore.domain.value_objects.permission import Permission
from chatcore.domain.value_objects.uuid import Uuid


@dataclass(eq=False)
class ConversationHeader:
    id: Uuid
    owner: Uuid
    creation: datetime
    title: str
    permissions: dict[Uuid, int] = field(default_factory=dict)
    size: int = 0

    def __post_init__(self):
        # The creator starts as owner
        if not self.permissions:
            self.permissions[self.owner] = int(Permission.OWNER)

    @classmethod
    def create(
        cls,
        id: Uuid,
        owner: Uuid,
        title: str,
        creation: Optional[datetime] = None,
    ) -> ConversationHeader:
        return cls(
            id=id,
            owner=owner,
            creation=creation or datetime.now(timezone.utc),
            title=title,
        )

    def get_permission(self, user: Uuid) -> int:
        """Permission bits of a user; 0 for non-participants."""
        return self.permissions.get(user, 0)

    def toggle_permission(self, user: Uuid, bits: int) -> int:
        value = self.get_permission(user) ^ (bits & Permission.ALL)
        self.permissions[user] = int(value)
        return self.permissions[user]

    def is_member(self, user: Uuid) -> bool:
        return bool(self.get_permission(user) & Permission.MEMBER)

    def is_admin(self, user: Uuid) -> bool:
        return bool(self.get_permission(user) & Permission.ADMIN)

    def is_owner(self, user: Uuid) -> bool:
        return bool(self.get_permission(user) & Permission.OWNER)

    def participants(self) -> list[Uuid]:
        return sorted(user for user, bits in self.permissions.items() if bits)


@dataclass(eq=False)
class ConversationPayload:
    id: Uuid
    message_ids: list[Uuid] = field(default_factory=list)
    bots_by_id: dict[Uuid, BotUser] = field(default_factory=dict, repr=False)

    @property
    def first_message(self) -> Optional[Uuid]:
        return self.message_ids[0] if self.message_ids else None

    @property
    def last_message(self) -> Optional[Uuid]:
        return self.message_ids[-1] if self.message_ids else None

    @property
    def bots(self) -> list[BotUser]:
        return list(self.bots_by_id.values())

    def append(self, message_id: Uuid) -> None:
        self.message_ids.append(message_id)

    def add_bot(self, bot: BotUser) -> BotUser:
        self.bots_by_id.setdefault(bot.id, bot)
        return self.bots_by_id[bot.id]

    def __len__(self) -> int:
        return len(self.message_ids)
