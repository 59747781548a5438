"""
ActivityTracker - per-user watch lists and unread counts.

For every user the tracker keeps:
- conversation id -> message count seen at the last follow/report (baseline)
- followed user id -> created-conversation count seen at the last follow/report

status_update() reports the growth since each baseline and then moves the
baselines to the current counts, so a report consumes what it shows.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from chatcore.domain.entities.conversation import ConversationHeader
from chatcore.domain.entities.user import User
from chatcore.domain.exceptions import EntityNotFoundError
from chatcore.domain.ports.store_accessor import StoreAccessor
from chatcore.domain.value_objects.uuid import Uuid

logger = logging.getLogger(__name__)

CONVERSATION_STATUS_LINE = "CONVERSATION {title}: You have {count} new messages!\n"
USER_STATUS_LINE = "USER {name}: You have {count} new conversations!\n"


class ActivityTracker:
    def __init__(self, lock: Optional[threading.RLock] = None):
        self._lock = lock if lock is not None else threading.RLock()
        self._conversations: dict[Uuid, dict[Uuid, int]] = {}
        self._users: dict[Uuid, dict[Uuid, int]] = {}

    def register(self, user_id: Uuid) -> None:
        """Start empty watch lists. Registering again discards the old ones."""
        with self._lock:
            self._conversations[user_id] = {}
            self._users[user_id] = {}

    def _conversation_map(self, user_id: Uuid) -> dict[Uuid, int]:
        tracked = self._conversations.get(user_id)
        if tracked is None:
            raise EntityNotFoundError(f"User {user_id} is not tracked")
        return tracked

    def _user_map(self, user_id: Uuid) -> dict[Uuid, int]:
        followed = self._users.get(user_id)
        if followed is None:
            raise EntityNotFoundError(f"User {user_id} is not tracked")
        return followed

    # ==================== CONVERSATIONS ====================

    def follow_conversation(self, user_id: Uuid, header: ConversationHeader) -> None:
        with self._lock:
            self._conversation_map(user_id)[header.id] = header.size
        logger.info(
            f"[Tracker] {user_id} follows conversation {header.id} at size {header.size}"
        )

    def unfollow_conversation(self, user_id: Uuid, conversation_id: Uuid) -> bool:
        with self._lock:
            removed = self._conversation_map(user_id).pop(conversation_id, None)
        return removed is not None

    def tracked_conversations(self, user_id: Uuid) -> dict[Uuid, int]:
        with self._lock:
            return dict(self._conversation_map(user_id))

    # ==================== USERS ====================

    def follow_user(self, follower: User, followed: User) -> None:
        with self._lock:
            follows = self._user_map(follower.id)
            follower.follow(followed.id)
            follows[followed.id] = len(followed.created_conversations)
        logger.info(f"[Tracker] {follower.id} follows user {followed.id}")

    def unfollow_user(self, follower: User, followed: User) -> bool:
        with self._lock:
            self._user_map(follower.id).pop(followed.id, None)
            return follower.unfollow(followed.id)

    def followed_users(self, user_id: Uuid) -> dict[Uuid, int]:
        with self._lock:
            return dict(self._user_map(user_id))

    # ==================== STATUS ====================

    def status_update(
        self,
        user: User,
        conversations: StoreAccessor[Uuid, ConversationHeader],
        users: StoreAccessor[Uuid, User],
    ) -> str:
        lines: list[str] = []
        with self._lock:
            tracked = self._conversation_map(user.id)
            for conversation_id in list(tracked):
                header = conversations.first(conversation_id)
                if header is None:
                    logger.warning(
                        f"[Tracker] Dropping missing conversation {conversation_id} "
                        f"from {user.id}"
                    )
                    del tracked[conversation_id]
                    continue
                lines.append(
                    CONVERSATION_STATUS_LINE.format(
                        title=header.title, count=header.size - tracked[conversation_id]
                    )
                )
                tracked[conversation_id] = header.size

            followed = self._user_map(user.id)
            for followed_id in list(followed):
                other = users.first(followed_id)
                if other is None:
                    logger.warning(
                        f"[Tracker] Dropping missing user {followed_id} from {user.id}"
                    )
                    del followed[followed_id]
                    continue
                created = len(other.created_conversations)
                lines.append(
                    USER_STATUS_LINE.format(
                        name=other.name, count=created - followed[followed_id]
                    )
                )
                followed[followed_id] = created
        return "".join(lines)
