"""
Model - composition root of the chat server state.

Owns one EntityRegistry and one ActivityTracker and delegates permission
rules to PermissionEngine. Every compound operation runs under the registry
lock, so cross-index inserts, message counting, permission toggles and
destructive status reads are serialized.

Failure policy:
- missing required entity  -> EntityNotFoundError
- post by a non-participant -> AccessDeniedError
- rejected permission toggle -> PERMISSION_DENIED sentinel (callers must check)
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from chatcore.config.settings import Config
from chatcore.domain.entities import (
    BotUser,
    ConversationHeader,
    ConversationPayload,
    Message,
    User,
)
from chatcore.domain.exceptions import AccessDeniedError, EntityNotFoundError
from chatcore.domain.ports.store_accessor import StoreAccessor
from chatcore.domain.services import ActivityTracker, PermissionEngine
from chatcore.domain.value_objects.permission import PERMISSION_DENIED
from chatcore.domain.value_objects.uuid import Uuid
from chatcore.infrastructure.store.entity_registry import EntityRegistry
from chatcore.observability.metrics import (
    MetricsEntity,
    MetricsToggleResult,
    record_entity_added,
    record_lookup_miss,
    record_permission_toggle,
    record_status_update,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Model:
    def __init__(
        self,
        registry: Optional[EntityRegistry] = None,
        tracker: Optional[ActivityTracker] = None,
        permissions: Optional[PermissionEngine] = None,
        version: str = Config.SERVER_VERSION,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._registry = registry or EntityRegistry()
        self._lock = self._registry.lock
        self._tracker = tracker or ActivityTracker(self._lock)
        self._permissions = permissions or PermissionEngine()
        self._version = version
        self._clock = clock
        self._start_time = clock()

    @property
    def permissions(self) -> PermissionEngine:
        return self._permissions

    # ==================== REGISTRATION ====================

    def add_user(self, user: User) -> User:
        with self._lock:
            self._registry.add_user(user)
            self._tracker.register(user.id)
        record_entity_added(MetricsEntity.USER)
        logger.info(f"[Model] Added user {user.id} ({user.name})")
        return user

    def add_conversation(
        self, user: User, header: ConversationHeader
    ) -> ConversationHeader:
        with self._lock:
            self._registry.add_conversation(header, ConversationPayload(header.id))
            user.add_created_conversation(header.id)
        record_entity_added(MetricsEntity.CONVERSATION)
        logger.info(
            f"[Model] Added conversation {header.id} ({header.title}) by {user.id}"
        )
        return header

    def add_message(self, message: Message) -> Message:
        """Index a message. Linking it into a conversation is append_message's job."""
        self._registry.add_message(message)
        record_entity_added(MetricsEntity.MESSAGE)
        return message

    def append_message(self, conversation_id: Uuid, message: Message) -> Message:
        """Index a message, append it to the conversation chain and count it."""
        with self._lock:
            header = self._conversation(conversation_id)
            payload = self._payload(conversation_id)
            self.add_message(message)
            payload.append(message.id)
            header.size += 1
        logger.debug(f"[Model] Appended message {message.id} to {conversation_id}")
        return message

    def post_message(self, conversation_id: Uuid, message: Message) -> Message:
        """append_message for participants only, checked under the same lock."""
        with self._lock:
            header = self._conversation(conversation_id)
            if not self._permissions.is_participant(header, message.author):
                raise AccessDeniedError(
                    f"User {message.author} has no permission to add messages"
                )
            return self.append_message(conversation_id, message)

    def conversation_messages(self, conversation_id: Uuid) -> list[Message]:
        """Messages of a conversation from the head of its chain."""
        with self._lock:
            payload = self._payload(conversation_id)
            return [
                self._registry.require_message(message_id)
                for message_id in payload.message_ids
            ]

    def add_bot(self, bot: BotUser, conversation_id: Uuid) -> BotUser:
        with self._lock:
            payload = self._payload(conversation_id)
            payload.add_bot(bot)
        record_entity_added(MetricsEntity.BOT)
        logger.info(f"[Model] Attached bot {bot.id} to {conversation_id}")
        return bot

    # ==================== PERMISSIONS ====================

    def toggle_permission(
        self, actor: Uuid, target: Uuid, permission: int, conversation_id: Uuid
    ) -> int:
        with self._lock:
            header = self._conversation(conversation_id)
            result = self._permissions.toggle(header, actor, target, permission)
        record_permission_toggle(
            MetricsToggleResult.DENIED
            if result == PERMISSION_DENIED
            else MetricsToggleResult.GRANTED
        )
        return result

    # ==================== FOLLOW GRAPH ====================

    def follow_user(self, follower_id: Uuid, followed_id: Uuid) -> None:
        with self._lock:
            follower = self._user(follower_id)
            followed = self._user(followed_id)
            self._tracker.follow_user(follower, followed)

    def unfollow_user(self, follower_id: Uuid, followed_id: Uuid) -> bool:
        with self._lock:
            follower = self._user(follower_id)
            followed = self._user(followed_id)
            return self._tracker.unfollow_user(follower, followed)

    def follow_conversation(self, user_id: Uuid, conversation_id: Uuid) -> None:
        with self._lock:
            self._user(user_id)
            header = self._conversation(conversation_id)
            self._tracker.follow_conversation(user_id, header)

    def unfollow_conversation(self, user_id: Uuid, conversation_id: Uuid) -> bool:
        with self._lock:
            self._user(user_id)
            return self._tracker.unfollow_conversation(user_id, conversation_id)

    def status_update(self, user_id: Uuid) -> str:
        with self._lock:
            user = self._user(user_id)
            report = self._tracker.status_update(
                user, self._registry.conversation_by_id, self._registry.user_by_id
            )
        record_status_update()
        return report

    def tracked_conversations(self, user_id: Uuid) -> dict[Uuid, int]:
        return self._tracker.tracked_conversations(user_id)

    def followed_users(self, user_id: Uuid) -> dict[Uuid, int]:
        return self._tracker.followed_users(user_id)

    # ==================== SERVER INFO ====================

    def version(self) -> str:
        return self._version

    def start_time(self) -> datetime:
        return self._start_time

    def uptime(self) -> timedelta:
        return self._clock() - self._start_time

    # ==================== ACCESSORS ====================

    def user_by_id(self) -> StoreAccessor[Uuid, User]:
        return self._registry.user_by_id

    def user_by_time(self) -> StoreAccessor[datetime, User]:
        return self._registry.user_by_time

    def user_by_text(self) -> StoreAccessor[str, User]:
        return self._registry.user_by_text

    def conversation_by_id(self) -> StoreAccessor[Uuid, ConversationHeader]:
        return self._registry.conversation_by_id

    def conversation_by_time(self) -> StoreAccessor[datetime, ConversationHeader]:
        return self._registry.conversation_by_time

    def conversation_by_text(self) -> StoreAccessor[str, ConversationHeader]:
        return self._registry.conversation_by_text

    def conversation_payload_by_id(self) -> StoreAccessor[Uuid, ConversationPayload]:
        return self._registry.conversation_payload_by_id

    def message_by_id(self) -> StoreAccessor[Uuid, Message]:
        return self._registry.message_by_id

    def message_by_time(self) -> StoreAccessor[datetime, Message]:
        return self._registry.message_by_time

    def message_by_text(self) -> StoreAccessor[str, Message]:
        return self._registry.message_by_text

    # ==================== HELPERS ====================

    def _user(self, user_id: Uuid) -> User:
        return self._require(MetricsEntity.USER, self._registry.require_user, user_id)

    def _conversation(self, conversation_id: Uuid) -> ConversationHeader:
        return self._require(
            MetricsEntity.CONVERSATION,
            self._registry.require_conversation,
            conversation_id,
        )

    def _payload(self, conversation_id: Uuid) -> ConversationPayload:
        return self._require(
            MetricsEntity.CONVERSATION, self._registry.require_payload, conversation_id
        )

    @staticmethod
    def _require(entity: str, lookup, key: Uuid):
        try:
            return lookup(key)
        except EntityNotFoundError:
            record_lookup_miss(entity)
            logger.warning(f"[Model] Missing {entity} {key}")
            raise
