"""
EntityRegistry - the authoritative catalog of users, conversations and messages.

Each entity type is exposed through three indices (id, creation time, text);
conversation payloads are looked up by id only. The registry inserts and looks
up, nothing more: business rules belong to the domain services and the model.
All stores share the registry lock, so a reader never sees an entity in one
index and missing from another.
"""

from __future__ import annotations

import threading
from datetime import datetime

from chatcore.domain.entities import (
    ConversationHeader,
    ConversationPayload,
    Message,
    User,
)
from chatcore.domain.exceptions import EntityNotFoundError
from chatcore.domain.value_objects.uuid import Uuid
from chatcore.infrastructure.store.multi_index_store import Store


def _text_key(text: str) -> str:
    return text.casefold()


class EntityRegistry:
    def __init__(self, lock: threading.RLock | None = None):
        self._lock = lock if lock is not None else threading.RLock()

        self.user_by_id: Store[Uuid, User] = self._store("user_by_id")
        self.user_by_time: Store[datetime, User] = self._store("user_by_time")
        self.user_by_text: Store[str, User] = self._store("user_by_text", _text_key)

        self.conversation_by_id: Store[Uuid, ConversationHeader] = self._store(
            "conversation_by_id"
        )
        self.conversation_by_time: Store[datetime, ConversationHeader] = self._store(
            "conversation_by_time"
        )
        self.conversation_by_text: Store[str, ConversationHeader] = self._store(
            "conversation_by_text", _text_key
        )

        self.conversation_payload_by_id: Store[Uuid, ConversationPayload] = (
            self._store("conversation_payload_by_id")
        )

        self.message_by_id: Store[Uuid, Message] = self._store("message_by_id")
        self.message_by_time: Store[datetime, Message] = self._store("message_by_time")
        self.message_by_text: Store[str, Message] = self._store(
            "message_by_text", _text_key
        )

    def _store(self, name: str, key=None) -> Store:
        return Store(key, name=name, lock=self._lock)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    # ==================== INSERTS ====================

    def _insert_all(self, value, *placements) -> None:
        """Insert value under every (store, key) pair, or under none of them."""
        with self._lock:
            for store, key in placements:
                store.check(key)
            for store, key in placements:
                store.insert(key, value)

    def add_user(self, user: User) -> User:
        self._insert_all(
            user,
            (self.user_by_id, user.id),
            (self.user_by_time, user.creation),
            (self.user_by_text, user.name),
        )
        return user

    def add_conversation(
        self, header: ConversationHeader, payload: ConversationPayload
    ) -> ConversationHeader:
        with self._lock:
            self.conversation_payload_by_id.check(payload.id)
            self._insert_all(
                header,
                (self.conversation_by_id, header.id),
                (self.conversation_by_time, header.creation),
                (self.conversation_by_text, header.title),
            )
            self.conversation_payload_by_id.insert(payload.id, payload)
        return header

    def add_message(self, message: Message) -> Message:
        self._insert_all(
            message,
            (self.message_by_id, message.id),
            (self.message_by_time, message.creation),
            (self.message_by_text, message.content),
        )
        return message

    # ==================== REQUIRED LOOKUPS ====================

    def require_user(self, user_id: Uuid) -> User:
        user = self.user_by_id.first(user_id)
        if user is None:
            raise EntityNotFoundError(f"User {user_id} not found")
        return user

    def require_conversation(self, conversation_id: Uuid) -> ConversationHeader:
        header = self.conversation_by_id.first(conversation_id)
        if header is None:
            raise EntityNotFoundError(f"Conversation {conversation_id} not found")
        return header

    def require_payload(self, conversation_id: Uuid) -> ConversationPayload:
        payload = self.conversation_payload_by_id.first(conversation_id)
        if payload is None:
            raise EntityNotFoundError(
                f"Conversation payload {conversation_id} not found"
            )
        return payload

    def require_message(self, message_id: Uuid) -> Message:
        message = self.message_by_id.first(message_id)
        if message is None:
            raise EntityNotFoundError(f"Message {message_id} not found")
        return message
