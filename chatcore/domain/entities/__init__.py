"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique Uuid that never changes after insertion
- Has behavior (methods)
- Pure Python dataclasses
"""

from chatcore.domain.entities.user import User, BotUser
from chatcore.domain.entities.conversation import ConversationHeader, ConversationPayload
from chatcore.domain.entities.message import Message

__all__ = [
    "User",
    "BotUser",
    "ConversationHeader",
    "ConversationPayload",
    "Message",
]
