"""Message DTOs."""

from datetime import datetime
from pydantic import BaseModel

from chatcore.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for a message inside a conversation listing."""

    id: str
    author: str
    content: str
    creation: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=str(message.id),
            author=str(message.author),
            content=message.content,
            creation=message.creation,
        )
