"""Conversation DTOs."""

from datetime import datetime
from pydantic import BaseModel

from chatcore.application.dto.message import MessageDTO
from chatcore.application.dto.user import UserDTO
from chatcore.domain.entities.conversation import ConversationHeader


class ConversationDTO(BaseModel):
    id: str
    title: str
    owner: str
    creation: datetime
    size: int

    @classmethod
    def from_entity(cls, header: ConversationHeader) -> "ConversationDTO":
        return cls(
            id=str(header.id),
            title=header.title,
            owner=str(header.owner),
            creation=header.creation,
            size=header.size,
        )


class ConversationDetailDTO(BaseModel):
    """Conversation metadata plus its messages, oldest first."""

    conversation: ConversationDTO
    messages: list[MessageDTO]
    participants: list[UserDTO] = []
    bots: list[str] = []
