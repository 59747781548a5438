"""
GetConversationMessages Query - conversation with its messages.

Loads the conversation header, checks the reader holds some permission in it,
then walks the message chain from the head (latest `limit` messages, oldest
first). Participants are listed in identifier order.
"""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.dto.conversation import (
    ConversationDTO,
    ConversationDetailDTO,
)
from chatcore.application.dto.message import MessageDTO
from chatcore.application.dto.user import UserDTO
from chatcore.application.model import Model
from chatcore.config.settings import Config
from chatcore.domain.exceptions import AccessDeniedError, EntityNotFoundError
from chatcore.domain.value_objects.uuid import Uuid


@dataclass(frozen=True)
class GetConversationMessagesQuery(Query[ConversationDetailDTO]):
    conversation_id: Uuid
    user_id: Uuid
    limit: int = Config.CONVERSATION_MESSAGE_LIMIT


class GetConversationMessagesHandler(QueryHandler[ConversationDetailDTO]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, query: GetConversationMessagesQuery) -> ConversationDetailDTO:
        """
        Raises:
            EntityNotFoundError: If the conversation doesn't exist
            AccessDeniedError: If the user holds no permission in it
        """
        header = self._model.conversation_by_id().first(query.conversation_id)
        if header is None:
            raise EntityNotFoundError(f"Conversation {query.conversation_id} not found")

        if not self._model.permissions.is_participant(header, query.user_id):
            raise AccessDeniedError("You do not have permission to view this content")

        messages = self._model.conversation_messages(query.conversation_id)
        messages = messages[-query.limit :] if query.limit > 0 else []
        payload = self._model.conversation_payload_by_id().first(query.conversation_id)
        users = self._model.user_by_id()
        participants = [users.first(user_id) for user_id in header.participants()]

        return ConversationDetailDTO(
            conversation=ConversationDTO.from_entity(header),
            messages=[MessageDTO.from_entity(message) for message in messages],
            participants=[
                UserDTO.from_entity(user) for user in participants if user is not None
            ],
            bots=[str(bot.id) for bot in payload.bots] if payload else [],
        )
