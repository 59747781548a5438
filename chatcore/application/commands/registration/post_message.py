"""
Post Message Command.

Indexes the message, appends it to the conversation chain and bumps the
conversation size in one step. Only participants (any permission bit) may post;
the check and the append happen under the model lock.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.model import Model
from chatcore.domain.entities.message import Message
from chatcore.domain.exceptions import DomainValidationError
from chatcore.domain.value_objects.uuid import Uuid


@dataclass(frozen=True)
class PostMessageCommand(Command[Message]):
    conversation_id: Uuid
    message_id: Uuid
    author_id: Uuid
    content: str
    creation: Optional[datetime] = None


class PostMessageHandler(CommandHandler[Message]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, command: PostMessageCommand) -> Message:
        """
        Raises:
            DomainValidationError: If the content is blank
            EntityNotFoundError: If the conversation doesn't exist
            AccessDeniedError: If the author holds no permission in it
        """
        if not command.content.strip():
            raise DomainValidationError("Messages must contain text")

        message = Message.create(
            command.message_id, command.author_id, command.content, command.creation
        )
        return self._model.post_message(command.conversation_id, message)
