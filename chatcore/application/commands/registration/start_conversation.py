"""
Start Conversation Command.

The owner must already be registered; the new header starts with the owner
holding the OWNER bit and an empty payload.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.model import Model
from chatcore.config.settings import Config
from chatcore.domain.entities.conversation import ConversationHeader
from chatcore.domain.exceptions import DomainValidationError, EntityNotFoundError
from chatcore.domain.value_objects.uuid import Uuid


@dataclass(frozen=True)
class StartConversationCommand(Command[ConversationHeader]):
    owner_id: Uuid
    conversation_id: Uuid
    title: str
    creation: Optional[datetime] = None


class StartConversationHandler(CommandHandler[ConversationHeader]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, command: StartConversationCommand) -> ConversationHeader:
        title = command.title.strip()
        if not title:
            raise DomainValidationError("Conversation title cannot be empty")
        if len(title) > Config.TITLE_MAX_LENGTH:
            raise DomainValidationError(
                f"Title cannot exceed {Config.TITLE_MAX_LENGTH} characters"
            )

        owner = self._model.user_by_id().first(command.owner_id)
        if owner is None:
            raise EntityNotFoundError(f"User {command.owner_id} not found")

        header = ConversationHeader.create(
            command.conversation_id, owner.id, title, command.creation
        )
        return self._model.add_conversation(owner, header)
