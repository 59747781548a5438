"""Follow / Unfollow Conversation Commands."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.model import Model
from chatcore.domain.value_objects.uuid import Uuid


@dataclass(frozen=True)
class FollowConversationCommand(Command[None]):
    user_id: Uuid
    conversation_id: Uuid


class FollowConversationHandler(CommandHandler[None]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, command: FollowConversationCommand) -> None:
        self._model.follow_conversation(command.user_id, command.conversation_id)


@dataclass(frozen=True)
class UnfollowConversationCommand(Command[bool]):
    user_id: Uuid
    conversation_id: Uuid


class UnfollowConversationHandler(CommandHandler[bool]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, command: UnfollowConversationCommand) -> bool:
        return self._model.unfollow_conversation(
            command.user_id, command.conversation_id
        )
