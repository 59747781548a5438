"""Add Bot Command."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.model import Model
from chatcore.domain.entities.user import BotUser
from chatcore.domain.value_objects.uuid import Uuid


@dataclass(frozen=True)
class AddBotCommand(Command[BotUser]):
    bot: BotUser
    conversation_id: Uuid


class AddBotHandler(CommandHandler[BotUser]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, command: AddBotCommand) -> BotUser:
        return self._model.add_bot(command.bot, command.conversation_id)
