"""Register User Command."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.model import Model
from chatcore.domain.entities.user import User
from chatcore.domain.exceptions import DomainValidationError
from chatcore.domain.value_objects.uuid import Uuid


@dataclass(frozen=True)
class RegisterUserCommand(Command[User]):
    user_id: Uuid
    name: str
    creation: Optional[datetime] = None


class RegisterUserHandler(CommandHandler[User]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, command: RegisterUserCommand) -> User:
        name = command.name.strip()
        if not name:
            raise DomainValidationError("User name cannot be empty")

        user = User.create(command.user_id, name, command.creation)
        return self._model.add_user(user)
