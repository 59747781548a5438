"""
Toggle Permission Command.

The model reports a rejected toggle with the PERMISSION_DENIED sentinel; this
handler is the boundary where that becomes AccessDeniedError for the command
layer.
"""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.model import Model
from chatcore.domain.exceptions import AccessDeniedError
from chatcore.domain.value_objects.permission import Permission, PERMISSION_DENIED
from chatcore.domain.value_objects.uuid import Uuid


@dataclass(frozen=True)
class TogglePermissionCommand(Command[int]):
    actor_id: Uuid
    target_id: Uuid
    conversation_id: Uuid
    permission: int

    @classmethod
    def from_names(
        cls, actor_id: Uuid, target_id: Uuid, conversation_id: Uuid, names: list[str]
    ) -> "TogglePermissionCommand":
        return cls(actor_id, target_id, conversation_id, Permission.from_names(names))


class TogglePermissionHandler(CommandHandler[int]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, command: TogglePermissionCommand) -> int:
        requested = Permission.validate(command.permission)

        result = self._model.toggle_permission(
            command.actor_id, command.target_id, requested, command.conversation_id
        )
        if result == PERMISSION_DENIED:
            raise AccessDeniedError(
                f"User {command.actor_id} cannot change permissions of "
                f"{command.target_id}"
            )
        return result
