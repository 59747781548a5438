"""Follow / Unfollow User Commands."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Command, CommandHandler
from chatcore.application.model import Model
from chatcore.domain.value_objects.uuid import Uuid


@dataclass(frozen=True)
class FollowUserCommand(Command[None]):
    follower_id: Uuid
    followed_id: Uuid


class FollowUserHandler(CommandHandler[None]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, command: FollowUserCommand) -> None:
        self._model.follow_user(command.follower_id, command.followed_id)


@dataclass(frozen=True)
class UnfollowUserCommand(Command[bool]):
    follower_id: Uuid
    followed_id: Uuid


class UnfollowUserHandler(CommandHandler[bool]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, command: UnfollowUserCommand) -> bool:
        return self._model.unfollow_user(command.follower_id, command.followed_id)
