"""
Base interfaces for CQRS pattern.

Handlers are synchronous: the model is in-memory and no operation waits.

Usage:
    @dataclass(frozen=True)
    class FollowUserCommand(Command[None]):
        follower_id: Uuid
        followed_id: Uuid

    class FollowUserHandler(CommandHandler[None]):
        def __init__(self, model: Model):
            self._model = model

        def execute(self, command: FollowUserCommand) -> None:
            self._model.follow_user(command.follower_id, command.followed_id)
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
