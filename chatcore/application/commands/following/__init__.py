"""Follow graph commands."""

from .follow_user import (
    FollowUserCommand,
    FollowUserHandler,
    UnfollowUserCommand,
    UnfollowUserHandler,
)
from .follow_conversation import (
    FollowConversationCommand,
    FollowConversationHandler,
    UnfollowConversationCommand,
    UnfollowConversationHandler,
)

__all__ = [
    "FollowUserCommand",
    "FollowUserHandler",
    "UnfollowUserCommand",
    "UnfollowUserHandler",
    "FollowConversationCommand",
    "FollowConversationHandler",
    "UnfollowConversationCommand",
    "UnfollowConversationHandler",
]
