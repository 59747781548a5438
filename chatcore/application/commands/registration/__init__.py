"""Registration commands: users, conversations, messages and bots."""

from .register_user import RegisterUserCommand, RegisterUserHandler
from .start_conversation import StartConversationCommand, StartConversationHandler
from .post_message import PostMessageCommand, PostMessageHandler
from .add_bot import AddBotCommand, AddBotHandler

__all__ = [
    "RegisterUserCommand",
    "RegisterUserHandler",
    "StartConversationCommand",
    "StartConversationHandler",
    "PostMessageCommand",
    "PostMessageHandler",
    "AddBotCommand",
    "AddBotHandler",
]
