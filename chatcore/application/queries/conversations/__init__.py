"""Conversation-related queries."""

from chatcore.application.queries.conversations.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)
from chatcore.application.queries.conversations.get_conversation_messages import (
    GetConversationMessagesQuery,
    GetConversationMessagesHandler,
)

__all__ = [
    "ListConversationsQuery",
    "ListConversationsHandler",
    "GetConversationMessagesQuery",
    "GetConversationMessagesHandler",
]
