"""
List Conversations Query.

Without a prefix, conversations come back in creation order; with one, in
case-insensitive title order restricted to titles starting with the prefix.
"""

from dataclasses import dataclass
from itertools import islice
from typing import Optional

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.dto.conversation import ConversationDTO
from chatcore.application.model import Model
from chatcore.config.settings import Config


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[ConversationDTO]]):
    limit: int = Config.CONVERSATION_LIST_LIMIT
    title_prefix: Optional[str] = None


class ListConversationsHandler(QueryHandler[list[ConversationDTO]]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, query: ListConversationsQuery) -> list[ConversationDTO]:
        if query.title_prefix:
            headers = self._model.conversation_by_text().prefix(query.title_prefix)
        else:
            headers = self._model.conversation_by_time().all()
        return [
            ConversationDTO.from_entity(header)
            for header in islice(headers, max(query.limit, 0))
        ]
