"""
StatusUpdate Query - unread activity for everything a user follows.

Reading the status moves the user's baselines forward: a second call right
after the first reports zero new messages.
"""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.dto.status import StatusUpdateDTO
from chatcore.application.model import Model
from chatcore.domain.value_objects.uuid import Uuid


@dataclass(frozen=True)
class StatusUpdateQuery(Query[StatusUpdateDTO]):
    user_id: Uuid


class StatusUpdateHandler(QueryHandler[StatusUpdateDTO]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, query: StatusUpdateQuery) -> StatusUpdateDTO:
        report = self._model.status_update(query.user_id)
        return StatusUpdateDTO(user_id=str(query.user_id), report=report)
