"""GetServerInfo Query - version and uptime."""

from dataclasses import dataclass

from chatcore.application.common.interfaces import Query, QueryHandler
from chatcore.application.dto.status import ServerInfoDTO
from chatcore.application.model import Model


@dataclass(frozen=True)
class GetServerInfoQuery(Query[ServerInfoDTO]):
    pass


class GetServerInfoHandler(QueryHandler[ServerInfoDTO]):
    def __init__(self, model: Model):
        self._model = model

    def execute(self, query: GetServerInfoQuery) -> ServerInfoDTO:
        return ServerInfoDTO(
            version=self._model.version(),
            started_at=self._model.start_time(),
            uptime_seconds=self._model.uptime().total_seconds(),
        )
