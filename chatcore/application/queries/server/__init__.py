"""Server info queries."""

from chatcore.application.queries.server.get_server_info import (
    GetServerInfoQuery,
    GetServerInfoHandler,
)

__all__ = [
    "GetServerInfoQuery",
    "GetServerInfoHandler",
]
