"""Status queries."""

from chatcore.application.queries.status.status_update import (
    StatusUpdateQuery,
    StatusUpdateHandler,
)

__all__ = [
    "StatusUpdateQuery",
    "StatusUpdateHandler",
]
