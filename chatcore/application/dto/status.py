"""Status and server info DTOs."""

from datetime import datetime
from pydantic import BaseModel


class StatusUpdateDTO(BaseModel):
    user_id: str
    report: str

    @property
    def lines(self) -> list[str]:
        return self.report.splitlines()


class ServerInfoDTO(BaseModel):
    version: str
    started_at: datetime
    uptime_seconds: float
