"""User DTOs."""

from datetime import datetime
from pydantic import BaseModel

from chatcore.domain.entities.user import User


class UserDTO(BaseModel):
    id: str
    name: str
    creation: datetime
    follows: list[str] = []

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=str(user.id),
            name=user.name,
            creation=user.creation,
            follows=[str(other) for other in sorted(user.follows)],
        )
