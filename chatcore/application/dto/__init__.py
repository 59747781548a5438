"""
DTOs - Data Transfer Objects

Shapes handed to the command/transport layer:
- user.py         → UserDTO
- conversation.py → ConversationDTO, ConversationDetailDTO
- message.py      → MessageDTO
- status.py       → StatusUpdateDTO, ServerInfoDTO

Note: These are different from domain entities.
DTOs are for input/output, entities are for business logic.
"""

from chatcore.application.dto.user import UserDTO
from chatcore.application.dto.message import MessageDTO
from chatcore.application.dto.conversation import ConversationDTO, ConversationDetailDTO
from chatcore.application.dto.status import StatusUpdateDTO, ServerInfoDTO

__all__ = [
    "UserDTO",
    "MessageDTO",
    "ConversationDTO",
    "ConversationDetailDTO",
    "StatusUpdateDTO",
    "ServerInfoDTO",
]
