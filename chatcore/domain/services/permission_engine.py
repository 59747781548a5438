"""
PermissionEngine - toggle and authorization rules for conversation permissions.

Hierarchy for authorization: member < admin < owner. Bits are independent, so
a participant may hold any subset; checks look at specific bits and nothing
implies anything else (an admin without the member bit is not a member).

Toggle protocol:
    diff = (requested ^ target) & ALL      # bits that differ from the request
    OWNER in diff  -> actor must hold OWNER
    MEMBER in diff -> actor must hold OWNER or ADMIN
    ADMIN in diff  -> no separate gate
On success the target's bits are XORed with the request; on rejection the
sentinel PERMISSION_DENIED is returned and nothing changes.
"""

import logging

from chatcore.domain.entities.conversation import ConversationHeader
from chatcore.domain.value_objects.permission import Permission, PERMISSION_DENIED
from chatcore.domain.value_objects.uuid import Uuid

logger = logging.getLogger(__name__)


class PermissionEngine:
    def toggle(
        self,
        header: ConversationHeader,
        actor: Uuid,
        target: Uuid,
        requested: int,
    ) -> int:
        source_perm = header.get_permission(actor)
        target_perm = header.get_permission(target)
        permission_diff = (requested ^ target_perm) & Permission.ALL

        if not self.can_flip(source_perm, permission_diff):
            logger.info(
                f"[Permissions] Denied {actor} toggling {requested:#05b} on {target} "
                f"in {header.id} (actor bits {source_perm:#05b})"
            )
            return PERMISSION_DENIED

        result = header.toggle_permission(target, requested & Permission.ALL)
        logger.debug(
            f"[Permissions] {actor} toggled {target} in {header.id}: "
            f"{target_perm:#05b} -> {result:#05b}"
        )
        return result

    @staticmethod
    def can_flip(source_perm: int, permission_diff: int) -> bool:
        if permission_diff & Permission.OWNER and not source_perm & Permission.OWNER:
            return False
        if permission_diff & Permission.MEMBER and not source_perm & (
            Permission.OWNER | Permission.ADMIN
        ):
            return False
        return True

    def has_permission(
        self, header: ConversationHeader, user: Uuid, required: int
    ) -> bool:
        """True when the user holds every bit in required."""
        return header.get_permission(user) & required == required

    def is_participant(self, header: ConversationHeader, user: Uuid) -> bool:
        return header.get_permission(user) != 0

    def is_member(self, header: ConversationHeader, user: Uuid) -> bool:
        return header.is_member(user)

    def is_admin(self, header: ConversationHeader, user: Uuid) -> bool:
        return header.is_admin(user)

    def is_owner(self, header: ConversationHeader, user: Uuid) -> bool:
        return header.is_owner(user)
