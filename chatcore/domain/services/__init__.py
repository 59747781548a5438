"""
DOMAIN SERVICES - Pure domain logic (no I/O)
"""

from chatcore.domain.services.permission_engine import PermissionEngine
from chatcore.domain.services.activity_tracker import ActivityTracker

__all__ = [
    "PermissionEngine",
    "ActivityTracker",
]
