"""Permission commands."""

from .toggle_permission import TogglePermissionCommand, TogglePermissionHandler

__all__ = [
    "TogglePermissionCommand",
    "TogglePermissionHandler",
]
