"""
AccessDeniedError - Raised when a user lacks the permission bits for an action.
"""


class AccessDeniedError(Exception):
    """Raised when user lacks permission to act on a conversation"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
