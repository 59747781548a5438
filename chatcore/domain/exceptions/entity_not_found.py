"""
EntityNotFoundError - Raised when a required user, conversation or payload
is absent from the registry.
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)
