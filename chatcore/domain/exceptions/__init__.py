"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain and application logic and caught by
whatever command or transport layer sits on top of the model.
"""

from chatcore.domain.exceptions.entity_not_found import EntityNotFoundError
from chatcore.domain.exceptions.access_denied import AccessDeniedError
from chatcore.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
]
