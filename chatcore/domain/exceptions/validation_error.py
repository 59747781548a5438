"""
DomainValidationError - Raised for malformed arguments such as out-of-range
permission bits or empty required text.
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
