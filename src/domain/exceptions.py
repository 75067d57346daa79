"""
Domain-specific exceptions.

These exceptions represent business rule violations and domain errors.
They are independent of infrastructure concerns.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    pass


class UserNotFoundError(DomainError):
    """Raised when a user cannot be found."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User with id '{user_id}' not found")


class PasswordTooLongError(DomainError):
    """Raised when a password exceeds what bcrypt can hash."""

    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes
        super().__init__(f"Password must be at most {max_bytes} bytes long")
