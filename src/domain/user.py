"""
User entity.

Represents the User aggregate root in our domain model.
Holds identity, username and the hashed password.
"""

from datetime import UTC, datetime

import bcrypt

from src.domain.exceptions import PasswordTooLongError

# Factory default only; the application passes settings.bcrypt_rounds
BCRYPT_ROUNDS = 12

# bcrypt only hashes the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class User:
    """
    User aggregate root.

    Attributes:
        id: Unique identifier for the user (chosen by the caller)
        username: Display / login name
        password_hash: Bcrypt hash of the user's password
        created_at: When the user was created
    """

    def __init__(
        self,
        id: str,
        username: str,
        password_hash: str,
        created_at: datetime | None = None,
    ):
        """
        Initialize a User entity.

        Args:
            id: Unique identifier
            username: User's name
            password_hash: Hashed password
            created_at: Creation timestamp

        Note: This constructor is primarily for reconstructing entities from storage.
        Use the 'create' class method for creating new users from a plain password.
        """
        self.id = id
        self.username = username
        self.password_hash = password_hash
        self.created_at = created_at or datetime.now(UTC)

    @classmethod
    def create(
        cls, id: str, username: str, password: str, rounds: int = BCRYPT_ROUNDS
    ) -> "User":
        """
        Create a new user from a plain text password.

        Args:
            id: User's identifier
            username: User's name
            password: Plain text password (will be hashed)
            rounds: Bcrypt cost factor (callers pass the configured value)

        Returns:
            A new User entity

        Raises:
            PasswordTooLongError: If the encoded password exceeds 72 bytes

        Decision: Passwords never live on the entity in plain text. bcrypt
        handles salting automatically.
        """
        password_bytes = password.encode("utf-8")
        if len(password_bytes) > MAX_PASSWORD_BYTES:
            raise PasswordTooLongError(MAX_PASSWORD_BYTES)

        salt = bcrypt.gensalt(rounds=rounds)
        password_hash = bcrypt.hashpw(password_bytes, salt).decode("utf-8")

        return cls(
            id=id,
            username=username,
            password_hash=password_hash,
            created_at=datetime.now(UTC),
        )

    def verify_password(self, password: str) -> bool:
        """
        Verify a password against the stored hash.

        Args:
            password: Plain text password to verify

        Returns:
            True if password matches, False otherwise
        """
        password_bytes = password.encode("utf-8")
        if len(password_bytes) > MAX_PASSWORD_BYTES:
            return False
        hash_bytes = self.password_hash.encode("utf-8")
        is_pwd_match: bool = bcrypt.checkpw(password_bytes, hash_bytes)
        return is_pwd_match

    def __eq__(self, other: object) -> bool:
        """
        Compare users by their ID.

        In DDD, entities are equal if they have the same identity.
        """
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, username={self.username!r})"
