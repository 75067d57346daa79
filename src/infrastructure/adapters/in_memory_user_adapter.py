"""
In-memory implementation of UserPort.

This is the concrete adapter binding the user port to the generic in-memory store.
"""

import logging

from src.domain.exceptions import UserNotFoundError
from src.domain.user import User
from src.domain.user_port import UserPort
from src.infrastructure.database.in_memory_database import InMemoryDatabase

logger = logging.getLogger(__name__)


class InMemoryUserAdapter(UserPort):
    """
    In-memory implementation of the UserPort interface.

    The adapter owns its store: a new, empty InMemoryDatabase is created with
    each adapter and lives as long as the adapter does.

    Decision: The store returns None for missing records; this adapter turns
    that absence into UserNotFoundError so the port contract stays explicit.
    """

    def __init__(self) -> None:
        """Initialize the adapter with an empty store."""
        self.database: InMemoryDatabase[User] = InMemoryDatabase[User]()

    async def get_by_id(self, user_id: str) -> User:
        """
        Get a user by ID.

        Args:
            user_id: The user's identifier

        Returns:
            The stored User

        Raises:
            UserNotFoundError: If no user has this ID
        """
        user = self.database.find_by_id(user_id)
        if user is None:
            logger.debug(f"User not found: {user_id}")
            raise UserNotFoundError(user_id)
        return user

    async def add(self, user: User) -> None:
        """Store a user (duplicate IDs are not rejected)."""
        self.database.create(user)
        logger.debug(f"Added user: {user.id}")
