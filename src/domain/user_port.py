"""
User port interface.

This interface defines the contract the application needs for user storage.
Following Hexagonal Architecture, the domain defines the interface,
and the infrastructure layer provides the implementation.
"""

from abc import ABC, abstractmethod

from src.domain.user import User


class UserPort(ABC):
    """
    Abstract port for User storage.

    This is a "port" in Hexagonal Architecture terminology.
    The infrastructure layer provides the concrete "adapter" implementation.
    """

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User:
        """
        Get a user by their ID.

        Args:
            user_id: The user's identifier

        Returns:
            The User entity

        Raises:
            UserNotFoundError: If no user has this ID
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> None:
        """
        Store a new user.

        Args:
            user: The user entity to store
        """
        pass
