"""
User application service.

Exposes the user use cases to the presentation layer. Both operations
delegate straight to the UserPort; the service only knows the port interface.
"""

from src.domain.user import User
from src.domain.user_port import UserPort


class UserApplicationService:
    """
    Application service for user lookup and creation.

    Decision: We use dependency injection for the port to keep the service
    independent of any storage adapter and easy to test with mocks.
    """

    def __init__(self, user_port: UserPort):
        """
        Initialize the service.

        Args:
            user_port: Port for user storage
        """
        self.user_port = user_port

    async def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        return await self.user_port.get_by_id(user_id)

    async def create_user(self, user: User) -> None:
        """Store a new user."""
        await self.user_port.add(user)
