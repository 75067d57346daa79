"""
FastAPI dependency injection.

This module provides dependency injection for our application.
It's the glue that wires together our layers (domain, application, infrastructure).

Decision: Using FastAPI's dependency injection system provides:
1. Clean separation of concerns
2. Easy testing (can inject mocks through dependency_overrides)
3. Lifecycle management
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from src.application.user_service import UserApplicationService
from src.domain.user_port import UserPort
from src.infrastructure.adapters.in_memory_user_adapter import InMemoryUserAdapter

logger = logging.getLogger(__name__)


@lru_cache
def get_user_adapter() -> InMemoryUserAdapter:
    """
    Get the user adapter instance (singleton).

    Decision: The in-memory store lives inside the adapter, so every request
    must see the same adapter instance. lru_cache gives us one adapter per
    process, constructed on first use and injected explicitly everywhere else.

    Returns:
        InMemoryUserAdapter instance
    """
    logger.info("Creating in-memory user adapter")
    return InMemoryUserAdapter()


def get_user_port(
    adapter: Annotated[InMemoryUserAdapter, Depends(get_user_adapter)],
) -> UserPort:
    """
    Get the user port implementation.

    Args:
        adapter: User adapter (injected)

    Returns:
        The adapter, typed as the port
    """
    return adapter


def get_user_service(
    user_port: Annotated[UserPort, Depends(get_user_port)],
) -> UserApplicationService:
    """
    Get the user application service with its port injected.

    Args:
        user_port: User port (injected)

    Returns:
        UserApplicationService instance
    """
    return UserApplicationService(user_port)
