"""
FastAPI routes for user lookup and creation.

This module is the controller of the application. Each route is thin: it
handles HTTP concerns and delegates to the user application service.
"""

import logging
from datetime import UTC, datetime
from typing import Annotated

from config.settings import settings
from fastapi import APIRouter, Depends, HTTPException, status

from src.application.user_service import UserApplicationService
from src.domain.exceptions import DomainError, UserNotFoundError
from src.domain.user import User
from src.presentation.dependencies import get_user_service
from src.presentation.schemas import (
    CreateUserRequest,
    CreateUserResponse,
    ErrorResponse,
    HealthCheckResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/v1", tags=["users"])


@router.post(
    "/users",
    response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "User created successfully"},
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create a user",
    description="""
    Create a user from an id, a username and a password.

    The password is hashed before storage and never returned.
    Identifiers are not checked for uniqueness.
    """,
)
async def create_user(
    request: CreateUserRequest,
    service: Annotated[UserApplicationService, Depends(get_user_service)],
) -> CreateUserResponse:
    """
    Create a user.

    Decision: We return 201 Created on success as this creates a new resource.
    """
    try:
        user = User.create(
            id=request.id,
            username=request.username,
            password=request.password,
            rounds=settings.bcrypt_rounds,
        )
        await service.create_user(user)

        return CreateUserResponse(
            id=user.id,
            username=user.username,
            created_at=user.created_at,
            message="User created successfully",
        )

    except DomainError as e:
        logger.warning(f"User creation failed: {e!s}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "DomainError", "message": str(e)},
        ) from e

    except Exception as e:
        logger.error(f"Unexpected error during user creation: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "InternalError",
                "message": "An unexpected error occurred",
            },
        ) from e


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    responses={
        200: {"description": "User found"},
        404: {"model": ErrorResponse, "description": "User not found"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Get a user",
    description="Look up a user by identifier.",
)
async def get_user(
    user_id: str,
    service: Annotated[UserApplicationService, Depends(get_user_service)],
) -> UserResponse:
    """Get a user by ID."""
    try:
        user = await service.get_user(user_id)
        return UserResponse.model_validate(user)

    except UserNotFoundError as e:
        logger.warning(f"Lookup failed: {e!s}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "UserNotFound", "message": str(e)},
        ) from e

    except DomainError as e:
        logger.warning(f"Domain error during lookup: {e!s}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "DomainError", "message": str(e)},
        ) from e

    except Exception as e:
        logger.error(f"Unexpected error during lookup: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "InternalError",
                "message": "An unexpected error occurred",
            },
        ) from e


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Check if the service is running and healthy",
    tags=["health"],
)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(
        status="healthy",
        service=settings.app_name,
        version=settings.app_version,
        timestamp=datetime.now(UTC),
    )
