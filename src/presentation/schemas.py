"""
API request/response schemas (DTOs).

These Pydantic models define the API contract for requests and responses.
They provide validation, serialization, and documentation.

Decision: We keep these separate from domain entities to maintain
separation of concerns. The API layer never exposes the password hash.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    """Request schema for user creation."""

    id: str = Field(
        ...,
        min_length=1,
        description="User's identifier",
        examples=["1"],
    )
    username: str = Field(
        ...,
        min_length=1,
        description="User's name",
        examples=["alice"],
    )
    password: str = Field(
        ...,
        min_length=1,
        max_length=72,
        description="User's password (at most 72 bytes once UTF-8 encoded)",
        examples=["SecurePassword123"],
    )


class UserResponse(BaseModel):
    """Response schema for a stored user."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="User's identifier")
    username: str = Field(..., description="User's name")
    created_at: datetime = Field(..., description="When the user was created")


class CreateUserResponse(UserResponse):
    """Response schema for user creation."""

    message: str = Field(
        ...,
        description="Success message",
        examples=["User created successfully"],
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: str | None = Field(None, description="Additional error details")


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Service status", examples=["healthy"])
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    timestamp: datetime = Field(..., description="Current server time")
