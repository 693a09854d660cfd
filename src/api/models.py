"""Pydantic models for API request/response."""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_validator


class CreateUserRequest(BaseModel):
    """Request model for creating a user.

    Values are passed through exactly as received; email syntax is checked
    but the address is not normalized.
    """
    name: str
    email: str

    @field_validator('email')
    @classmethod
    def check_email_syntax(cls, v: str) -> str:
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}") from e
        return v


class UserResponse(BaseModel):
    """Response model for a stored user."""
    id: str = Field(..., description="User ID")
    name: str
    email: str


class UserListResponse(BaseModel):
    """Response model for the user list."""
    users: list[UserResponse]
