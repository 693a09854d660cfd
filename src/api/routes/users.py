"""User routes (list, create)."""

import logging

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_user_repo
from api.models import CreateUserRequest, UserListResponse, UserResponse
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
def list_users(repo: UserRepository = Depends(get_user_repo)):
    """List every stored user."""
    users = repo.list_all()
    return UserListResponse(
        users=[
            UserResponse(id=u.id, name=u.name, email=u.email)
            for u in users
        ]
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_user(request: CreateUserRequest, repo: UserRepository = Depends(get_user_repo)):
    """Create a user.

    Args:
        request: Validated body with name and email

    Returns:
        Empty 201 response

    Raises:
        RequestValidationError: 422 when the body fails validation (raised by FastAPI)
    """
    repo.create(name=request.name, email=request.email)
    return Response(status_code=status.HTTP_201_CREATED)
