"""User API routes."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from api.dependencies import get_user_service, read_body
from models.schemas import UserCreateRequest, UserResponse
from services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def create_user(
    body: Dict[str, Any] = Depends(read_body),
    service: UserService = Depends(get_user_service),
):
    """Register a username, or return the existing user with that name."""
    payload = UserCreateRequest.model_validate(body)
    user = await service.register(payload.username)
    return UserResponse(username=user.username, id=user.id)


@router.get("", response_model=List[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users."""
    users = await service.list_users()
    return [UserResponse(username=u.username, id=u.id) for u in users]
