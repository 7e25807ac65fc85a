"""User routes for profile access"""

from fastapi import APIRouter, Depends

from ...api.dependencies import get_current_user
from ...application.dtos.user_dtos import UserDto
from ...domain.entities.user import User

router = APIRouter()


@router.get("/me", response_model=UserDto)
async def get_current_user_profile(
    current_user: User = Depends(get_current_user)
):
    """Get current user profile"""
    return UserDto.from_entity(current_user)
