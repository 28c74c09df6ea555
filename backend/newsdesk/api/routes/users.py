"""Users Route — read-only listing."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from newsdesk.infrastructure.database import get_db
from newsdesk.repositories.users import select_users
from newsdesk.schemas.user import UserListResponse, UserResponse

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserListResponse)
async def get_users(db: AsyncSession = Depends(get_db)):
    """Serves an array of all users."""
    users = await select_users(db)
    return UserListResponse(
        users=[UserResponse.model_validate(u) for u in users],
    )
