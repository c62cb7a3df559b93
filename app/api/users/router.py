from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.auth.dependencies import get_current_active_user
from app.api.users.models import User
from app.api.users.schemas import UserSummary
from app.api.users.service import UserService
from app.core.exceptions import NotFoundError
from app.database.database import get_db

router = APIRouter(prefix="/api/v1/users", tags=["users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.get("/me", response_model=UserSummary)
async def get_me(current_user: User = Depends(get_current_active_user)):
    return current_user


@router.get("/{user_id}", response_model=UserSummary)
async def get_user_endpoint(
        user_id: int,
        current_user: User = Depends(get_current_active_user),
        user_service: UserService = Depends(get_user_service)
):
    summary = user_service.get_user_summary(user_id)
    if summary is None:
        raise NotFoundError("User not found")
    return summary
