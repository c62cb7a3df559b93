from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.auth.dependencies import get_current_active_user
from app.api.friends.schemas import (
    FriendActionRequest, FriendItem, FriendshipResponse, MutualFriendsResponse,
    PendingRequestItem, RelationshipResponse, SearchResult, Suggestion
)
from app.api.friends.service import FriendshipService
from app.api.users.models import User
from app.database.database import get_db

router = APIRouter(prefix="/api/v1/friends", tags=["friends"])


def get_friendship_service(db: Session = Depends(get_db)) -> FriendshipService:
    return FriendshipService(db)


@router.get("/", response_model=List[FriendItem])
async def get_friends(
        current_user: User = Depends(get_current_active_user),
        friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.list_friends(current_user.id)


@router.get("/suggestions", response_model=List[Suggestion])
async def get_suggestions(
        current_user: User = Depends(get_current_active_user),
        friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.list_suggestions(current_user.id)


@router.get("/pending", response_model=List[PendingRequestItem])
async def get_pending_requests(
        current_user: User = Depends(get_current_active_user),
        friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.list_pending(current_user.id)


@router.get("/sent", response_model=List[PendingRequestItem])
async def get_sent_requests(
        current_user: User = Depends(get_current_active_user),
        friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.list_sent(current_user.id)


@router.get("/search", response_model=List[SearchResult])
async def search_users(
        query: str = "",
        current_user: User = Depends(get_current_active_user),
        friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.search(current_user.id, query)


@router.post("/request", response_model=FriendshipResponse, status_code=status.HTTP_201_CREATED)
async def send_request(
        data: FriendActionRequest,
        current_user: User = Depends(get_current_active_user),
        friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.send_request(current_user.id, data.user_id)


@router.post("/accept", response_model=FriendshipResponse)
async def accept_request(
        data: FriendActionRequest,
        current_user: User = Depends(get_current_active_user),
        friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.accept_request(current_user.id, data.user_id)


@router.post("/remove", status_code=status.HTTP_204_NO_CONTENT)
async def remove_friend(
        data: FriendActionRequest,
        current_user: User = Depends(get_current_active_user),
        friendship_service: FriendshipService = Depends(get_friendship_service)
):
    friendship_service.remove_friend(current_user.id, data.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/status/{user_id}", response_model=RelationshipResponse)
async def friend_status(
        user_id: int,
        current_user: User = Depends(get_current_active_user),
        friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.get_status(current_user.id, user_id)


@router.get("/mutual/{user_id}", response_model=MutualFriendsResponse)
async def mutual_friends(
        user_id: int,
        current_user: User = Depends(get_current_active_user),
        friendship_service: FriendshipService = Depends(get_friendship_service)
):
    return friendship_service.mutual_friends(current_user.id, user_id)
