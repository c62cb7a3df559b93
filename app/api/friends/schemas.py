from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from app.api.friends.edges import RelationshipStatus
from app.api.users.schemas import MutualFriendSummary, UserSummary


class FriendshipStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"


class FriendActionRequest(BaseModel):
    """Body of request/accept/remove: the other user in the relationship."""
    user_id: int = Field(..., gt=0, description="ID of the other user")


class FriendshipResponse(BaseModel):
    id: int = Field(gt=0)
    user_a: int
    user_b: int
    status: FriendshipStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class FriendItem(BaseModel):
    user: UserSummary
    friendship_date: Optional[datetime] = None


class PendingRequestItem(BaseModel):
    user: UserSummary
    request_date: Optional[datetime] = None


class Suggestion(BaseModel):
    user: UserSummary
    mutual_count: int = Field(ge=0)
    mutual_friends: List[MutualFriendSummary] = []


class SearchResult(BaseModel):
    user: UserSummary
    relationship: RelationshipStatus
    is_friend: bool
    has_pending_request: bool
    mutual_count: int = Field(ge=0)


class RelationshipResponse(BaseModel):
    user_id: int
    relationship: RelationshipStatus


class MutualFriendsResponse(BaseModel):
    count: int = Field(ge=0)
    friends: List[MutualFriendSummary]
