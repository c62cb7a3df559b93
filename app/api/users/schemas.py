from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRole(str, Enum):
    ADMIN = "admin"
    MOD = "mod"
    USER = "user"


class UserSummary(BaseModel):
    """Short public view of a user."""
    id: int = Field(gt=0)
    first_name: str
    last_name: Optional[str] = None
    email: str
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.USER

    model_config = ConfigDict(from_attributes=True)


class MutualFriendSummary(BaseModel):
    id: int = Field(gt=0)
    first_name: str
    last_name: Optional[str] = None
    avatar_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
