from typing import Dict, Iterable, List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.api.users.models import User
from app.api.users.schemas import UserSummary


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class UserService:
    """Read-only user directory used by the friendship code."""

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_summary(self, user_id: int) -> Optional[UserSummary]:
        user = self.get_user(user_id)
        if not user:
            return None
        return UserSummary.model_validate(user)

    def get_user_summaries(self, user_ids: Iterable[int]) -> Dict[int, UserSummary]:
        ids = set(user_ids)
        if not ids:
            return {}
        users = self.db.query(User).filter(User.id.in_(ids)).all()
        return {user.id: UserSummary.model_validate(user) for user in users}

    def search_users(self, query: str, exclude_user_id: int, limit: int) -> List[UserSummary]:
        search_pattern = f"%{escape_like(query.lower())}%"
        users = self.db.query(User).filter(
            or_(
                func.lower(User.first_name).like(search_pattern, escape="\\"),
                func.lower(User.last_name).like(search_pattern, escape="\\"),
                func.lower(User.email).like(search_pattern, escape="\\"),
            ),
            User.id != exclude_user_id
        ).order_by(User.id).limit(limit).all()
        return [UserSummary.model_validate(user) for user in users]
