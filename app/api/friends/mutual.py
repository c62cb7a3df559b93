from typing import List, Optional

from app.api.friends.queries import RelationshipQueryEngine
from app.api.users.schemas import MutualFriendSummary
from app.api.users.service import UserService


class MutualFriendCalculator:
    def __init__(self, queries: RelationshipQueryEngine, users: UserService):
        self.queries = queries
        self.users = users

    def mutual_ids(self, user_x: int, user_y: int) -> List[int]:
        return sorted(self.queries.friends_of(user_x) & self.queries.friends_of(user_y))

    def mutual_count(self, user_x: int, user_y: int) -> int:
        return len(self.mutual_ids(user_x, user_y))

    def mutual_list(self, user_x: int, user_y: int, limit: Optional[int] = None) -> List[MutualFriendSummary]:
        """Mutual friends as summaries, ordered by user id."""
        ids = self.mutual_ids(user_x, user_y)
        if limit is not None:
            ids = ids[:limit]
        summaries = self.users.get_user_summaries(ids)
        return [
            MutualFriendSummary.model_validate(summaries[user_id].model_dump())
            for user_id in ids
            if user_id in summaries
        ]
