from typing import List

from app.api.friends.edges import RelationshipStatus
from app.api.friends.mutual import MutualFriendCalculator
from app.api.friends.queries import RelationshipQueryEngine
from app.api.friends.schemas import SearchResult
from app.api.users.service import UserService
from app.core.config import settings
from app.core.exceptions import ValidationError

PENDING_STATUSES = (RelationshipStatus.PENDING_OUTGOING, RelationshipStatus.PENDING_INCOMING)


class DirectorySearch:
    def __init__(
            self,
            queries: RelationshipQueryEngine,
            mutual: MutualFriendCalculator,
            users: UserService,
            limit: int = settings.SEARCH_LIMIT,
            min_length: int = settings.SEARCH_MIN_LENGTH,
    ):
        self.queries = queries
        self.mutual = mutual
        self.users = users
        self.limit = limit
        self.min_length = min_length

    def search(self, user_id: int, query: str) -> List[SearchResult]:
        query = (query or "").strip()
        if len(query) < self.min_length:
            raise ValidationError(
                f"Search query must be at least {self.min_length} characters long",
                field="query"
            )

        results = []
        for summary in self.users.search_users(query, exclude_user_id=user_id, limit=self.limit):
            relationship = self.queries.status_between(user_id, summary.id)
            results.append(SearchResult(
                user=summary,
                relationship=relationship,
                is_friend=relationship == RelationshipStatus.ACCEPTED,
                has_pending_request=relationship in PENDING_STATUSES,
                mutual_count=self.mutual.mutual_count(user_id, summary.id),
            ))
        return results
