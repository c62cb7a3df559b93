import logging
from typing import Dict, List

from app.api.friends.mutual import MutualFriendCalculator
from app.api.friends.queries import RelationshipQueryEngine
from app.api.friends.schemas import Suggestion
from app.api.users.service import UserService
from app.core.config import settings

logger = logging.getLogger(__name__)


class SuggestionRanker:
    """Friends-of-friends ranked by number of mutual friends."""

    def __init__(
            self,
            queries: RelationshipQueryEngine,
            mutual: MutualFriendCalculator,
            users: UserService,
            limit: int = settings.SUGGESTIONS_LIMIT,
            mutual_display_limit: int = settings.MUTUAL_LIST_DISPLAY_LIMIT,
    ):
        self.queries = queries
        self.mutual = mutual
        self.users = users
        self.limit = limit
        self.mutual_display_limit = mutual_display_limit

    def candidates(self, user_id: int) -> Dict[int, int]:
        """Second-degree user ids mapped to their mutual friend count."""
        friends = self.queries.friends_of(user_id)
        counts: Dict[int, int] = {}
        for friend_id in sorted(friends):
            for candidate_id in sorted(self.queries.friends_of(friend_id)):
                if candidate_id == user_id or candidate_id in friends or candidate_id in counts:
                    continue
                counts[candidate_id] = self.mutual.mutual_count(user_id, candidate_id)
        return counts

    def suggest(self, user_id: int) -> List[Suggestion]:
        counts = self.candidates(user_id)
        if not counts:
            return []

        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        summaries = self.users.get_user_summaries(candidate_id for candidate_id, _ in ranked)

        suggestions = []
        for candidate_id, mutual_count in ranked:
            if len(suggestions) == self.limit:
                break
            summary = summaries.get(candidate_id)
            if summary is None:
                logger.warning(f"Skipping suggestion {candidate_id}: user record missing")
                continue
            suggestions.append(Suggestion(
                user=summary,
                mutual_count=mutual_count,
                mutual_friends=self.mutual.mutual_list(user_id, candidate_id, limit=self.mutual_display_limit),
            ))
        return suggestions
