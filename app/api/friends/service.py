import logging
from typing import List

from sqlalchemy.orm import Session

from app.api.friends.edges import AcceptedEdge, PendingEdge
from app.api.friends.models import Friendship
from app.api.friends.mutual import MutualFriendCalculator
from app.api.friends.queries import RelationshipQueryEngine
from app.api.friends.schemas import (
    FriendItem, FriendshipStatus, MutualFriendsResponse, PendingRequestItem,
    RelationshipResponse, SearchResult, Suggestion
)
from app.api.friends.search import DirectorySearch
from app.api.friends.store import FriendshipStore
from app.api.friends.suggestions import SuggestionRanker
from app.api.users.models import User
from app.api.users.service import UserService
from app.core.exceptions import NotAuthorizedError, NotFoundError

logger = logging.getLogger(__name__)


class FriendshipService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserService(db)
        self.store = FriendshipStore(db)
        self.queries = RelationshipQueryEngine(self.store)
        self.mutual = MutualFriendCalculator(self.queries, self.users)

    def _require_user(self, user_id: int) -> User:
        user = self.users.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def _pending_items(self, edges: List[PendingEdge], current_user_id: int) -> List[PendingRequestItem]:
        summaries = self.users.get_user_summaries(edge.other(current_user_id) for edge in edges)
        return [
            PendingRequestItem(user=summaries[edge.other(current_user_id)], request_date=edge.created_at)
            for edge in edges
            if edge.other(current_user_id) in summaries
        ]

    def list_friends(self, current_user_id: int) -> List[FriendItem]:
        edges = self.queries.friend_edges(current_user_id)
        summaries = self.users.get_user_summaries(friend_id for friend_id, _ in edges)
        return [
            FriendItem(user=summaries[friend_id], friendship_date=created_at)
            for friend_id, created_at in edges
            if friend_id in summaries
        ]

    def list_suggestions(self, current_user_id: int) -> List[Suggestion]:
        return SuggestionRanker(self.queries, self.mutual, self.users).suggest(current_user_id)

    def list_pending(self, current_user_id: int) -> List[PendingRequestItem]:
        return self._pending_items(self.queries.pending_incoming(current_user_id), current_user_id)

    def list_sent(self, current_user_id: int) -> List[PendingRequestItem]:
        return self._pending_items(self.queries.pending_outgoing(current_user_id), current_user_id)

    def search(self, current_user_id: int, query: str) -> List[SearchResult]:
        return DirectorySearch(self.queries, self.mutual, self.users).search(current_user_id, query)

    def send_request(self, current_user_id: int, target_id: int) -> Friendship:
        self._require_user(target_id)
        friendship = self.store.create_edge(current_user_id, target_id)
        self.queries.invalidate(current_user_id, target_id)
        logger.info(f"Friend request sent: {current_user_id} -> {target_id}")
        return friendship

    def accept_request(self, current_user_id: int, requester_id: int) -> Friendship:
        self._require_user(requester_id)
        friendship = self.store.find_edge(current_user_id, requester_id)
        edge = friendship.as_edge() if friendship is not None else None
        if edge is None or isinstance(edge, AcceptedEdge):
            raise NotFoundError("Friend request not found")
        if edge.recipient != current_user_id:
            logger.warning(f"User {current_user_id} tried to accept their own request to {requester_id}")
            raise NotAuthorizedError("Only the recipient can accept a friend request")

        friendship = self.store.update_status(friendship, FriendshipStatus.ACCEPTED)
        self.queries.invalidate(current_user_id, requester_id)
        logger.info(f"Friend request accepted: {requester_id} -> {current_user_id}")
        return friendship

    def remove_friend(self, current_user_id: int, other_id: int) -> None:
        """Deletes the edge between the two users: reject, cancel or unfriend."""
        self._require_user(other_id)
        friendship = self.store.find_edge(current_user_id, other_id)
        if friendship is None:
            raise NotFoundError("Friendship not found")

        previous_status = friendship.status
        self.store.delete_edge(friendship)
        self.queries.invalidate(current_user_id, other_id)
        logger.info(f"Friendship removed ({previous_status}): {current_user_id} <-> {other_id}")

    def get_status(self, current_user_id: int, other_id: int) -> RelationshipResponse:
        self._require_user(other_id)
        return RelationshipResponse(
            user_id=other_id,
            relationship=self.queries.status_between(current_user_id, other_id)
        )

    def mutual_friends(self, current_user_id: int, other_id: int) -> MutualFriendsResponse:
        self._require_user(other_id)
        friends = self.mutual.mutual_list(current_user_id, other_id)
        return MutualFriendsResponse(count=self.mutual.mutual_count(current_user_id, other_id), friends=friends)
