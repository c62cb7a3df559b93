from datetime import datetime
from typing import Dict, List, Optional, Set, Tuple

from app.api.friends.edges import PendingEdge, RelationshipStatus, classify
from app.api.friends.store import FriendshipStore


class RelationshipQueryEngine:
    """
    Read side of the friendship graph.

    Friend sets are cached on the instance, which lives for a single request,
    so suggestion and search scoring do not reload the same adjacency list
    for every candidate.
    """

    def __init__(self, store: FriendshipStore):
        self.store = store
        self._friend_edges: Dict[int, List[Tuple[int, Optional[datetime]]]] = {}

    def friend_edges(self, user_id: int) -> List[Tuple[int, Optional[datetime]]]:
        """(friend_id, friendship created_at) pairs, oldest friendship first."""
        if user_id not in self._friend_edges:
            edges = []
            for friendship in self.store.accepted_edges_for(user_id):
                edge = friendship.as_edge()
                friend_id = edge.other(user_id)
                if friend_id != user_id:
                    edges.append((friend_id, edge.created_at))
            self._friend_edges[user_id] = edges
        return list(self._friend_edges[user_id])

    def friends_of(self, user_id: int) -> Set[int]:
        return {friend_id for friend_id, _ in self.friend_edges(user_id)}

    def pending_incoming(self, user_id: int) -> List[PendingEdge]:
        return [friendship.as_edge() for friendship in self.store.pending_edges_to(user_id)]

    def pending_outgoing(self, user_id: int) -> List[PendingEdge]:
        return [friendship.as_edge() for friendship in self.store.pending_edges_from(user_id)]

    def status_between(self, user_x: int, user_y: int) -> RelationshipStatus:
        if user_x == user_y:
            return RelationshipStatus.NONE
        friendship = self.store.find_edge(user_x, user_y)
        return classify(friendship.as_edge() if friendship else None, user_x)

    def invalidate(self, *user_ids: int) -> None:
        for user_id in user_ids:
            self._friend_edges.pop(user_id, None)
