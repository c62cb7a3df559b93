"""
Friendship edges as seen by the service layer.

A stored row only has a direction while it is pending. Rows are turned into
one of the two variants below so that callers never have to ask "who is the
recipient" of an accepted friendship.
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union


class RelationshipStatus(str, Enum):
    NONE = "none"
    PENDING_OUTGOING = "pending_outgoing"
    PENDING_INCOMING = "pending_incoming"
    ACCEPTED = "accepted"


@dataclass(frozen=True)
class PendingEdge:
    requester: int
    recipient: int
    created_at: Optional[datetime] = None

    def involves(self, user_id: int) -> bool:
        return user_id in (self.requester, self.recipient)

    def other(self, user_id: int) -> int:
        return self.recipient if user_id == self.requester else self.requester


@dataclass(frozen=True)
class AcceptedEdge:
    user_a: int
    user_b: int
    created_at: Optional[datetime] = None

    def involves(self, user_id: int) -> bool:
        return user_id in (self.user_a, self.user_b)

    def other(self, user_id: int) -> int:
        return self.user_b if user_id == self.user_a else self.user_a


Edge = Union[PendingEdge, AcceptedEdge]


def classify(edge: Optional[Edge], viewer_id: int) -> RelationshipStatus:
    """Relationship status of `edge` from `viewer_id`'s side."""
    if edge is None or not edge.involves(viewer_id):
        return RelationshipStatus.NONE
    if isinstance(edge, AcceptedEdge):
        return RelationshipStatus.ACCEPTED
    if edge.requester == viewer_id:
        return RelationshipStatus.PENDING_OUTGOING
    return RelationshipStatus.PENDING_INCOMING
