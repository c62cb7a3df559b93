from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint, CheckConstraint, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.api.friends.edges import AcceptedEdge, Edge, PendingEdge
from app.api.users.models import User
from app.database.database import Base


class Friendship(Base):
    """
    One row per unordered pair of users.
    user_a sent the request, user_b received it.
    """
    __tablename__ = "friendships"

    id = Column(Integer, primary_key=True, index=True)
    user_a = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    user_b = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    # min/max of the pair, so the unique constraint ignores direction
    pair_low = Column(Integer, nullable=False)
    pair_high = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # pending, accepted
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    requester = relationship(User, foreign_keys=[user_a])
    recipient = relationship(User, foreign_keys=[user_b])

    __table_args__ = (
        UniqueConstraint("pair_low", "pair_high", name="uq_friendships_pair"),
        CheckConstraint("user_a <> user_b", name="ck_friendships_not_self"),
        CheckConstraint("status IN ('pending', 'accepted')", name="ck_friendships_status"),
        Index("ix_friendships_user_b_status", "user_b", "status"),
    )

    def __init__(self, user_a: int, user_b: int, **kwargs):
        super().__init__(
            user_a=user_a,
            user_b=user_b,
            pair_low=min(user_a, user_b),
            pair_high=max(user_a, user_b),
            **kwargs
        )

    def as_edge(self) -> Edge:
        if self.status == "accepted":
            return AcceptedEdge(user_a=self.user_a, user_b=self.user_b, created_at=self.created_at)
        return PendingEdge(requester=self.user_a, recipient=self.user_b, created_at=self.created_at)

    def __repr__(self) -> str:
        return f"<Friendship {self.user_a}->{self.user_b} {self.status}>"
