import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy import and_, case, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from app.api.friends.models import Friendship
from app.api.friends.schemas import FriendshipStatus
from app.core.exceptions import ConflictError, InvalidTransitionError, NotFoundError, StorageError

logger = logging.getLogger(__name__)


class FriendshipStore:
    """
    Persistence for friendship edges.
    Each mutation is committed on its own and rolled back on failure.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _storage(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Storage failure during {action}: {e}", exc_info=True)
            raise StorageError(f"Storage failure during {action}") from e

    def _pair_filter(self, user_x: int, user_y: int):
        return or_(
            and_(Friendship.user_a == user_x, Friendship.user_b == user_y),
            and_(Friendship.user_a == user_y, Friendship.user_b == user_x)
        )

    def find_edge(self, user_x: int, user_y: int) -> Optional[Friendship]:
        with self._storage("find_edge"):
            return self.db.query(Friendship).filter(self._pair_filter(user_x, user_y)).first()

    def create_edge(self, requester: int, recipient: int) -> Friendship:
        if requester == recipient:
            raise ConflictError("You cannot send a friend request to yourself")
        if self.find_edge(requester, recipient) is not None:
            logger.warning(f"Duplicate friendship {requester} -> {recipient} refused")
            raise ConflictError("A friendship or request already exists between these users")

        friendship = Friendship(user_a=requester, user_b=recipient, status=FriendshipStatus.PENDING.value)
        try:
            self.db.add(friendship)
            self.db.commit()
        except IntegrityError as e:
            # lost a race against a concurrent request for the same pair
            self.db.rollback()
            logger.warning(f"Friendship {requester} -> {recipient} rejected by pair constraint")
            raise ConflictError("A friendship or request already exists between these users") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Storage failure during create_edge: {e}", exc_info=True)
            raise StorageError("Storage failure during create_edge") from e

        with self._storage("create_edge"):
            self.db.refresh(friendship)
        return friendship

    def update_status(self, friendship: Friendship, new_status: FriendshipStatus) -> Friendship:
        if new_status != FriendshipStatus.ACCEPTED or friendship.status != FriendshipStatus.PENDING.value:
            raise InvalidTransitionError(
                f"Cannot move friendship from '{friendship.status}' to '{getattr(new_status, 'value', new_status)}'"
            )

        with self._storage("update_status"):
            updated = self.db.query(Friendship).filter(
                Friendship.id == friendship.id,
                Friendship.status == FriendshipStatus.PENDING.value
            ).update(
                {"status": FriendshipStatus.ACCEPTED.value, "updated_at": func.now()},
                synchronize_session=False
            )
            if not updated:
                self.db.rollback()
                raise NotFoundError("Friend request not found")
            self.db.commit()
            self.db.refresh(friendship)
        return friendship

    def delete_edge(self, friendship: Friendship) -> None:
        with self._storage("delete_edge"):
            deleted = self.db.query(Friendship).filter(
                Friendship.id == friendship.id
            ).delete(synchronize_session=False)
            if not deleted:
                self.db.rollback()
                raise NotFoundError("Friendship not found")
            if friendship in self.db:
                self.db.expunge(friendship)
            self.db.commit()

    def accepted_edges_for(self, user_id: int) -> List[Friendship]:
        friend_id = case((Friendship.user_a == user_id, Friendship.user_b), else_=Friendship.user_a)
        with self._storage("accepted_edges_for"):
            return self.db.query(Friendship).filter(
                or_(Friendship.user_a == user_id, Friendship.user_b == user_id),
                Friendship.status == FriendshipStatus.ACCEPTED.value
            ).order_by(Friendship.created_at, friend_id).all()

    def pending_edges_to(self, user_id: int) -> List[Friendship]:
        with self._storage("pending_edges_to"):
            return self.db.query(Friendship).filter(
                Friendship.user_b == user_id,
                Friendship.status == FriendshipStatus.PENDING.value
            ).order_by(Friendship.created_at, Friendship.user_a).all()

    def pending_edges_from(self, user_id: int) -> List[Friendship]:
        with self._storage("pending_edges_from"):
            return self.db.query(Friendship).filter(
                Friendship.user_a == user_id,
                Friendship.status == FriendshipStatus.PENDING.value
            ).order_by(Friendship.created_at, Friendship.user_b).all()
