from sqlalchemy import Column, Integer, String, DateTime, Boolean, CheckConstraint
from sqlalchemy.sql import func

from app.database.database import Base


class User(Base):
    """
    Users table. Owned by the profile/auth side of the application;
    the friendship code only reads it.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    avatar_url = Column(String(255), nullable=True)
    role = Column(String(20), default="user", nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    is_active = Column(Boolean, default=True)

    __table_args__ = (
        CheckConstraint("role IN ('admin', 'mod', 'user')", name="ck_users_role"),
    )
