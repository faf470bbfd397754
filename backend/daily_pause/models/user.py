"""
Daily Pause Backend — User and Session SQLAlchemy Models
=========================================================

What:  ORM models for the `users` and `sessions` tables.
Why:   A session row is the server side of an opaque session token; joining
       it against `users` is how every protected request learns who is calling.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads these for migrations.
Who:   Used by AuthService and SessionService.

Table Design Rationale:
    - String UUID primary keys: portable between PostgreSQL and SQLite
    - email UNIQUE: registration relies on it as the last line of defence
      against duplicate accounts
    - sessions.id IS the token: lookups are a primary key seek
    - expires_at indexed: expiry filter and periodic purge both use it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Index, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from daily_pause.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """
    A registered journal author.

    Lifecycle:
        Created at registration; never mutated by the API afterwards.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    email: Mapped[str] = mapped_column(
        String(320),
        nullable=False,
        unique=True,
        index=True,
    )

    # Stored credential produced by PasswordHasher.hash()
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    sessions: Mapped[list["AuthSession"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class AuthSession(Base):
    """
    Server-side record of an issued session token.

    Lifecycle:
        1. Created at login/registration with expires_at = now + TTL
        2. Read (with expiry check) on every authenticated request
        3. Deleted at logout, or purged once expired
        No sliding expiration: expires_at is never extended.
    """

    __tablename__ = "sessions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    user: Mapped[User] = relationship(back_populates="sessions")

    __table_args__ = (
        Index("idx_sessions_expires_at", "expires_at"),
    )

    def __repr__(self) -> str:
        return f"<AuthSession(user_id={self.user_id}, expires_at='{self.expires_at}')>"
