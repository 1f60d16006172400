"""SQLAlchemy models for communities and per-person community relations."""

from __future__ import annotations

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from community_reports.db.session import Base
from community_reports.db.time import utcnow


class CommunityVisibility(str, enum.Enum):
    """Who can see a community's content."""

    PUBLIC = "Public"
    LOCAL_ONLY = "LocalOnly"


class Community(Base):
    """A place where posts are published and moderated."""

    __tablename__ = "community"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Internal identifier akin to a handle.
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    visibility: Mapped[CommunityVisibility] = mapped_column(
        Enum(CommunityVisibility, native_enum=False, length=16),
        nullable=False,
        default=CommunityVisibility.PUBLIC,
    )
    nsfw: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    removed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    posting_restricted_to_mods: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class CommunityModerator(Base):
    """Join table granting a person moderation rights over a community."""

    __tablename__ = "community_moderator"

    community_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("community.id", ondelete="CASCADE"),
        primary_key=True,
    )
    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        primary_key=True,
    )
    # When the person became a moderator; presence alone implies the role.
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


class CommunityPersonBan(Base):
    """Ban of a person from a single community."""

    __tablename__ = "community_person_ban"

    community_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("community.id", ondelete="CASCADE"),
        primary_key=True,
    )
    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        primary_key=True,
    )
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    # NULL = permanent ban.
    expires: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class CommunityFollower(Base):
    """Subscription of a person to a community."""

    __tablename__ = "community_follower"

    community_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("community.id", ondelete="CASCADE"),
        primary_key=True,
    )
    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        primary_key=True,
    )
    # True while a follow request awaits approval.
    pending: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
