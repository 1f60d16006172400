"""SQLAlchemy models for people and their local accounts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from community_reports.db.session import Base
from community_reports.db.time import utcnow


class Person(Base):
    """An actor that can author content, file reports and moderate."""

    __tablename__ = "person"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    display_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Site-wide ban; community bans live in community_person_ban.
    banned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    bot_account: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class LocalUser(Base):
    """Local account attached to a person; carries the admin flag."""

    __tablename__ = "local_user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )
    admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
