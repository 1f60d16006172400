# src/community_reports/models/report.py
"""Models for reports filed against comments and posts."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from community_reports.db.session import Base
from community_reports.db.time import utcnow


class CommentReport(Base):
    """Report filed by a person against a comment.

    ``resolved`` only moves from False to True; ``resolver_id`` and
    ``updated`` are written in the same statement.
    """

    __tablename__ = "comment_report"
    __table_args__ = (
        # A person may report a given comment only once.
        UniqueConstraint("comment_id", "creator_id", name="uq_comment_report_comment_creator"),
        Index("ix_comment_report_published", "published"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    creator_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        nullable=False,
    )
    comment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comment.id", ondelete="CASCADE"),
        nullable=False,
    )
    # Snapshot of the comment at filing time; later edits do not change it.
    original_comment_text: Mapped[str] = mapped_column(Text, nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    resolved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    resolver_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        nullable=True,
    )
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class PostReport(Base):
    """Report filed by a person against a post."""

    __tablename__ = "post_report"
    __table_args__ = (
        UniqueConstraint("post_id", "creator_id", name="uq_post_report_post_creator"),
        Index("ix_post_report_published", "published"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    creator_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        nullable=False,
    )
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )
    original_post_name: Mapped[str] = mapped_column(Text, nullable=False)
    original_post_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    original_post_body: Mapped[str | None] = mapped_column(Text, nullable=True)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    resolved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    resolver_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        nullable=True,
    )
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    updated: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
