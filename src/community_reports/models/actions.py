"""Viewer-scoped relations: blocks, saves and votes.

All of these are keyed by the acting person and read by report views to
describe the viewer's relationship to the reported content.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from community_reports.db.session import Base
from community_reports.db.time import utcnow


class PersonBlock(Base):
    """A person hiding another person's content."""

    __tablename__ = "person_block"

    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        primary_key=True,
    )
    target_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        primary_key=True,
    )
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


class CommentSaved(Base):
    """Bookmark of a comment."""

    __tablename__ = "comment_saved"

    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        primary_key=True,
    )
    comment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comment.id", ondelete="CASCADE"),
        primary_key=True,
    )
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


class PostSaved(Base):
    """Bookmark of a post."""

    __tablename__ = "post_saved"

    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        primary_key=True,
    )
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


class CommentLike(Base):
    """Per-person vote on a comment."""

    __tablename__ = "comment_like"
    __table_args__ = (
        CheckConstraint("score IN (1, -1)", name="ck_comment_like_score"),
    )

    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        primary_key=True,
    )
    comment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comment.id", ondelete="CASCADE"),
        primary_key=True,
    )
    # 1 = upvote, -1 = downvote.
    score: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


class PostLike(Base):
    """Per-person vote on a post."""

    __tablename__ = "post_like"
    __table_args__ = (
        CheckConstraint("score IN (1, -1)", name="ck_post_like_score"),
    )

    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("person.id", ondelete="CASCADE"),
        primary_key=True,
    )
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    score: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
