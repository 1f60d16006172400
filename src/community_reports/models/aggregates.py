"""Precomputed counters for posts and comments.

Rows are maintained outside this package; report views only read them.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from community_reports.db.session import Base
from community_reports.db.time import utcnow

# Rank assigned to content that has not been scored yet.
RANK_DEFAULT = 0.0001


class CommentAggregates(Base):
    """Vote and reply counters for a comment."""

    __tablename__ = "comment_aggregates"

    comment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("comment.id", ondelete="CASCADE"),
        primary_key=True,
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    child_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    hot_rank: Mapped[float] = mapped_column(Float, nullable=False, default=RANK_DEFAULT)
    controversy_rank: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )


class PostAggregates(Base):
    """Vote and comment counters for a post."""

    __tablename__ = "post_aggregates"

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )
    comments: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    upvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    downvotes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    hot_rank: Mapped[float] = mapped_column(Float, nullable=False, default=RANK_DEFAULT)
    controversy_rank: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
