# src/community_reports/models/__init__.py
"""SQLAlchemy models for the community reports service."""

from .actions import CommentLike, CommentSaved, PersonBlock, PostLike, PostSaved
from .aggregates import CommentAggregates, PostAggregates
from .community import (
    Community,
    CommunityFollower,
    CommunityModerator,
    CommunityPersonBan,
    CommunityVisibility,
)
from .content import Comment, Post
from .person import LocalUser, Person
from .report import CommentReport, PostReport

__all__ = [
    "CommentLike", "CommentSaved", "PersonBlock", "PostLike", "PostSaved",
    "CommentAggregates", "PostAggregates",
    "Community", "CommunityFollower", "CommunityModerator", "CommunityPersonBan",
    "CommunityVisibility",
    "Comment", "Post",
    "LocalUser", "Person",
    "CommentReport", "PostReport",
]
