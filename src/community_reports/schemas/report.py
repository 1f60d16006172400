"""Report view schemas.

A report view is a read-only composite assembled from the report, the
reported content, its community, the people involved and the viewer's
relationships to them. None of it is persisted.
"""

from __future__ import annotations

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .community import CommunityResponse
from .content import (
    CommentAggregatesResponse,
    CommentResponse,
    PostAggregatesResponse,
    PostResponse,
)
from .person import PersonResponse


class SubscribedType(str, enum.Enum):
    """Viewer's subscription state toward a community."""

    SUBSCRIBED = "Subscribed"
    NOT_SUBSCRIBED = "NotSubscribed"
    PENDING = "Pending"


class CommentReportResponse(BaseModel):
    """Stored comment report columns."""

    id: int
    creator_id: int
    comment_id: int
    original_comment_text: str
    reason: str
    resolved: bool
    resolver_id: int | None
    published: datetime
    updated: datetime | None

    model_config = ConfigDict(from_attributes=True)


class PostReportResponse(BaseModel):
    """Stored post report columns."""

    id: int
    creator_id: int
    post_id: int
    original_post_name: str
    original_post_url: str | None
    original_post_body: str | None
    reason: str
    resolved: bool
    resolver_id: int | None
    published: datetime
    updated: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ReportViewBase(BaseModel):
    """Fields derived from relationship tables, shared by both report kinds."""

    community: CommunityResponse
    creator: PersonResponse = Field(..., description="Person who filed the report")
    resolver: PersonResponse | None = None
    creator_banned_from_community: bool
    creator_is_moderator: bool
    creator_is_admin: bool
    creator_blocked: bool
    subscribed: SubscribedType
    saved: bool
    my_vote: int | None = None

    model_config = ConfigDict(from_attributes=True)


class CommentReportView(ReportViewBase):
    """A comment report as seen by one viewer."""

    comment_report: CommentReportResponse
    comment: CommentResponse
    post: PostResponse
    comment_creator: PersonResponse
    counts: CommentAggregatesResponse


class PostReportView(ReportViewBase):
    """A post report as seen by one viewer."""

    post_report: PostReportResponse
    post: PostResponse
    post_creator: PersonResponse
    counts: PostAggregatesResponse


class ReportCountResponse(BaseModel):
    """Unresolved report counts visible to the viewer."""

    community_id: int | None = None
    comment_reports: int
    post_reports: int
