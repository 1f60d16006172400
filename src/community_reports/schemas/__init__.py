"""
Pydantic schemas for report views and API responses.

These schemas define the structure of API data for serialization and validation.
"""

from .community import CommunityResponse
from .content import (
    CommentAggregatesResponse,
    CommentResponse,
    PostAggregatesResponse,
    PostResponse,
)
from .person import PersonResponse
from .report import (
    CommentReportResponse,
    CommentReportView,
    PostReportResponse,
    PostReportView,
    ReportCountResponse,
    SubscribedType,
)

__all__ = [
    "CommunityResponse",
    "CommentAggregatesResponse", "CommentResponse", "PostAggregatesResponse", "PostResponse",
    "PersonResponse",
    "CommentReportResponse", "CommentReportView",
    "PostReportResponse", "PostReportView",
    "ReportCountResponse", "SubscribedType",
]
