"""Unresolved report counts for moderation queues."""

from __future__ import annotations

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session

from community_reports.errors import store_errors
from community_reports.models import CommunityModerator, Post
from community_reports.schemas.report import ReportCountResponse
from community_reports.services.report_shape import COMMENT_REPORTS, POST_REPORTS, ReportTarget
from community_reports.services.viewer import Viewer


def count_unresolved(
    db: Session,
    target: ReportTarget,
    viewer_id: int,
    is_admin: bool,
    community_id: int | None = None,
) -> int:
    """Count open reports the viewer is allowed to see.

    Only the report -> content -> community chain is joined. Non-admins are
    restricted by an inner join to their moderator rows, so reports from other
    communities never reach the count.

    Args:
        db: Database session
        target: Which kind of report to count
        viewer_id: Person asking
        is_admin: Whether the person is a site admin
        community_id: Optional community to scope the count to

    Returns:
        Number of unresolved reports, possibly zero.
    """
    report = target.report
    stmt = target.join_content(select(func.count(report.id)).select_from(report))
    stmt = stmt.where(report.resolved.is_(False))

    if community_id is not None:
        stmt = stmt.where(Post.community_id == community_id)

    if not is_admin:
        stmt = stmt.join(
            CommunityModerator,
            and_(
                CommunityModerator.community_id == Post.community_id,
                CommunityModerator.person_id == viewer_id,
            ),
        )

    with store_errors(f"{target.kind} report count"):
        return int(db.execute(stmt).scalar_one())


def count_all_unresolved(
    db: Session,
    viewer: Viewer,
    community_id: int | None = None,
) -> ReportCountResponse:
    """Return comment and post report counts for the viewer in one response."""
    return ReportCountResponse(
        community_id=community_id,
        comment_reports=count_unresolved(
            db, COMMENT_REPORTS, viewer.person_id, viewer.is_admin, community_id
        ),
        post_reports=count_unresolved(
            db, POST_REPORTS, viewer.person_id, viewer.is_admin, community_id
        ),
    )
