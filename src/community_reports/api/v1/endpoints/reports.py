"""Report view endpoints for moderation queues."""

from __future__ import annotations

import enum
from typing import Any

from fastapi import APIRouter, HTTPException, Query, status

from community_reports.api.v1.dependencies import SessionDep, ViewerDep
from community_reports.errors import (
    InvalidArgumentError,
    NotFoundError,
    PermissionDeniedError,
    ReportError,
    StoreUnavailableError,
)
from community_reports.schemas.report import (
    CommentReportView,
    PostReportView,
    ReportCountResponse,
)
from community_reports.services.report_count import count_all_unresolved
from community_reports.services.report_query import ReportQuery, list_views, read_view
from community_reports.services.report_resolution import resolve
from community_reports.services.report_shape import REPORT_TARGETS
from community_reports.services.viewer import ensure_can_moderate

router = APIRouter(prefix="/reports", tags=["reports"])

ReportViewResponse = CommentReportView | PostReportView


class ReportKind(str, enum.Enum):
    """Reportable content kinds exposed in the URL."""

    COMMENT = "comment"
    POST = "post"


def _http_error(err: ReportError) -> HTTPException:
    """Map a service error onto an HTTP status."""
    if isinstance(err, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(err, InvalidArgumentError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(err, PermissionDeniedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(err, StoreUnavailableError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:  # pragma: no cover
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return HTTPException(status_code=code, detail=str(err))


@router.get("/count", response_model=ReportCountResponse)
async def get_report_count(
    db: SessionDep,
    viewer: ViewerDep,
    community_id: int | None = Query(None),
) -> ReportCountResponse:
    """Count unresolved comment and post reports visible to the viewer."""
    try:
        return count_all_unresolved(db, viewer, community_id)
    except ReportError as err:
        raise _http_error(err) from err


@router.get("/{kind}", response_model=list[ReportViewResponse])
async def list_reports(
    kind: ReportKind,
    db: SessionDep,
    viewer: ViewerDep,
    community_id: int | None = Query(None),
    target_id: int | None = Query(None, description="Comment or post id"),
    page: int | None = Query(None),
    limit: int | None = Query(None),
    unresolved_only: bool = Query(False),
) -> list[Any]:
    """List reports from communities the viewer moderates (all of them for admins)."""
    query = ReportQuery(
        community_id=community_id,
        target_id=target_id,
        page=page,
        limit=limit,
        unresolved_only=unresolved_only,
    )
    try:
        return list_views(db, REPORT_TARGETS[kind.value], query, viewer)
    except ReportError as err:
        raise _http_error(err) from err


@router.get("/{kind}/{report_id}", response_model=ReportViewResponse)
async def get_report(
    kind: ReportKind,
    report_id: int,
    db: SessionDep,
    viewer: ViewerDep,
) -> Any:
    """Get a single report if the viewer may moderate its community."""
    try:
        view = read_view(db, REPORT_TARGETS[kind.value], report_id, viewer.person_id)
        ensure_can_moderate(db, viewer, view.community.id)
    except ReportError as err:
        raise _http_error(err) from err
    return view


@router.post("/{kind}/{report_id}/resolve", response_model=ReportViewResponse)
async def resolve_report(
    kind: ReportKind,
    report_id: int,
    db: SessionDep,
    viewer: ViewerDep,
) -> Any:
    """Resolve a report on behalf of the viewer."""
    target = REPORT_TARGETS[kind.value]
    try:
        current = read_view(db, target, report_id, viewer.person_id)
        ensure_can_moderate(db, viewer, current.community.id)
        return resolve(db, target, report_id, viewer.person_id)
    except ReportError as err:
        raise _http_error(err) from err
