"""Point lookup and list execution for report views."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from sqlalchemy import ColumnElement
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import UnaryExpression

from community_reports.core.settings import settings
from community_reports.errors import InvalidArgumentError, NotFoundError, store_errors
from community_reports.services.report_shape import ReportShape, ReportTarget, compose
from community_reports.services.viewer import Viewer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportQuery:
    """Filters and pagination for a report list.

    Attributes:
        community_id: Only reports whose content lives in this community.
        target_id: Only reports against this comment/post.
        page: 1-based page number; defaults to the first page.
        limit: Page size; defaults to ``settings.report_fetch_limit_default``.
        unresolved_only: Only open reports, oldest first. Otherwise every
            report, newest first.
    """

    community_id: int | None = None
    target_id: int | None = None
    page: int | None = None
    limit: int | None = None
    unresolved_only: bool = False


def limit_and_offset(page: int | None, limit: int | None) -> tuple[int, int]:
    """Validate pagination and return ``(limit, offset)``.

    Raises:
        InvalidArgumentError: If ``page`` is below 1 or ``limit`` falls outside
            ``1..settings.report_fetch_limit_max``.
    """
    if page is None:
        page = 1
    elif page < 1:
        raise InvalidArgumentError(f"page must be >= 1, got {page}")

    max_limit = settings.report_fetch_limit_max
    if limit is None:
        limit = min(settings.report_fetch_limit_default, max_limit)
    elif not 1 <= limit <= max_limit:
        raise InvalidArgumentError(f"limit must be between 1 and {max_limit}, got {limit}")

    return limit, (page - 1) * limit


def _execute(
    db: Session,
    shape: ReportShape,
    where: Sequence[ColumnElement[bool]] = (),
    order_by: Sequence[UnaryExpression[Any]] = (),
    limit: int | None = None,
    offset: int | None = None,
) -> list[BaseModel]:
    """Run ``shape`` with extra predicates, ordering and pagination."""
    stmt = shape.statement
    if where:
        stmt = stmt.where(*where)
    if order_by:
        stmt = stmt.order_by(*order_by)
    if limit is not None:
        stmt = stmt.limit(limit)
    if offset:
        stmt = stmt.offset(offset)

    # Overwrite identities already in the session so derived state is never stale.
    stmt = stmt.execution_options(populate_existing=True)
    with store_errors(f"{shape.target.kind} report query"):
        rows = db.execute(stmt).all()
    return [shape.materialize(row) for row in rows]


def read_view(db: Session, target: ReportTarget, report_id: int, viewer_id: int) -> Any:
    """Return one report view as seen by ``viewer_id``.

    No role filtering happens here; callers that need access control check the
    viewer against the returned community.

    Raises:
        NotFoundError: If the report does not exist.
    """
    shape = compose(target, viewer_id)
    views = _execute(db, shape, where=(shape.report_id == report_id,), limit=1)
    if not views:
        raise NotFoundError(f"{target.kind} report", report_id)
    return views[0]


def list_views(
    db: Session,
    target: ReportTarget,
    query: ReportQuery,
    viewer: Viewer,
) -> list[Any]:
    """Return a page of report views visible to ``viewer``.

    Admins see every matching report. Everyone else only sees reports from
    communities they moderate; a viewer who moderates nothing gets ``[]``.
    """
    shape = compose(target, viewer.person_id)

    where: list[ColumnElement[bool]] = []
    if query.community_id is not None:
        where.append(shape.community_id == query.community_id)
    if query.target_id is not None:
        where.append(shape.target_id == query.target_id)

    # Unresolved queues are worked oldest first; full history reads newest first.
    if query.unresolved_only:
        where.append(shape.resolved.is_(False))
        order_by = (shape.published.asc(), shape.report_id.asc())
    else:
        order_by = (shape.published.desc(), shape.report_id.desc())

    limit, offset = limit_and_offset(query.page, query.limit)

    if not viewer.is_admin:
        where.append(shape.viewer_is_moderator)

    views = _execute(db, shape, where=where, order_by=order_by, limit=limit, offset=offset)
    logger.debug(
        "Listed %d %s reports for viewer %s (admin=%s)",
        len(views),
        target.kind,
        viewer.person_id,
        viewer.is_admin,
    )
    return views
