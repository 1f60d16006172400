"""Resolution transitions for reports.

A report starts open and becomes resolved once a moderator or admin acts on
it. Resolving again is allowed and records the latest resolver and time.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import update
from sqlalchemy.orm import Session

from community_reports.db.time import utcnow
from community_reports.errors import NotFoundError, store_errors
from community_reports.services.report_query import read_view
from community_reports.services.report_shape import ReportTarget

logger = logging.getLogger(__name__)


def resolve(db: Session, target: ReportTarget, report_id: int, actor_id: int) -> Any:
    """Mark a report resolved by ``actor_id`` and return its fresh view.

    Args:
        db: Database session
        target: Which kind of report
        report_id: Report to resolve
        actor_id: Person resolving it

    Returns:
        The report view as seen by the actor after the update.

    Raises:
        NotFoundError: If the report does not exist.
    """
    report = target.report
    stmt = (
        update(report)
        .where(report.id == report_id)
        .values(resolved=True, resolver_id=actor_id, updated=utcnow())
    )
    with store_errors(f"{target.kind} report resolve"):
        result = db.execute(stmt)
        if result.rowcount == 0:
            raise NotFoundError(f"{target.kind} report", report_id)
        db.commit()

    logger.info("Resolved %s report %s by person %s", target.kind, report_id, actor_id)
    return read_view(db, target, report_id, actor_id)


def resolve_all_for_target(
    db: Session,
    target: ReportTarget,
    target_id: int,
    actor_id: int,
) -> int:
    """Resolve every open report against one comment or post.

    Used when the content itself is removed, so its queue entries close together.

    Returns:
        Number of reports that moved from open to resolved.
    """
    report = target.report
    stmt = (
        update(report)
        .where(target.report_target_id == target_id, report.resolved.is_(False))
        .values(resolved=True, resolver_id=actor_id, updated=utcnow())
    )
    with store_errors(f"{target.kind} report bulk resolve"):
        result = db.execute(stmt)
        db.commit()

    if result.rowcount:
        logger.info(
            "Resolved %d %s reports on %s %s by person %s",
            result.rowcount,
            target.kind,
            target.kind,
            target_id,
            actor_id,
        )
    return int(result.rowcount)
