"""Join graph and projection for report views.

``compose`` builds, without executing it, the statement that yields one view
row per report as seen by a given viewer. Point lookups and list queries both
start from the same :class:`ReportShape` and only layer predicates, ordering
and pagination on top of it, so the two modes cannot disagree on what a row
contains.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import BaseModel
from sqlalchemy import Boolean, ColumnElement, Select, and_, case, false, func, or_, select
from sqlalchemy.engine import Row
from sqlalchemy.orm import InstrumentedAttribute, aliased

from community_reports.db.time import utcnow
from community_reports.models import (
    Comment,
    CommentAggregates,
    CommentLike,
    CommentReport,
    CommentSaved,
    Community,
    CommunityFollower,
    CommunityModerator,
    CommunityPersonBan,
    LocalUser,
    Person,
    PersonBlock,
    Post,
    PostAggregates,
    PostLike,
    PostReport,
    PostSaved,
)
from community_reports.schemas.report import CommentReportView, PostReportView, SubscribedType

logger = logging.getLogger(__name__)

# Person appears in four roles within one row.
reporter = aliased(Person, name="reporter")
content_creator = aliased(Person, name="content_creator")
resolver = aliased(Person, name="resolver")

creator_local_user = aliased(LocalUser, name="creator_local_user")
creator_moderator = aliased(CommunityModerator, name="creator_moderator")
creator_ban = aliased(CommunityPersonBan, name="creator_ban")
viewer_moderator = aliased(CommunityModerator, name="viewer_moderator")

DERIVED_FIELDS = (
    "creator_banned_from_community",
    "creator_is_moderator",
    "creator_is_admin",
    "creator_blocked",
    "subscribed",
    "saved",
    "my_vote",
)


@dataclass(frozen=True, eq=False)
class ReportTarget:
    """Tagged configuration describing one kind of reportable content.

    Attributes:
        kind: Short label used in errors and log lines.
        report: Report model for this kind.
        entity: Reported content model (``Comment`` or ``Post``).
        report_target_id: Report column pointing at the content.
        aggregates: Counters model keyed by ``aggregates_target_id``.
        saved: Viewer bookmark model keyed by ``saved_target_id``.
        like: Viewer vote model keyed by ``like_target_id``.
        view: Pydantic model rows are materialized into.
        fields: View field names for the projected entities, in select order.
    """

    kind: str
    report: Any
    entity: Any
    report_target_id: InstrumentedAttribute[int]
    aggregates: Any
    aggregates_target_id: InstrumentedAttribute[int]
    saved: Any
    saved_target_id: InstrumentedAttribute[int]
    like: Any
    like_target_id: InstrumentedAttribute[int]
    view: type[BaseModel]
    fields: tuple[str, ...]

    @property
    def reaches_post_through_parent(self) -> bool:
        """Whether the content row links to its post (comments) or is the post."""
        return self.entity is not Post

    def join_content(self, stmt: Select[Any]) -> Select[Any]:
        """Join report -> content -> post -> community onto ``stmt``."""
        stmt = stmt.join(self.entity, self.report_target_id == self.entity.id)
        if self.reaches_post_through_parent:
            stmt = stmt.join(Post, Comment.post_id == Post.id)
        return stmt.join(Community, Post.community_id == Community.id)


COMMENT_REPORTS = ReportTarget(
    kind="comment",
    report=CommentReport,
    entity=Comment,
    report_target_id=CommentReport.comment_id,
    aggregates=CommentAggregates,
    aggregates_target_id=CommentAggregates.comment_id,
    saved=CommentSaved,
    saved_target_id=CommentSaved.comment_id,
    like=CommentLike,
    like_target_id=CommentLike.comment_id,
    view=CommentReportView,
    fields=(
        "comment_report",
        "comment",
        "post",
        "community",
        "creator",
        "comment_creator",
        "counts",
        "resolver",
    ),
)

POST_REPORTS = ReportTarget(
    kind="post",
    report=PostReport,
    entity=Post,
    report_target_id=PostReport.post_id,
    aggregates=PostAggregates,
    aggregates_target_id=PostAggregates.post_id,
    saved=PostSaved,
    saved_target_id=PostSaved.post_id,
    like=PostLike,
    like_target_id=PostLike.post_id,
    view=PostReportView,
    fields=(
        "post_report",
        "post",
        "community",
        "creator",
        "post_creator",
        "counts",
        "resolver",
    ),
)

REPORT_TARGETS = {target.kind: target for target in (COMMENT_REPORTS, POST_REPORTS)}


@dataclass(frozen=True, eq=False)
class ReportShape:
    """Unexecuted statement for report view rows plus the columns callers filter on."""

    target: ReportTarget
    statement: Select[Any]
    fields: tuple[str, ...]
    report_id: ColumnElement[int]
    target_id: ColumnElement[int]
    community_id: ColumnElement[int]
    resolved: ColumnElement[bool]
    published: ColumnElement[datetime]
    # Present only when the viewer moderates the report's community.
    viewer_is_moderator: ColumnElement[bool]

    def materialize(self, row: Row[Any]) -> BaseModel:
        """Build the view model for one result row."""
        values = dict(zip(self.fields, row, strict=True))
        return self.target.view.model_validate(values, from_attributes=True)


def _creator_banned(now: datetime) -> ColumnElement[bool]:
    # Permanent bans have no expiry; temporary ones count until they lapse.
    permanent = and_(creator_ban.person_id.is_not(None), creator_ban.expires.is_(None))
    return func.coalesce(
        or_(permanent, creator_ban.expires > now),
        false(),
        type_=Boolean,
    )


def _subscribed() -> ColumnElement[str]:
    return case(
        (CommunityFollower.person_id.is_(None), SubscribedType.NOT_SUBSCRIBED.value),
        (CommunityFollower.pending.is_(True), SubscribedType.PENDING.value),
        else_=SubscribedType.SUBSCRIBED.value,
    )


def compose(target: ReportTarget, viewer_id: int, now: datetime | None = None) -> ReportShape:
    """Compose the report view statement for ``viewer_id``.

    Args:
        target: Which kind of report to read.
        viewer_id: Person whose blocks, subscription, saves, votes and
            moderator rights are joined in. It does not restrict rows.
        now: Reference time for temporary bans; defaults to the current UTC time.

    Returns:
        A shape whose statement selects every report of ``target.kind``.
    """
    if now is None:
        now = utcnow()

    report = target.report
    entity = target.entity
    creator_id = entity.creator_id
    community_id = Post.community_id

    entities: list[Any] = [report, entity]
    if target.reaches_post_through_parent:
        entities.append(Post)
    entities += [Community, reporter, content_creator, target.aggregates, resolver]

    derived = (
        _creator_banned(now).label("creator_banned_from_community"),
        creator_moderator.person_id.is_not(None).label("creator_is_moderator"),
        creator_local_user.person_id.is_not(None).label("creator_is_admin"),
        PersonBlock.person_id.is_not(None).label("creator_blocked"),
        _subscribed().label("subscribed"),
        target.saved.person_id.is_not(None).label("saved"),
        target.like.score.label("my_vote"),
    )

    stmt = target.join_content(select(*entities, *derived).select_from(report))
    stmt = (
        stmt.join(reporter, report.creator_id == reporter.id)
        .join(content_creator, creator_id == content_creator.id)
        .join(target.aggregates, target.aggregates_target_id == target.report_target_id)
        .outerjoin(resolver, report.resolver_id == resolver.id)
        .outerjoin(
            creator_local_user,
            and_(
                creator_local_user.person_id == creator_id,
                creator_local_user.admin.is_(True),
            ),
        )
        .outerjoin(
            creator_moderator,
            and_(
                creator_moderator.community_id == community_id,
                creator_moderator.person_id == creator_id,
            ),
        )
        .outerjoin(
            creator_ban,
            and_(
                creator_ban.community_id == community_id,
                creator_ban.person_id == creator_id,
            ),
        )
        .outerjoin(
            PersonBlock,
            and_(PersonBlock.person_id == viewer_id, PersonBlock.target_id == creator_id),
        )
        .outerjoin(
            CommunityFollower,
            and_(
                CommunityFollower.community_id == community_id,
                CommunityFollower.person_id == viewer_id,
            ),
        )
        .outerjoin(
            target.saved,
            and_(
                target.saved.person_id == viewer_id,
                target.saved_target_id == target.report_target_id,
            ),
        )
        .outerjoin(
            target.like,
            and_(
                target.like.person_id == viewer_id,
                target.like_target_id == target.report_target_id,
            ),
        )
        .outerjoin(
            viewer_moderator,
            and_(
                viewer_moderator.community_id == community_id,
                viewer_moderator.person_id == viewer_id,
            ),
        )
    )
    logger.debug("Composed %s report shape for viewer %s", target.kind, viewer_id)

    return ReportShape(
        target=target,
        statement=stmt,
        fields=target.fields + DERIVED_FIELDS,
        report_id=report.id,
        target_id=target.report_target_id,
        community_id=community_id,
        resolved=report.resolved,
        published=report.published,
        viewer_is_moderator=viewer_moderator.person_id.is_not(None),
    )
