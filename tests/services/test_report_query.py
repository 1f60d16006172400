"""Tests for report view point lookups and list queries."""

import pytest

from community_reports.core.settings import settings
from community_reports.errors import InvalidArgumentError, NotFoundError
from community_reports.services.report_query import (
    ReportQuery,
    limit_and_offset,
    list_views,
    read_view,
)
from community_reports.services.report_resolution import resolve
from community_reports.services.report_shape import COMMENT_REPORTS, POST_REPORTS
from community_reports.services.viewer import Viewer


def _report_ids(views) -> list[int]:
    return [view.comment_report.id for view in views]


class TestLimitAndOffset:
    """Pagination parameter validation."""

    def test_defaults(self):
        """No page or limit gives the first page at the default size."""
        assert limit_and_offset(None, None) == (settings.report_fetch_limit_default, 0)

    def test_offset_from_page(self):
        """Offset is (page - 1) * limit."""
        assert limit_and_offset(3, 5) == (5, 10)

    def test_page_below_one_rejected(self):
        """Page numbers start at 1; lower values are rejected, not clamped."""
        with pytest.raises(InvalidArgumentError):
            limit_and_offset(0, 10)
        with pytest.raises(InvalidArgumentError):
            limit_and_offset(-2, 10)

    def test_limit_bounds(self):
        """Limits outside 1..max are rejected."""
        with pytest.raises(InvalidArgumentError):
            limit_and_offset(1, 0)
        with pytest.raises(InvalidArgumentError):
            limit_and_offset(1, settings.report_fetch_limit_max + 1)
        assert limit_and_offset(1, settings.report_fetch_limit_max) == (
            settings.report_fetch_limit_max,
            0,
        )


def test_read_view_missing_report(db_session, moderated_comment) -> None:
    """Reading an unknown report id raises NotFoundError."""
    with pytest.raises(NotFoundError):
        read_view(db_session, COMMENT_REPORTS, 99999, moderated_comment.author.id)


def test_read_view_has_no_role_filter(db_session, factory, moderated_comment) -> None:
    """Point lookups return the row even for viewers who moderate nothing."""
    stranger = factory.person("stranger")
    db_session.commit()

    view = read_view(db_session, COMMENT_REPORTS, moderated_comment.first.id, stranger.id)
    assert view.comment_report.id == moderated_comment.first.id


def test_list_all_newest_first(db_session, moderated_comment) -> None:
    """Without unresolved_only reports come newest first."""
    s = moderated_comment
    views = list_views(db_session, COMMENT_REPORTS, ReportQuery(), Viewer(s.author.id))

    assert _report_ids(views) == [s.second.id, s.first.id]
    published = [view.comment_report.published for view in views]
    assert all(a > b for a, b in zip(published, published[1:]))


def test_list_unresolved_oldest_first(db_session, factory, moderated_comment) -> None:
    """Unresolved queues are FIFO."""
    s = moderated_comment
    third_reporter = factory.person("third")
    third = factory.comment_report(third_reporter, s.comment, "third")
    db_session.commit()

    views = list_views(
        db_session,
        COMMENT_REPORTS,
        ReportQuery(unresolved_only=True),
        Viewer(s.author.id),
    )

    assert _report_ids(views) == [s.first.id, s.second.id, third.id]
    published = [view.comment_report.published for view in views]
    assert all(a < b for a, b in zip(published, published[1:]))


def test_list_unresolved_excludes_resolved(db_session, moderated_comment) -> None:
    """Resolved reports drop out of the unresolved queue but stay in history."""
    s = moderated_comment
    resolve(db_session, COMMENT_REPORTS, s.first.id, s.author.id)
    viewer = Viewer(s.author.id)

    unresolved = list_views(db_session, COMMENT_REPORTS, ReportQuery(unresolved_only=True), viewer)
    everything = list_views(db_session, COMMENT_REPORTS, ReportQuery(), viewer)

    assert _report_ids(unresolved) == [s.second.id]
    assert _report_ids(everything) == [s.second.id, s.first.id]


def test_pagination_second_page(db_session, moderated_comment) -> None:
    """Page 2 with limit 1 is the second report by the active ordering."""
    s = moderated_comment
    viewer = Viewer(s.author.id)

    newest_first = list_views(db_session, COMMENT_REPORTS, ReportQuery(page=2, limit=1), viewer)
    oldest_first = list_views(
        db_session,
        COMMENT_REPORTS,
        ReportQuery(page=2, limit=1, unresolved_only=True),
        viewer,
    )

    assert _report_ids(newest_first) == [s.first.id]
    assert _report_ids(oldest_first) == [s.second.id]


def test_pagination_past_last_page(db_session, moderated_comment) -> None:
    """Pages beyond the result set are empty, not an error."""
    views = list_views(
        db_session,
        COMMENT_REPORTS,
        ReportQuery(page=3, limit=1),
        Viewer(moderated_comment.author.id),
    )
    assert views == []


def test_list_rejects_invalid_page(db_session, moderated_comment) -> None:
    """Invalid pagination surfaces as InvalidArgumentError from list mode."""
    with pytest.raises(InvalidArgumentError):
        list_views(
            db_session,
            COMMENT_REPORTS,
            ReportQuery(page=0),
            Viewer(moderated_comment.author.id),
        )


def test_non_moderator_sees_nothing(db_session, factory, moderated_comment) -> None:
    """Viewers who moderate nothing get an empty list rather than an error."""
    stranger = factory.person("stranger")
    db_session.commit()

    views = list_views(db_session, COMMENT_REPORTS, ReportQuery(), Viewer(stranger.id))
    assert views == []


def test_moderator_only_sees_own_communities(db_session, factory, moderated_comment) -> None:
    """Moderators only receive reports from communities they moderate."""
    s = moderated_comment
    other_mod = factory.person("other_mod")
    other_community = factory.community("other")
    factory.moderator(other_community, other_mod)
    other_post = factory.post(other_mod, other_community)
    other_comment = factory.comment(other_mod, other_post)
    other_report = factory.comment_report(s.first_reporter, other_comment)
    db_session.commit()

    timmy_views = list_views(db_session, COMMENT_REPORTS, ReportQuery(), Viewer(s.author.id))
    other_views = list_views(db_session, COMMENT_REPORTS, ReportQuery(), Viewer(other_mod.id))

    assert set(_report_ids(timmy_views)) == {s.first.id, s.second.id}
    assert _report_ids(other_views) == [other_report.id]


def test_admin_sees_every_community(db_session, factory, moderated_comment) -> None:
    """Admins see all reports regardless of moderator relations."""
    s = moderated_comment
    admin = factory.person("admin", admin=True)
    other_community = factory.community("other")
    other_post = factory.post(admin, other_community)
    other_comment = factory.comment(admin, other_post)
    other_report = factory.comment_report(s.first_reporter, other_comment)
    db_session.commit()

    views = list_views(
        db_session,
        COMMENT_REPORTS,
        ReportQuery(),
        Viewer(admin.id, is_admin=True),
    )

    assert _report_ids(views) == [other_report.id, s.second.id, s.first.id]


def test_community_and_target_filters(db_session, factory, moderated_comment) -> None:
    """Community and comment filters narrow the list."""
    s = moderated_comment
    admin = factory.person("admin", admin=True)
    second_comment = factory.comment(s.author, s.post, "another comment")
    on_second = factory.comment_report(s.first_reporter, second_comment)
    other_community = factory.community("other")
    other_post = factory.post(admin, other_community)
    other_comment = factory.comment(admin, other_post)
    factory.comment_report(s.first_reporter, other_comment)
    db_session.commit()
    viewer = Viewer(admin.id, is_admin=True)

    by_community = list_views(
        db_session,
        COMMENT_REPORTS,
        ReportQuery(community_id=s.community.id),
        viewer,
    )
    by_comment = list_views(
        db_session,
        COMMENT_REPORTS,
        ReportQuery(target_id=second_comment.id),
        viewer,
    )

    assert set(_report_ids(by_community)) == {s.first.id, s.second.id, on_second.id}
    assert _report_ids(by_comment) == [on_second.id]


def test_default_page_size(db_session, factory, moderated_comment) -> None:
    """An unspecified limit returns at most the configured default."""
    s = moderated_comment
    for index in range(settings.report_fetch_limit_default + 2):
        reporter = factory.person(f"bulk_{index}")
        factory.comment_report(reporter, s.comment)
    db_session.commit()

    views = list_views(db_session, COMMENT_REPORTS, ReportQuery(), Viewer(s.author.id))
    assert len(views) == settings.report_fetch_limit_default


def test_post_reports_list(db_session, factory) -> None:
    """Post reports follow the same ordering and role gate."""
    author = factory.person("author")
    moderator = factory.person("mod")
    community = factory.community("posts")
    factory.moderator(community, moderator)
    post = factory.post(author, community)
    older = factory.post_report(factory.person("r1"), post)
    newer = factory.post_report(factory.person("r2"), post)
    db_session.commit()

    views = list_views(db_session, POST_REPORTS, ReportQuery(), Viewer(moderator.id))
    author_views = list_views(db_session, POST_REPORTS, ReportQuery(), Viewer(author.id))

    assert [view.post_report.id for view in views] == [newer.id, older.id]
    assert author_views == []
