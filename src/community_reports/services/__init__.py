# src/community_reports/services/__init__.py
"""Report view composition, querying, counting and resolution."""

from .report_count import count_all_unresolved, count_unresolved
from .report_query import ReportQuery, limit_and_offset, list_views, read_view
from .report_resolution import resolve, resolve_all_for_target
from .report_shape import (
    COMMENT_REPORTS,
    POST_REPORTS,
    REPORT_TARGETS,
    ReportShape,
    ReportTarget,
    compose,
)
from .viewer import Viewer, ensure_can_moderate, is_moderator, load_viewer

__all__ = [
    "count_all_unresolved", "count_unresolved",
    "ReportQuery", "limit_and_offset", "list_views", "read_view",
    "resolve", "resolve_all_for_target",
    "COMMENT_REPORTS", "POST_REPORTS", "REPORT_TARGETS", "ReportShape", "ReportTarget", "compose",
    "Viewer", "ensure_can_moderate", "is_moderator", "load_viewer",
]
