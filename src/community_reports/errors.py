"""Error taxonomy for report view operations.

Every error raised by the services derives from :class:`ReportError` so the
transport layer can translate them without catching store exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import OperationalError

logger = logging.getLogger(__name__)


class ReportError(RuntimeError):
    """Base exception raised for report view failures."""


class NotFoundError(ReportError):
    """Raised when a report id does not exist."""

    def __init__(self, kind: str, report_id: int) -> None:
        super().__init__(f"{kind} {report_id} not found")
        self.kind = kind
        self.report_id = report_id


class InvalidArgumentError(ReportError):
    """Raised for malformed pagination parameters."""


class PermissionDeniedError(ReportError):
    """Raised by callers that enforce authorization above list mode.

    List mode never raises this; viewers without moderator rights simply get
    an empty result.
    """


class StoreUnavailableError(ReportError):
    """Raised when the underlying store cannot be reached.

    The originating SQLAlchemy error is chained as ``__cause__``. No retry is
    attempted here.
    """


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Translate connection-level store failures into :class:`StoreUnavailableError`."""
    try:
        yield
    except OperationalError as err:
        logger.error("Store unavailable during %s: %s", action, err)
        raise StoreUnavailableError(f"store unavailable during {action}") from err
