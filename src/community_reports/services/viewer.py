"""Viewer identity and role checks."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session

from community_reports.errors import NotFoundError, PermissionDeniedError, store_errors
from community_reports.models import CommunityModerator, LocalUser, Person


@dataclass(frozen=True)
class Viewer:
    """The person a query runs on behalf of, with their admin flag."""

    person_id: int
    is_admin: bool = False


def load_viewer(db: Session, person_id: int) -> Viewer:
    """Resolve a person id into a :class:`Viewer`.

    Raises:
        NotFoundError: If the person does not exist.
        StoreUnavailableError: If the store cannot be queried.
    """
    with store_errors("viewer lookup"):
        person = db.get(Person, person_id)
        if person is None:
            raise NotFoundError("person", person_id)
        admin = db.execute(
            select(LocalUser.admin).where(LocalUser.person_id == person_id)
        ).scalar_one_or_none()
    return Viewer(person_id=person_id, is_admin=bool(admin))


def is_moderator(db: Session, person_id: int, community_id: int) -> bool:
    """Return True if the person moderates the community."""
    with store_errors("moderator lookup"):
        row = db.execute(
            select(CommunityModerator.person_id).where(
                CommunityModerator.community_id == community_id,
                CommunityModerator.person_id == person_id,
            )
        ).first()
    return row is not None


def ensure_can_moderate(db: Session, viewer: Viewer, community_id: int) -> None:
    """Raise unless the viewer is an admin or moderates the community.

    Raises:
        PermissionDeniedError: If neither holds.
    """
    if viewer.is_admin or is_moderator(db, viewer.person_id, community_id):
        return
    raise PermissionDeniedError(
        f"person {viewer.person_id} does not moderate community {community_id}"
    )
