"""Shared API dependencies for session and viewer resolution."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from community_reports.db.session import get_db
from community_reports.errors import NotFoundError, StoreUnavailableError
from community_reports.services.viewer import Viewer, load_viewer

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_viewer(
    db: SessionDep,
    x_person_id: Annotated[int, Header(description="Person id asserted by the gateway")],
) -> Viewer:
    """Resolve the viewer from the identity header set upstream.

    Authentication happens before requests reach this service; the header is
    trusted as-is.

    Raises:
        HTTPException: If the person does not exist or the store is unavailable
    """
    try:
        return load_viewer(db, x_person_id)
    except NotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Person not found",
        ) from err
    except StoreUnavailableError as err:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(err),
        ) from err


# Type alias for current viewer dependency
ViewerDep = Annotated[Viewer, Depends(get_viewer)]
