"""Community-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from community_reports.models.community import CommunityVisibility


class CommunityResponse(BaseModel):
    """Schema for community information returned by the API."""

    id: int
    name: str
    title: str
    description: str | None
    visibility: CommunityVisibility
    nsfw: bool
    removed: bool
    deleted: bool
    hidden: bool
    posting_restricted_to_mods: bool
    published: datetime
    updated: datetime | None

    model_config = ConfigDict(from_attributes=True)
