"""Person-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PersonResponse(BaseModel):
    """Public person fields embedded in report views."""

    id: int
    name: str
    display_name: str | None
    banned: bool
    deleted: bool
    bot_account: bool
    published: datetime
    updated: datetime | None

    model_config = ConfigDict(from_attributes=True)
