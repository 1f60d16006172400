"""Post and comment Pydantic schemas, including their aggregates."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    name: str
    url: str | None
    body: str | None
    creator_id: int
    community_id: int
    removed: bool
    deleted: bool
    locked: bool
    nsfw: bool
    published: datetime
    updated: datetime | None

    model_config = ConfigDict(from_attributes=True)


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: int
    creator_id: int
    post_id: int
    content: str
    removed: bool
    deleted: bool
    distinguished: bool
    published: datetime
    updated: datetime | None

    model_config = ConfigDict(from_attributes=True)


class CommentAggregatesResponse(BaseModel):
    """Counters for a comment."""

    comment_id: int
    score: int
    upvotes: int
    downvotes: int
    child_count: int
    hot_rank: float
    controversy_rank: float
    published: datetime

    model_config = ConfigDict(from_attributes=True)


class PostAggregatesResponse(BaseModel):
    """Counters for a post."""

    post_id: int
    comments: int
    score: int
    upvotes: int
    downvotes: int
    hot_rank: float
    controversy_rank: float
    published: datetime

    model_config = ConfigDict(from_attributes=True)
