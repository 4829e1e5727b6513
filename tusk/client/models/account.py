"""Account data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Account(BaseModel):
    """A user account as returned by the API."""

    id: str = Field(..., min_length=1)
    username: str
    acct: str
    display_name: str = ""
    url: str | None = None
    note: str = ""
    avatar: str | None = None
    locked: bool = False
    bot: bool | None = None
    created_at: datetime | None = None
    followers_count: int = 0
    following_count: int = 0
    statuses_count: int = 0

    model_config = ConfigDict(frozen=True, extra="allow")
