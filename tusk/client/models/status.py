"""Status data model."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .account import Account


class Status(BaseModel):
    """A status (post) from the instance.

    Only the fields the library reads are declared; anything else the server
    sends is kept as extra data and round-trips through ``model_dump``.
    """

    id: str = Field(..., min_length=1)
    uri: str
    created_at: datetime
    account: Account
    content: str
    visibility: str = "public"
    sensitive: bool = False
    spoiler_text: str = ""
    url: str | None = None
    in_reply_to_id: str | None = None
    in_reply_to_account_id: str | None = None
    reblog: Status | None = None
    language: str | None = None
    replies_count: int | None = None
    reblogs_count: int = 0
    favourites_count: int = 0
    favourited: bool | None = None
    reblogged: bool | None = None
    bookmarked: bool | None = None
    media_attachments: list[dict[str, Any]] = Field(default_factory=list)
    mentions: list[dict[str, Any]] = Field(default_factory=list)
    tags: list[dict[str, Any]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="allow")
