"""Notification data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .account import Account
from .status import Status


class Notification(BaseModel):
    """A notification addressed to the authenticated account."""

    id: str = Field(..., min_length=1)
    type: str
    created_at: datetime
    account: Account
    status: Status | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
