"""Friend request response schemas."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FriendRequestOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    sender_id: str
    receiver_id: str
    status: str
    created_at: datetime
    updated_at: datetime


def request_out(req) -> dict:
    return FriendRequestOut.model_validate(req).model_dump(mode="json")
