"""Messages API: chat history grouped by date with statistics."""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from mnemo.api.deps import messages_from_body
from mnemo.ingestion.timeline import group_messages_by_date, message_stats

router = APIRouter(prefix="/messages", tags=["messages"])


class TimelineBody(BaseModel):
    messages: Optional[List[dict]] = None
    texts: Optional[List[str]] = None


@router.post("/timeline")
def timeline(body: TimelineBody):
    """Groups by calendar date (server local time) and history stats (null when empty)."""
    messages = messages_from_body(body.messages, body.texts)
    return {"groups": group_messages_by_date(messages), "stats": message_stats(messages)}
