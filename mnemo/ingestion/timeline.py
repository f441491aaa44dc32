"""Timeline: chat messages -> groups by calendar date, plus history statistics."""
from __future__ import annotations

import math
from collections import defaultdict
from datetime import tzinfo
from typing import Any, Dict, List, Optional, Sequence

from mnemo.ingestion.parser import Message


def _date_label(msg: Message, tz: Optional[tzinfo] = None) -> str:
    d = msg.when.astimezone(tz)
    return f"{d:%b} {d.day}, {d.year}"


def group_messages_by_date(messages: Sequence[Message], tz: Optional[tzinfo] = None) -> List[dict]:
    """
    Group messages by calendar date (local time unless tz is given).
    Format: list of { "date": "Jan 5, 2024", "messages": [ { "id", "text", "timestamp" } ] }, first-seen order.
    """
    by_date: Dict[str, List[dict]] = defaultdict(list)
    for m in messages:
        by_date[_date_label(m, tz)].append(m.to_dict())
    return [{"date": k, "messages": v} for k, v in by_date.items()]


def message_stats(messages: Sequence[Message]) -> Optional[Dict[str, Any]]:
    """Count, day span between earliest and latest message, mean text length. None when empty."""
    if not messages:
        return None
    times = [m.when for m in messages]
    earliest, latest = min(times), max(times)
    day_span = math.ceil((latest - earliest).total_seconds() / 86400)
    avg_length = math.floor(sum(len(m.text) for m in messages) / len(messages) + 0.5)
    return {
        "total": len(messages),
        "day_span": day_span,
        "avg_length": avg_length,
        "earliest": earliest.date().isoformat(),
        "latest": latest.date().isoformat(),
    }
