"""Message parser: raw chat message dicts or bare strings -> Message list and conversation text."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence


@dataclass(frozen=True)
class Message:
    id: int
    text: str
    timestamp: str  # ISO-8601

    @property
    def when(self) -> datetime:
        """Timestamp as an aware datetime. Naive timestamps are read as UTC."""
        return parse_timestamp(self.timestamp)

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "timestamp": self.timestamp}


def parse_timestamp(value: str) -> datetime:
    s = value.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    dt = datetime.fromisoformat(s)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_messages(raw: Iterable[dict]) -> List[Message]:
    """
    Build Messages from dicts {"id", "text", "timestamp"}.
    Missing id defaults to list position; missing text to "". Timestamps must be ISO-8601.
    """
    out = []
    for idx, m in enumerate(raw):
        ts = m.get("timestamp")
        if not ts:
            raise ValueError(f"message {idx} has no timestamp")
        if not isinstance(ts, str):
            raise ValueError(f"message {idx} timestamp must be an ISO-8601 string")
        parse_timestamp(ts)
        out.append(Message(id=int(m.get("id", idx)), text=str(m.get("text") or ""), timestamp=ts))
    return out


def messages_from_texts(texts: Sequence[str], now: Optional[datetime] = None) -> List[Message]:
    """Sample loader: message i of n is stamped (n - i) days before now."""
    now = now or datetime.now(timezone.utc)
    n = len(texts)
    return [
        Message(id=idx, text=text, timestamp=(now - timedelta(days=n - idx)).isoformat())
        for idx, text in enumerate(texts)
    ]


def conversation_text(messages: Sequence[Message]) -> str:
    """Message texts one per line, in list order."""
    return "\n".join(m.text for m in messages)
