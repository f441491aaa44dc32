"""Shared request helpers for the API routes."""
from __future__ import annotations

from typing import List, Optional

from fastapi import HTTPException, Request

from mnemo.ingestion.parser import Message, messages_from_texts, parse_messages
from mnemo.utils.completion import LLMFn


def get_llm_fn(request: Request) -> Optional[LLMFn]:
    """Completion function on app.state; None falls back to the configured API."""
    return getattr(request.app.state, "llm_fn", None)


def messages_from_body(messages: Optional[List[dict]], texts: Optional[List[str]]) -> List[Message]:
    if messages is not None:
        try:
            return parse_messages(messages)
        except (ValueError, TypeError) as e:
            raise HTTPException(422, f"invalid messages: {str(e)[:200]}")
    if texts is not None:
        return messages_from_texts(texts)
    raise HTTPException(422, "provide messages or texts")
