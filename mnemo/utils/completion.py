"""Completion API transport: one POST to an Anthropic-style /messages endpoint, no retries."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Optional

import httpx
from mnemo.utils import config

# (system, user, max_tokens) -> reply text
LLMFn = Callable[[str, str, int], str]
AsyncLLMFn = Callable[[str, str, int], Awaitable[str]]


class CompletionError(RuntimeError):
    """The API answered 2xx but the body is not a usable completion envelope."""


def build_payload(system: str, user: str, max_tokens: int, model: Optional[str] = None) -> dict:
    return {
        "model": model or config.MODEL,
        "max_tokens": max_tokens,
        "system": system,
        "messages": [{"role": "user", "content": user}],
    }


def _headers(api_key: Optional[str]) -> dict:
    api_key = api_key or config.ANTHROPIC_API_KEY
    if not api_key:
        raise ValueError("ANTHROPIC_API_KEY not set; cannot call completion API")
    return {
        "x-api-key": api_key,
        "anthropic-version": config.ANTHROPIC_VERSION,
        "content-type": "application/json",
    }


def _url(api_base: Optional[str]) -> str:
    return f"{(api_base or config.API_BASE).rstrip('/')}/messages"


def first_text(data: Any) -> str:
    """Return content[0].text from a completion envelope."""
    try:
        text = data["content"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise CompletionError(f"malformed completion envelope: {e!r}") from e
    if not isinstance(text, str):
        raise CompletionError("completion text is not a string")
    return text


def complete(
    system: str,
    user: str,
    max_tokens: int,
    api_base: Optional[str] = None,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    client: Optional[httpx.Client] = None,
) -> str:
    """Call the completion API once. Raises on missing key, transport error, non-2xx or bad envelope."""
    headers = _headers(api_key)
    payload = build_payload(system, user, max_tokens, model=model)
    if client is not None:
        r = client.post(_url(api_base), json=payload, headers=headers)
        r.raise_for_status()
        return first_text(r.json())
    with httpx.Client(timeout=config.HTTP_TIMEOUT) as c:
        r = c.post(_url(api_base), json=payload, headers=headers)
        r.raise_for_status()
        return first_text(r.json())


async def acomplete(
    system: str,
    user: str,
    max_tokens: int,
    api_base: Optional[str] = None,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Async twin of complete()."""
    headers = _headers(api_key)
    payload = build_payload(system, user, max_tokens, model=model)
    if client is not None:
        r = await client.post(_url(api_base), json=payload, headers=headers)
        r.raise_for_status()
        return first_text(r.json())
    async with httpx.AsyncClient(timeout=config.HTTP_TIMEOUT) as c:
        r = await c.post(_url(api_base), json=payload, headers=headers)
        r.raise_for_status()
        return first_text(r.json())
