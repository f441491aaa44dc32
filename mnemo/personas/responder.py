"""Personality responder: memory context + query -> one in-character reply per persona."""
from __future__ import annotations

import asyncio
import time
from typing import AsyncIterator, Iterable, Iterator, List, Optional, Tuple, Union

from mnemo.memory.insights import format_memory_context
from mnemo.memory.schema import Memory
from mnemo.personas.catalog import CATALOG_ORDER, Personality, PersonalityId, get_personality
from mnemo.personas.prompts import RESPONSE_PLACEHOLDER, RESPONSE_USER_TEMPLATE
from mnemo.utils import config
from mnemo.utils.completion import AsyncLLMFn, LLMFn, acomplete, complete
from mnemo.utils.observability import log_persona_error, log_persona_response

PersonaKey = Union[PersonalityId, str]


def build_response_prompt(personality: Personality, memory: Optional[Memory], query: str) -> Tuple[str, str]:
    """(system, user) for one persona request."""
    user = RESPONSE_USER_TEMPLATE.format(context=format_memory_context(memory), query=query)
    return personality.instruction_prompt, user


def _resolve_order(order: Optional[Iterable[PersonaKey]]) -> List[Personality]:
    # Resolve every id before the first request so a bad id fails fast
    return [get_personality(pid) for pid in (CATALOG_ORDER if order is None else order)]


def respond(
    personality_id: PersonaKey,
    memory: Optional[Memory],
    query: str,
    llm_fn: Optional[LLMFn] = None,
) -> str:
    """
    One completion call in the persona's voice. Returns the reply text verbatim,
    or RESPONSE_PLACEHOLDER on any failure. Unknown personality_id raises ValueError.
    """
    personality = get_personality(personality_id)
    system, user = build_response_prompt(personality, memory, query)
    call = llm_fn or complete
    t0 = time.perf_counter()
    try:
        text = call(system, user, config.RESPONSE_MAX_TOKENS)
        if not isinstance(text, str):
            raise TypeError(f"completion returned {type(text).__name__}")
    except Exception as e:
        log_persona_error(personality.id.value, e, query)
        return RESPONSE_PLACEHOLDER
    log_persona_response(personality.id.value, (time.perf_counter() - t0) * 1000, len(text))
    return text


def respond_all(
    memory: Optional[Memory],
    query: str,
    order: Optional[Iterable[PersonaKey]] = None,
    llm_fn: Optional[LLMFn] = None,
) -> Iterator[Tuple[PersonalityId, str]]:
    """Yield (personality id, reply) one persona at a time, in catalog order unless `order` is given."""
    for personality in _resolve_order(order):
        yield personality.id, respond(personality.id, memory, query, llm_fn=llm_fn)


async def arespond(
    personality_id: PersonaKey,
    memory: Optional[Memory],
    query: str,
    llm_fn: Optional[AsyncLLMFn] = None,
) -> str:
    """Async respond(). Same placeholder-on-failure contract."""
    personality = get_personality(personality_id)
    system, user = build_response_prompt(personality, memory, query)
    call = llm_fn or acomplete
    t0 = time.perf_counter()
    try:
        text = await call(system, user, config.RESPONSE_MAX_TOKENS)
        if not isinstance(text, str):
            raise TypeError(f"completion returned {type(text).__name__}")
    except Exception as e:
        log_persona_error(personality.id.value, e, query)
        return RESPONSE_PLACEHOLDER
    log_persona_response(personality.id.value, (time.perf_counter() - t0) * 1000, len(text))
    return text


async def arespond_all(
    memory: Optional[Memory],
    query: str,
    order: Optional[Iterable[PersonaKey]] = None,
    llm_fn: Optional[AsyncLLMFn] = None,
    concurrent: bool = False,
) -> AsyncIterator[Tuple[PersonalityId, str]]:
    """
    Async respond_all(). With concurrent=True every request is dispatched up front,
    but results are still yielded in order: persona k+1 is never yielded before persona k.
    Closing the iterator early cancels requests still in flight.
    """
    personalities = _resolve_order(order)
    if not concurrent:
        for personality in personalities:
            yield personality.id, await arespond(personality.id, memory, query, llm_fn=llm_fn)
        return
    tasks = [
        asyncio.ensure_future(arespond(personality.id, memory, query, llm_fn=llm_fn))
        for personality in personalities
    ]
    try:
        for personality, task in zip(personalities, tasks):
            yield personality.id, await task
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
