"""Memory extractor: messages -> LLM -> parsed JSON -> validated Memory, with a rule-based fallback."""
from __future__ import annotations

import json
import re
import time
from typing import Any, List, Optional, Sequence

from mnemo.ingestion.parser import Message, conversation_text
from mnemo.ingestion.prompts import EXTRACTION_SYSTEM, EXTRACTION_USER_TEMPLATE
from mnemo.memory.schema import (
    FALLBACK_NOTE,
    EmotionalPattern,
    Memory,
    Preference,
    validate_memory_structure,
)
from mnemo.utils import config
from mnemo.utils.completion import LLMFn, complete
from mnemo.utils.observability import log_extraction, log_extraction_fallback

_FENCE_RE = re.compile(r"```[\w+-]*[ \t]*\n?|\n?```")
_PREFERENCE_RE = re.compile(r"I (love|enjoy) ([^.,!?]+)", re.IGNORECASE)

_FALLBACK_TRAITS = ["Self-aware", "Reflective"]
_FALLBACK_STYLE = "Conversational and expressive"
_STRESS_WORDS = ("stressed", "worried", "anxious")


def strip_code_fences(text: str) -> str:
    """Remove ``` fences (with or without a language tag) around an LLM reply."""
    return _FENCE_RE.sub("", text).strip()


def parse_memory_json(reply: str) -> Any:
    """Fence-strip and parse a reply. Raises ValueError on invalid JSON or a bare null."""
    data = json.loads(strip_code_fences(reply.strip()))
    if data is None:
        raise ValueError("reply is JSON null")
    return data


def fallback_memory(text: str) -> Memory:
    """
    Keyword heuristics used when the LLM is unavailable or its reply is unusable.
    "I love/enjoy ..." phrases become medium-confidence Recreation preferences;
    any stress word adds one recurring emotional pattern. No negation handling.
    """
    preferences: List[Any] = []
    emotional_patterns: List[Any] = []
    if "love" in text or "enjoy" in text:
        for m in _PREFERENCE_RE.finditer(text):
            preferences.append(
                Preference(category="Recreation", preference=m.group(0), confidence="medium").model_dump()
            )
    if any(word in text for word in _STRESS_WORDS):
        emotional_patterns.append(
            EmotionalPattern(
                pattern="Experiences stress and anxiety",
                triggers=["work pressure", "deadlines"],
                frequency="recurring",
            ).model_dump()
        )
    return Memory(
        preferences=preferences,
        emotional_patterns=emotional_patterns,
        facts=[],
        personality_traits=list(_FALLBACK_TRAITS),
        communication_style=_FALLBACK_STYLE,
        note=FALLBACK_NOTE,
    )


def extract_memory(
    messages: Sequence[Message],
    llm_fn: Optional[LLMFn] = None,
) -> Memory:
    """
    Extract a Memory from chat messages with one completion call.
    llm_fn: optional (system, user, max_tokens) -> reply; else the configured completion API.
    Never raises: transport or parse failures return fallback_memory() with `note` set.
    """
    text = conversation_text(messages)
    user_prompt = EXTRACTION_USER_TEMPLATE.format(chat=text)
    call = llm_fn or complete
    t0 = time.perf_counter()
    try:
        reply = call(EXTRACTION_SYSTEM, user_prompt, config.EXTRACTION_MAX_TOKENS)
        raw = parse_memory_json(reply)
    except Exception as e:
        log_extraction_fallback(e, len(messages))
        return fallback_memory(text)
    memory = validate_memory_structure(raw)
    log_extraction((time.perf_counter() - t0) * 1000, len(messages), len(memory.preferences), len(memory.facts))
    return memory
