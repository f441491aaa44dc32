"""Logging for memory extraction, fallback and persona responses."""
from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger("mnemo.observability")


def log_extraction(latency_ms: float, message_count: int, preferences: int, facts: int) -> None:
    logger.info(
        "memory_extract latency_ms=%.2f messages=%s preferences=%s facts=%s",
        latency_ms, message_count, preferences, facts,
    )


def log_extraction_fallback(error: BaseException, message_count: int) -> None:
    logger.warning(
        "memory_extract_fallback messages=%s error=%s: %s",
        message_count, type(error).__name__, str(error)[:200],
    )


def log_persona_response(personality: str, latency_ms: float, chars: int) -> None:
    logger.info("persona_response personality=%s latency_ms=%.2f chars=%s", personality, latency_ms, chars)


def log_persona_error(personality: str, error: BaseException, query: Optional[str] = None) -> None:
    logger.warning(
        "persona_response_error personality=%s query_len=%s error=%s: %s",
        personality, len(query) if query is not None else None, type(error).__name__, str(error)[:200],
    )
