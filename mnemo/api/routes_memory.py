"""Memory API: extract, insights, context, browse."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from pydantic import BaseModel

from mnemo.api.deps import get_llm_fn, messages_from_body
from mnemo.ingestion.extractor import extract_memory
from mnemo.memory.browser import (
    ALL,
    confidence_stats,
    filter_facts,
    filter_preferences,
    importance_stats,
    memory_overview,
)
from mnemo.memory.insights import KeyInsights, format_memory_context, get_key_insights
from mnemo.memory.schema import validate_memory_structure
from mnemo.utils.completion import LLMFn

router = APIRouter(prefix="/memory", tags=["memory"])


class ExtractBody(BaseModel):
    messages: Optional[List[dict]] = None  # [{"id", "text", "timestamp"}]
    texts: Optional[List[str]] = None  # bare texts, stamped one day apart


class ContextResponse(BaseModel):
    context: str


class BrowseResponse(BaseModel):
    preferences: List[Any]
    facts: List[Any]
    confidence_stats: Dict[str, int]
    importance_stats: Dict[str, int]
    overview: Dict[str, int]


@router.post("/extract")
def extract(body: ExtractBody, llm_fn: Optional[LLMFn] = Depends(get_llm_fn)):
    """Extract memory from messages. Always 200: on LLM failure the result carries `note`."""
    messages = messages_from_body(body.messages, body.texts)
    memory = extract_memory(messages, llm_fn=llm_fn)
    return memory.to_dict()


@router.post("/insights", response_model=KeyInsights)
def insights(memory: Dict[str, Any] = Body(...)):
    return get_key_insights(validate_memory_structure(memory))


@router.post("/context", response_model=ContextResponse)
def context(memory: Dict[str, Any] = Body(...)):
    """Memory rendered as the prompt context block personas receive."""
    return ContextResponse(context=format_memory_context(validate_memory_structure(memory)))


@router.post("/browse", response_model=BrowseResponse)
def browse(
    memory: Dict[str, Any] = Body(...),
    confidence: str = Query(ALL, description="all | high | medium | low"),
    importance: str = Query(ALL, description="all | high | medium | low"),
):
    m = validate_memory_structure(memory)
    return BrowseResponse(
        preferences=filter_preferences(m, confidence),
        facts=filter_facts(m, importance),
        confidence_stats=confidence_stats(m),
        importance_stats=importance_stats(m),
        overview=memory_overview(m),
    )
