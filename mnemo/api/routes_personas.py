"""Personas API: catalog, single persona reply, streamed replies for all personas."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from mnemo.api.deps import get_llm_fn
from mnemo.memory.schema import Memory, validate_memory_structure
from mnemo.personas.catalog import CATALOG_ORDER, PERSONALITIES, PersonalityId
from mnemo.personas.prompts import SAMPLE_QUERIES
from mnemo.personas.responder import respond, respond_all
from mnemo.utils.completion import LLMFn

router = APIRouter(prefix="/personas", tags=["personas"])


class RespondBody(BaseModel):
    memory: Optional[Dict[str, Any]] = None
    query: str


class PersonaResponse(BaseModel):
    personality: str
    response: str


def _memory(body: RespondBody) -> Optional[Memory]:
    if not body.query.strip():
        raise HTTPException(422, "query must not be empty")
    return validate_memory_structure(body.memory) if body.memory is not None else None


@router.get("", response_model=List[dict])
def list_personas():
    return [PERSONALITIES[pid].to_dict() for pid in CATALOG_ORDER]


@router.get("/samples")
def samples() -> Dict[str, str]:
    return SAMPLE_QUERIES


@router.post("/respond")
def respond_all_personas(body: RespondBody, llm_fn: Optional[LLMFn] = Depends(get_llm_fn)):
    """NDJSON stream: one {"personality", "response"} line per persona, in catalog order."""
    memory = _memory(body)

    def _lines():
        for pid, text in respond_all(memory, body.query, llm_fn=llm_fn):
            yield json.dumps({"personality": pid.value, "response": text}) + "\n"

    return StreamingResponse(_lines(), media_type="application/x-ndjson")


@router.post("/{personality_id}/respond", response_model=PersonaResponse)
def respond_one(personality_id: str, body: RespondBody, llm_fn: Optional[LLMFn] = Depends(get_llm_fn)):
    try:
        pid = PersonalityId(personality_id)
    except ValueError:
        raise HTTPException(404, f"unknown personality: {personality_id}")
    memory = _memory(body)
    return PersonaResponse(personality=pid.value, response=respond(pid, memory, body.query, llm_fn=llm_fn))
