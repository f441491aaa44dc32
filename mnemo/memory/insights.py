"""Memory projections: key insights summary and the compact prompt context block."""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from mnemo.memory.schema import Memory, item_field


class KeyInsights(BaseModel):
    top_preferences: List[Any] = Field(default_factory=list)
    critical_facts: List[Any] = Field(default_factory=list)
    primary_emotional_concerns: List[Any] = Field(default_factory=list)


def get_key_insights(memory: Memory) -> KeyInsights:
    """Top 5 high-confidence preferences, high-importance facts, recurring/common emotional patterns."""
    return KeyInsights(
        top_preferences=[p for p in memory.preferences if item_field(p, "confidence") == "high"][:5],
        critical_facts=[f for f in memory.facts if item_field(f, "importance") == "high"],
        primary_emotional_concerns=[
            p for p in memory.emotional_patterns if item_field(p, "frequency") in ("recurring", "common")
        ],
    )


def _join(values: List[Any]) -> str:
    return ", ".join("" if v is None else str(v) for v in values)


def format_memory_context(memory: Optional[Memory]) -> str:
    """
    Render a Memory as prompt context, one line per category:
    preferences, facts, emotional patterns, personality, communication style.
    Returns "" for None.
    """
    if memory is None:
        return ""
    sections = []
    if memory.preferences:
        top = [
            item_field(p, "preference")
            for p in memory.preferences
            if item_field(p, "confidence") in ("high", "medium")
        ][:5]
        sections.append(f"Key Preferences: {_join(top)}")
    if memory.facts:
        important = _join([item_field(f, "fact") for f in memory.facts if item_field(f, "importance") == "high"])
        if important:
            sections.append(f"Important Facts: {important}")
    if memory.emotional_patterns:
        sections.append(f"Emotional Patterns: {_join([item_field(p, 'pattern') for p in memory.emotional_patterns])}")
    if memory.personality_traits:
        sections.append(f"Personality: {_join(memory.personality_traits)}")
    if memory.communication_style:
        sections.append(f"Communication Style: {memory.communication_style}")
    return "\n".join(sections)
