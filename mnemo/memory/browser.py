"""Memory browser views: filter preferences/facts by level and count items per bucket."""
from __future__ import annotations

from typing import Any, Dict, List

from mnemo.memory.schema import CONFIDENCE_LEVELS, IMPORTANCE_LEVELS, Memory, item_field

ALL = "all"


def filter_preferences(memory: Memory, confidence: str = ALL) -> List[Any]:
    if confidence == ALL:
        return list(memory.preferences)
    return [p for p in memory.preferences if item_field(p, "confidence") == confidence]


def filter_facts(memory: Memory, importance: str = ALL) -> List[Any]:
    if importance == ALL:
        return list(memory.facts)
    return [f for f in memory.facts if item_field(f, "importance") == importance]


def _bucket_counts(items: List[Any], key: str, levels: tuple) -> Dict[str, int]:
    # Items with a missing or unknown level count in no bucket
    counts = {level: 0 for level in levels}
    for item in items:
        level = item_field(item, key)
        if level in counts:
            counts[level] += 1
    return counts


def confidence_stats(memory: Memory) -> Dict[str, int]:
    return _bucket_counts(memory.preferences, "confidence", CONFIDENCE_LEVELS)


def importance_stats(memory: Memory) -> Dict[str, int]:
    return _bucket_counts(memory.facts, "importance", IMPORTANCE_LEVELS)


def memory_overview(memory: Memory) -> Dict[str, int]:
    return {
        "preferences": len(memory.preferences),
        "emotional_patterns": len(memory.emotional_patterns),
        "facts": len(memory.facts),
        "personality_traits": len(memory.personality_traits),
    }
