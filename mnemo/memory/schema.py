"""User memory schema: preferences, emotional patterns, facts, personality traits, communication style."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional

from pydantic import BaseModel, Field

DEFAULT_COMMUNICATION_STYLE = "Not enough data to determine"
FALLBACK_NOTE = "Fallback extraction - AI service unavailable"

CONFIDENCE_LEVELS = ("high", "medium", "low")
IMPORTANCE_LEVELS = ("high", "medium", "low")
FREQUENCIES = ("recurring", "occasional", "common", "emerging")
PREFERENCE_CATEGORIES = ("Work", "Lifestyle", "Technology", "Diet", "Recreation", "Communication")
FACT_CATEGORIES = ("Personal", "Background", "Professional", "Social", "Wellness", "Goals", "Learning")

_CONTAINER_FIELDS = ("preferences", "emotional_patterns", "facts", "personality_traits")


class Preference(BaseModel):
    category: str  # one of PREFERENCE_CATEGORIES, free-form tolerated
    preference: str
    confidence: str  # high | medium | low


class EmotionalPattern(BaseModel):
    pattern: str
    triggers: List[str] = Field(default_factory=list)
    frequency: str  # one of FREQUENCIES, free-form tolerated


class Fact(BaseModel):
    category: str  # one of FACT_CATEGORIES, free-form tolerated
    fact: str
    importance: str  # high | medium | low


class Memory(BaseModel):
    """
    Validated extraction result. Every field is always present.
    List items are the parsed JSON values as the model returned them; read sub-fields with item_field().
    """

    preferences: List[Any] = Field(default_factory=list)
    emotional_patterns: List[Any] = Field(default_factory=list)
    facts: List[Any] = Field(default_factory=list)
    personality_traits: List[Any] = Field(default_factory=list)
    communication_style: str = DEFAULT_COMMUNICATION_STYLE
    note: Optional[str] = None  # set only on fallback extraction

    class Config:
        frozen = True

    @property
    def is_fallback(self) -> bool:
        return self.note is not None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict; `note` is omitted unless set."""
        return self.model_dump(exclude_none=True)


def item_field(item: Any, key: str) -> Any:
    """Sub-field of a memory item, or None when missing or the item is not a mapping."""
    if isinstance(item, Mapping):
        return item.get(key)
    return None


def validate_memory_structure(raw: Any) -> Memory:
    """
    Coerce an untrusted parsed value into a Memory, field by field.
    Non-list containers become []; absent or falsy communication_style becomes the default.
    Items are not checked. Non-mapping input is treated as {}.
    """
    if not isinstance(raw, Mapping):
        raw = {}
    fields: dict[str, Any] = {}
    for name in _CONTAINER_FIELDS:
        value = raw.get(name)
        fields[name] = list(value) if isinstance(value, list) else []
    style = raw.get("communication_style")
    if not style:
        style = DEFAULT_COMMUNICATION_STYLE
    elif not isinstance(style, str):
        style = str(style)
    fields["communication_style"] = style
    return Memory(**fields)
