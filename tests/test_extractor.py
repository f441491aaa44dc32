"""Tests for memory extraction: fence stripping, parsing, validation and the fallback path."""

import json

import httpx
import pytest

from mnemo.ingestion.extractor import extract_memory, fallback_memory, parse_memory_json, strip_code_fences
from mnemo.ingestion.prompts import EXTRACTION_SYSTEM
from mnemo.memory.schema import FALLBACK_NOTE, validate_memory_structure
from mnemo.utils import config


def test_extract_well_formed_reply(messages, json_llm, memory_payload):
    """A schema-matching JSON reply comes back field for field, without a note."""
    memory = extract_memory(messages, llm_fn=json_llm)

    assert memory.note is None
    assert memory.is_fallback is False
    assert memory.preferences == memory_payload["preferences"]
    assert memory.emotional_patterns == memory_payload["emotional_patterns"]
    assert memory.facts == memory_payload["facts"]
    assert memory.personality_traits == memory_payload["personality_traits"]
    assert memory.communication_style == "Direct and concise"
    assert "note" not in memory.to_dict()


def test_extract_sends_one_request_with_conversation(messages, json_llm):
    """One call: fixed system prompt, messages one per line, extraction budget."""
    extract_memory(messages, llm_fn=json_llm)

    assert len(json_llm.calls) == 1
    call = json_llm.calls[0]
    assert call["system"] == EXTRACTION_SYSTEM
    assert call["max_tokens"] == config.EXTRACTION_MAX_TOKENS
    expected_text = "\n".join(m.text for m in messages)
    assert call["user"].endswith(expected_text)
    assert call["user"].startswith("Analyze these messages and extract user memory:")


def test_schema_prompt_names_every_key():
    for key in ("preferences", "emotional_patterns", "facts", "personality_traits", "communication_style",
                "confidence", "importance", "triggers", "frequency"):
        assert key in EXTRACTION_SYSTEM


@pytest.mark.parametrize("wrap", [
    "```json\n{body}\n```",
    "```\n{body}\n```",
    "```json{body}```",
    "  ```json\n{body}\n```  \n",
])
def test_fenced_reply_parses_like_plain(messages, fake_llm, memory_payload, wrap):
    body = json.dumps(memory_payload)
    plain = extract_memory(messages, llm_fn=fake_llm(reply=body))
    fenced = extract_memory(messages, llm_fn=fake_llm(reply=wrap.format(body=body)))

    assert fenced == plain
    assert fenced.note is None


def test_strip_code_fences_is_idempotent():
    text = '```json\n{"a": 1}\n```'
    once = strip_code_fences(text)
    assert once == '{"a": 1}'
    assert strip_code_fences(once) == once


@pytest.mark.parametrize("reply", [
    "Sure! Here is what I found about the user.",
    '{"preferences": [{"category": "Diet"',
    "",
    "null",
])
def test_unparseable_reply_falls_back(messages, fake_llm, reply):
    memory = extract_memory(messages, llm_fn=fake_llm(reply=reply))
    assert memory.note == FALLBACK_NOTE


@pytest.mark.parametrize("error", [
    httpx.ConnectError("connection refused"),
    ValueError("ANTHROPIC_API_KEY not set"),
    RuntimeError("boom"),
])
def test_transport_failure_falls_back(messages, fake_llm, error):
    memory = extract_memory(messages, llm_fn=fake_llm(error=error))
    assert memory.note == FALLBACK_NOTE
    assert memory.personality_traits == ["Self-aware", "Reflective"]


def test_fallback_failure_is_logged(messages, fake_llm, caplog):
    with caplog.at_level("WARNING", logger="mnemo.observability"):
        extract_memory(messages, llm_fn=fake_llm(error=RuntimeError("down")))
    assert "memory_extract_fallback" in caplog.text


def test_partial_reply_is_coerced(messages, fake_llm):
    """Missing and wrong-typed fields are filled with defaults, malformed items pass through."""
    reply = json.dumps({"preferences": "lots", "facts": [{"fact": "no importance"}], "extra": 1})
    memory = extract_memory(messages, llm_fn=fake_llm(reply=reply))

    assert memory.note is None
    assert memory.preferences == []
    assert memory.facts == [{"fact": "no importance"}]
    assert memory.emotional_patterns == []
    assert memory.personality_traits == []
    assert memory.communication_style == "Not enough data to determine"


def test_empty_messages(fake_llm):
    llm = fake_llm(reply="{}")
    memory = extract_memory([], llm_fn=llm)

    assert llm.calls[0]["user"] == "Analyze these messages and extract user memory:\n\n"
    assert memory == validate_memory_structure({})


def test_parse_memory_json_rejects_null():
    with pytest.raises(ValueError):
        parse_memory_json("null")


@pytest.mark.parametrize("reply", ["[1, 2, 3]", "\"just a string\"", "42", "true"])
def test_non_object_json_gives_default_memory(messages, fake_llm, reply):
    """Valid JSON that is not an object is validated into the default Memory, no fallback."""
    memory = extract_memory(messages, llm_fn=fake_llm(reply=reply))

    assert memory.note is None
    assert memory == validate_memory_structure({})


# ── Fallback heuristics ──────────────────────────────────────────────────────


def test_fallback_love_produces_recreation_preference():
    memory = fallback_memory("I love hiking")

    assert len(memory.preferences) >= 1
    pref = memory.preferences[0]
    assert pref["category"] == "Recreation"
    assert pref["confidence"] == "medium"
    assert "I love hiking" in pref["preference"]


def test_fallback_one_preference_per_match():
    memory = fallback_memory("I love hiking. I enjoy chess, and i love tea!")
    assert [p["preference"] for p in memory.preferences] == ["I love hiking", "I enjoy chess", "i love tea"]


def test_fallback_stress_pattern():
    memory = fallback_memory("I'm stressed about deadlines")

    assert len(memory.emotional_patterns) == 1
    pattern = memory.emotional_patterns[0]
    assert pattern["frequency"] == "recurring"
    assert pattern["triggers"] == ["work pressure", "deadlines"]
    assert pattern["pattern"] == "Experiences stress and anxiety"


def test_fallback_multiple_stress_words_single_pattern():
    memory = fallback_memory("worried, anxious and stressed")
    assert len(memory.emotional_patterns) == 1


def test_fallback_keyword_checks_are_case_sensitive():
    """Trigger words are matched as written: capitalised forms do not count."""
    memory = fallback_memory("I LOVE hiking. Stressed out.")
    assert memory.preferences == []
    assert memory.emotional_patterns == []


def test_fallback_ignores_negation():
    memory = fallback_memory("I don't love mornings")
    # "love" is present but the phrase pattern needs "I love"
    assert memory.preferences == []
    memory = fallback_memory("Honestly I love mornings, not")
    assert memory.preferences[0]["preference"] == "I love mornings"


def test_fallback_fixed_fields():
    memory = fallback_memory("")

    assert memory.preferences == []
    assert memory.emotional_patterns == []
    assert memory.facts == []
    assert memory.personality_traits == ["Self-aware", "Reflective"]
    assert memory.communication_style == "Conversational and expressive"
    assert memory.note == FALLBACK_NOTE


def test_fallback_uses_conversation_text(messages, fake_llm):
    memory = extract_memory(messages, llm_fn=fake_llm(error=RuntimeError("down")))

    prefs = [p["preference"] for p in memory.preferences]
    assert any("I love hiking in the mountains" in p for p in prefs)
    assert any("I enjoy cooking pasta on Sundays" in p for p in prefs)
    assert len(memory.emotional_patterns) == 1
