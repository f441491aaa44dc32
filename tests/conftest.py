"""Shared fixtures: sample messages, memories and fake completion functions. No network."""

import json

import pytest

from mnemo.ingestion.parser import Message


@pytest.fixture()
def messages():
    return [
        Message(id=0, text="I love hiking in the mountains.", timestamp="2024-01-01T09:00:00Z"),
        Message(id=1, text="Work is rough, I'm stressed about deadlines.", timestamp="2024-01-02T10:30:00Z"),
        Message(id=2, text="I enjoy cooking pasta on Sundays!", timestamp="2024-01-04T18:15:00Z"),
    ]


@pytest.fixture()
def memory_payload():
    """A well-formed extraction reply as the model would return it."""
    return {
        "preferences": [
            {"category": "Recreation", "preference": "Hiking in the mountains", "confidence": "high"},
            {"category": "Diet", "preference": "Cooking pasta", "confidence": "medium"},
            {"category": "Work", "preference": "Async communication", "confidence": "low"},
        ],
        "emotional_patterns": [
            {"pattern": "Work stress", "triggers": ["deadlines"], "frequency": "recurring"},
            {"pattern": "Weekend calm", "triggers": ["nature"], "frequency": "occasional"},
        ],
        "facts": [
            {"category": "Professional", "fact": "Works as a backend engineer", "importance": "high"},
            {"category": "Learning", "fact": "Learning Rust", "importance": "medium"},
        ],
        "personality_traits": ["Curious", "Driven"],
        "communication_style": "Direct and concise",
    }


class FakeLLM:
    """Records calls and answers from a fixed reply, or raises."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def __call__(self, system, user, max_tokens):
        self.calls.append({"system": system, "user": user, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture()
def fake_llm():
    return FakeLLM


@pytest.fixture()
def json_llm(memory_payload):
    return FakeLLM(reply=json.dumps(memory_payload))
