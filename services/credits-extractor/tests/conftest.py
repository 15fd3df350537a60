"""Shared test fixtures for credits extractor tests."""

import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path so we can import the modules
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def sample_credits_text() -> str:
    """Credits text mixing a release date with biographical dates."""
    return (
        "Lena Vos (lena@example.com)\n"
        "Belgian producer, living in Brussels since 2019.\n"
        "Started making music in 2020.\n"
        "Released Summer EP in 2024.\n"
        "Tracklist: 1. Heatwave 2. Low Tide 3. Afterglow\n"
        "I own the masters. Written and produced by me."
    )


@pytest.fixture
def sample_metadata() -> dict:
    """A schema-v3 metadata object as the model would return it."""
    return {
        "artist": {"name": "Lena Vos", "email": "lena@example.com"},
        "releases": [
            {
                "title": "Summer EP",
                "type": "EP",
                "year": "2024",
                "tracks": ["Heatwave", "Low Tide", "Afterglow"],
            }
        ],
        "rights": {
            "masterOwnership": "OWNS",
            "masterOwnershipNotes": None,
            "composition": "SOLE",
            "compositionNotes": None,
        },
        "clarificationNeeded": [],
        "parsingErrors": [],
    }


@pytest.fixture
def mock_json_reply(sample_metadata: dict) -> str:
    """Bare JSON model reply."""
    return json.dumps(sample_metadata)


@pytest.fixture
def mock_fenced_reply(sample_metadata: dict) -> str:
    """Model reply wrapped in a markdown code fence."""
    return "```json\n" + json.dumps(sample_metadata, indent=2) + "\n```"


@pytest.fixture
def mock_invalid_reply() -> str:
    """Model reply that is prose, not JSON."""
    return "I could not find any credits in this document, sorry."


def messages_api_body(*texts: str) -> dict:
    """Build a Messages API response body with one text block per argument."""
    return {
        "id": "msg_test",
        "type": "message",
        "role": "assistant",
        "model": "claude-sonnet-4-20250514",
        "content": [{"type": "text", "text": text} for text in texts],
        "stop_reason": "end_turn",
        "usage": {"input_tokens": 100, "output_tokens": 50},
    }


@pytest.fixture
def messages_body():
    return messages_api_body
