"""Caption and description service, driven by a fake chat client (no network)."""
from types import SimpleNamespace

import pytest

from models import PropertyDetails
from services.ai_content import (
    FALLBACK_HASHTAGS,
    AIContentClient,
    AIContentConfig,
    AIContentError,
    build_caption_prompt,
    cap_words,
    parse_caption_payload,
)

DETAILS = PropertyDetails(
    address="123 Maple Avenue, Beverly Hills",
    price="$2,450,000",
    beds=4,
    baths=3.5,
    sqft=3200,
    features=["Pool", "Smart Home"],
    description="Modern farmhouse.",
)


class FakeCompletions:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=self.reply))])


def _client(reply=None, error=None):
    completions = FakeCompletions(reply, error)
    fake = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return AIContentClient(AIContentConfig(api_key="test-key", model="test-model"), client=fake), completions


def test_caption_from_model_json():
    client, completions = _client('{"caption": "Dream home!", "hashtags": ["luxury", "#BeverlyHills"]}')
    result = client.generate_caption(DETAILS, ["instagram", "facebook"], "luxury")
    assert result.source == "ai"
    assert result.caption == "Dream home!"
    assert result.hashtags == ["#luxury", "#BeverlyHills"]
    assert result.warnings == []
    call = completions.calls[0]
    assert call["model"] == "test-model"
    prompt = call["messages"][0]["content"]
    assert "luxury" in prompt
    assert "instagram and facebook" in prompt
    assert "3.5 Bath" in prompt


def test_caption_accepts_fenced_json():
    client, _ = _client('```json\n{"caption": "Hi", "hashtags": ["#a"]}\n```')
    assert client.generate_caption(DETAILS).caption == "Hi"


def test_malformed_json_falls_back():
    client, _ = _client("Sure! Here is your caption: amazing house")
    result = client.generate_caption(DETAILS, ["instagram"], "excited")
    assert result.source == "fallback"
    assert result.caption.startswith("Check out this amazing property at 123 Maple Avenue, Beverly Hills!")
    assert "Listed for $2,450,000" in result.caption
    assert "4 beds, 3.5 baths" in result.caption
    assert result.hashtags == FALLBACK_HASHTAGS
    assert len(result.warnings) == 2


def test_network_error_falls_back():
    client, _ = _client(error=ConnectionError("connection reset"))
    result = client.generate_caption(DETAILS)
    assert result.source == "fallback"
    assert "Backend could not connect to OpenAI API." in result.warnings


def test_missing_key_falls_back_without_calling_sdk():
    client = AIContentClient(AIContentConfig(api_key=""))
    result = client.generate_caption(DETAILS)
    assert result.source == "fallback"
    assert "OPENAI_API_KEY is not configured on backend." in result.warnings


def test_parse_caption_payload_rejects_non_object():
    with pytest.raises(AIContentError):
        parse_caption_payload('["just", "a", "list"]')
    with pytest.raises(AIContentError):
        parse_caption_payload('{"hashtags": []}')


def test_caption_prompt_defaults_platform():
    assert "for instagram" in build_caption_prompt(DETAILS, [], "professional")


def test_description_is_rewritten_and_capped():
    long_reply = " ".join(["word"] * 80)
    client, completions = _client(long_reply)
    text, warnings = client.optimize_description("big kitchen, near park")
    assert warnings == []
    assert text.endswith("…")
    assert len(text.split()) == 50
    assert "big kitchen, near park" in completions.calls[0]["messages"][0]["content"]


def test_empty_description_makes_no_call():
    client, completions = _client("unused")
    assert client.optimize_description("   ") == ("   ", [])
    assert completions.calls == []


def test_description_failure_returns_input():
    client, _ = _client(error=TimeoutError("Request timed out"))
    text, warnings = client.optimize_description("cozy cottage")
    assert text == "cozy cottage"
    assert "AI request timed out." in warnings


def test_description_empty_reply_returns_input():
    client, _ = _client("")
    text, warnings = client.optimize_description("cozy cottage")
    assert text == "cozy cottage"
    assert warnings


def test_cap_words_keeps_short_text():
    assert cap_words("a  short   note") == "a short note"
