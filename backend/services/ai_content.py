"""
AI caption and description writer.

Every call degrades to a deterministic result when the model is unavailable:
missing key, network failure, malformed JSON. Failures are logged and handed
back as warnings; they never block post creation.
"""
from __future__ import annotations

import json
import logging
import re
import time
from dataclasses import dataclass, field
from typing import Any, Iterable, Literal

from models import Platform, PropertyDetails, Tone
from rendering.format_utils import format_count

logger = logging.getLogger(__name__)

FALLBACK_HASHTAGS = ["#realestate", "#justlisted", "#newhome"]
DESCRIPTION_WORD_LIMIT = 50
DEFAULT_PLATFORMS: tuple[Platform, ...] = ("instagram",)


class AIContentError(Exception):
    """The model could not produce usable content."""


class MissingCredentialError(AIContentError):
    """No API key configured for the text service."""


@dataclass(frozen=True)
class AIContentConfig:
    api_key: str = ""
    model: str = "gpt-4o-mini"
    timeout_s: float = 30.0

    @property
    def has_credentials(self) -> bool:
        return bool((self.api_key or "").strip())


@dataclass
class CaptionResult:
    caption: str
    hashtags: list[str]
    source: Literal["ai", "fallback"] = "ai"
    warnings: list[str] = field(default_factory=list)


def fallback_caption(details: PropertyDetails) -> CaptionResult:
    caption = (
        f"Check out this amazing property at {details.address}! Listed for {details.price}. "
        f"{format_count(details.beds)} beds, {format_count(details.baths)} baths. Contact me for a tour!"
    )
    return CaptionResult(caption=caption, hashtags=list(FALLBACK_HASHTAGS), source="fallback")


def build_caption_prompt(details: PropertyDetails, platforms: Iterable[str], tone: str) -> str:
    platform_text = " and ".join(platforms) or DEFAULT_PLATFORMS[0]
    return f"""Write a {tone} real estate social media post for {platform_text}.
Property Details:
- Address: {details.address}
- Price: {details.price}
- Specs: {format_count(details.beds)} Bed, {format_count(details.baths)} Bath, {format_count(details.sqft)} sqft
- Key Features: {', '.join(details.features)}
- Description Notes: {details.description}

The post should be engaging and optimized for the selected platform's audience.
Include emojis where appropriate.
Return JSON only, no markdown: {{"caption": "main body text of the post", "hashtags": ["5-10 relevant hashtags"]}}"""


def build_description_prompt(raw_text: str) -> str:
    return (
        "Rewrite the following rough property notes into a polished, luxury real estate "
        f'description paragraph (max {DESCRIPTION_WORD_LIMIT} words): "{raw_text}"'
    )


def strip_fences(raw: str) -> str:
    raw = (raw or "").strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```\w*\n?", "", raw)
        raw = re.sub(r"\n?```\s*$", "", raw)
    return raw.strip()


def parse_caption_payload(raw: str) -> tuple[str, list[str]]:
    """caption + hashtags from the model reply; AIContentError when unusable."""
    try:
        out = json.loads(strip_fences(raw))
    except (json.JSONDecodeError, TypeError) as e:
        raise AIContentError(f"malformed caption JSON: {e}") from e
    if not isinstance(out, dict):
        raise AIContentError("caption reply is not a JSON object")
    caption = out.get("caption")
    hashtags = out.get("hashtags")
    if not isinstance(caption, str) or not caption.strip():
        raise AIContentError("caption reply missing 'caption'")
    if not isinstance(hashtags, list):
        raise AIContentError("caption reply missing 'hashtags'")
    tags = []
    for tag in hashtags:
        tag = str(tag).strip()
        if not tag:
            continue
        tags.append(tag if tag.startswith("#") else f"#{tag}")
    return caption.strip(), tags


def cap_words(text: str, limit: int = DESCRIPTION_WORD_LIMIT) -> str:
    words = (text or "").split()
    if len(words) <= limit:
        return " ".join(words)
    return " ".join(words[:limit]).rstrip(",;:") + "…"


def describe_failure(error: Exception) -> str:
    """Short user-facing note for a model failure."""
    msg = str(error).lower()
    if isinstance(error, MissingCredentialError) or "api_key" in msg:
        return "OPENAI_API_KEY is not configured on backend."
    if "invalid api key" in msg or "incorrect api key" in msg or "unauthorized" in msg or "authentication" in msg:
        return "OPENAI_API_KEY is invalid for this backend service."
    if "model" in msg and ("not found" in msg or "does not exist" in msg or "not have access" in msg):
        return "Configured OpenAI model is unavailable for this API key."
    if "rate" in msg or "quota" in msg or "429" in msg:
        return "AI provider rate limit/quota reached."
    if "timeout" in msg or "timed out" in msg:
        return "AI request timed out."
    if "connection" in msg or "network" in msg:
        return "Backend could not connect to OpenAI API."
    if "json" in msg or "caption reply" in msg:
        return "AI reply could not be parsed."
    return "AI service failed."


class AIContentClient:
    """OpenAI chat-completions wrapper with deterministic fallbacks."""

    def __init__(self, config: AIContentConfig, client: Any = None):
        self.config = config
        self._client = client

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client
        if not self.config.has_credentials:
            raise MissingCredentialError("OPENAI_API_KEY not configured")
        from openai import OpenAI

        self._client = OpenAI(api_key=self.config.api_key, timeout=self.config.timeout_s)
        return self._client

    def _complete(self, prompt: str, *, temperature: float, tag: str) -> str:
        client = self._get_client()
        t0 = time.perf_counter()
        response = client.chat.completions.create(
            model=self.config.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
        )
        logger.info("[%s] LLM call duration=%.2fs model=%s", tag, time.perf_counter() - t0, self.config.model)
        content = response.choices[0].message.content
        return (content or "").strip()

    def generate_caption(
        self,
        details: PropertyDetails,
        platforms: Iterable[Platform] = DEFAULT_PLATFORMS,
        tone: Tone = "professional",
    ) -> CaptionResult:
        platforms = list(platforms) or list(DEFAULT_PLATFORMS)
        try:
            raw = self._complete(build_caption_prompt(details, platforms, tone), temperature=0.7, tag="caption")
            caption, hashtags = parse_caption_payload(raw)
        except Exception as e:
            logger.warning("[caption] falling back address=%r error=%s", details.address, e)
            result = fallback_caption(details)
            result.warnings = [
                "AI caption generation was unavailable; used a template caption.",
                describe_failure(e),
            ]
            return result
        return CaptionResult(caption=caption, hashtags=hashtags or list(FALLBACK_HASHTAGS), source="ai")

    def optimize_description(self, raw_text: str) -> tuple[str, list[str]]:
        """Polished paragraph, or the input unchanged (with warnings) when the model fails."""
        if not (raw_text or "").strip():
            return raw_text, []
        try:
            text = self._complete(build_description_prompt(raw_text), temperature=0.5, tag="description")
        except Exception as e:
            logger.warning("[description] returning input unchanged error=%s", e)
            return raw_text, ["AI rewrite was unavailable; kept your original text.", describe_failure(e)]
        text = strip_fences(text).strip().strip('"').strip()
        if not text:
            return raw_text, ["AI rewrite returned nothing; kept your original text."]
        return cap_words(text), []
