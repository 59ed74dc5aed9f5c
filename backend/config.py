"""Runtime settings read from the environment (and backend/.env when present)."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

BACKEND_DIR = Path(__file__).resolve().parent

load_dotenv(BACKEND_DIR / ".env")

DEFAULT_CAPTION_MODEL = "gpt-4o-mini"
DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
]


@dataclass(frozen=True)
class Settings:
    openai_api_key: str = ""
    caption_model: str = DEFAULT_CAPTION_MODEL
    ai_timeout_s: float = 30.0
    allowed_origins: list[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))

    @property
    def ai_enabled(self) -> bool:
        return bool(self.openai_api_key.strip())


def _float_env(name: str, default: float) -> float:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def load_settings() -> Settings:
    origins_env = os.environ.get("ALLOWED_ORIGINS", "").strip()
    if origins_env:
        origins = [o.strip() for o in origins_env.split(",") if o.strip()]
    else:
        origins = list(DEFAULT_ALLOWED_ORIGINS)
    return Settings(
        openai_api_key=(os.environ.get("OPENAI_API_KEY") or "").strip(),
        caption_model=(os.environ.get("OPENAI_CAPTION_MODEL") or "").strip() or DEFAULT_CAPTION_MODEL,
        ai_timeout_s=_float_env("AI_TIMEOUT_SECONDS", 30.0),
        allowed_origins=origins,
    )
