"""Turn an uploaded image into a URL the renderer can display."""
from __future__ import annotations

import base64
import mimetypes

MAX_IMAGE_BYTES = 5 * 1024 * 1024
ALLOWED_IMAGE_TYPES = frozenset({"image/jpeg", "image/png", "image/webp", "image/gif", "image/svg+xml"})


class MediaError(ValueError):
    pass


def guess_content_type(content_type: str | None, filename: str | None) -> str:
    ct = (content_type or "").split(";")[0].strip().lower()
    if ct and ct != "application/octet-stream":
        return ct
    guessed, _ = mimetypes.guess_type(filename or "")
    return (guessed or "").lower()


def image_to_data_url(data: bytes, content_type: str | None = None, filename: str | None = None) -> tuple[str, str]:
    """(data URL, content type). MediaError for empty, oversized or non-image input."""
    if not data:
        raise MediaError("Empty file")
    if len(data) > MAX_IMAGE_BYTES:
        raise MediaError(f"Image exceeds {MAX_IMAGE_BYTES // (1024 * 1024)} MB limit")
    ct = guess_content_type(content_type, filename)
    if ct not in ALLOWED_IMAGE_TYPES:
        raise MediaError("File must be a PNG, JPEG, WEBP, GIF or SVG image")
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{ct};base64,{encoded}", ct
