"""Backend services."""

from services.ai_content import (
    AIContentClient,
    AIContentConfig,
    CaptionResult,
    MissingCredentialError,
)
from services.media import MediaError, image_to_data_url

__all__ = [
    "AIContentClient",
    "AIContentConfig",
    "CaptionResult",
    "MissingCredentialError",
    "MediaError",
    "image_to_data_url",
]
