"""Brand kit: the agent identity applied to every rendered template."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

FontFamily = Literal["Inter", "Playfair Display", "Montserrat", "Lato"]


class BrandSettings(BaseModel):
    """Agent brand kit (colors, font, logo, contact details)."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    primary_color: str = Field(default="#0ea5e9", validation_alias=AliasChoices("primary_color", "primaryColor"))
    secondary_color: str = Field(default="#0c4a6e", validation_alias=AliasChoices("secondary_color", "secondaryColor"))
    font_family: FontFamily = Field(default="Inter", validation_alias=AliasChoices("font_family", "fontFamily"))
    logo_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("logo_url", "logoUrl"))
    agent_name: str = Field(default="", validation_alias=AliasChoices("agent_name", "agentName"))
    agent_photo_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("agent_photo_url", "agentPhotoUrl"))
    agency_name: str = Field(default="", validation_alias=AliasChoices("agency_name", "agencyName"))
    website: str = ""
    phone: str = ""
    email: str = ""
