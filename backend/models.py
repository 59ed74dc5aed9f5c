from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from models_branding import BrandSettings

TextAlignment = Literal["left", "center", "right"]
ContentPosition = Literal["top", "center", "bottom", "below-image"]
HeaderStyle = Literal["transparent", "solid-primary", "solid-secondary", "solid-white"]
FooterStyle = Literal["transparent", "solid-primary", "solid-secondary", "solid-white", "minimal"]
Platform = Literal["instagram", "facebook", "linkedin"]
Tone = Literal["professional", "excited", "luxury"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TemplateId(str, Enum):
    """The closed set of renderable layouts."""
    JUST_LISTED = "just-listed"
    OPEN_HOUSE = "open-house"
    SOLD = "sold"
    PRICE_DROP = "price-drop"
    MODERN_MINIMAL = "modern-minimal"
    LUXURY_SERIF = "luxury-serif"
    BOLD_GRID = "bold-grid"
    GEOMETRIC_POP = "geometric-pop"
    FEATURE_SPLIT = "feature-split"
    STORY_PORTRAIT = "story-portrait"
    CLASSIC_CARD = "classic-card"
    UNDER_CONTRACT = "under-contract"
    NEW_PRICE = "new-price"
    NEIGHBORHOOD_FOCUS = "neighborhood-focus"
    SIDEBAR_LISTING = "sidebar-listing"
    DIAGONAL_FEATURE = "diagonal-feature"
    SOFT_LUXURY = "soft-luxury"
    CUSTOM_BUILDER = "custom-builder"


# Gallery order and display labels
STANDARD_TEMPLATES: list[tuple[TemplateId, str]] = [
    (TemplateId.CUSTOM_BUILDER, "Blank Canvas"),
    (TemplateId.JUST_LISTED, "Just Listed"),
    (TemplateId.SIDEBAR_LISTING, "Sidebar Modern"),
    (TemplateId.DIAGONAL_FEATURE, "Diagonal Accent"),
    (TemplateId.SOFT_LUXURY, "Soft Luxury"),
    (TemplateId.MODERN_MINIMAL, "Minimalist"),
    (TemplateId.LUXURY_SERIF, "Luxury"),
    (TemplateId.STORY_PORTRAIT, "Story Style"),
    (TemplateId.BOLD_GRID, "Bold Grid"),
    (TemplateId.FEATURE_SPLIT, "Split View"),
    (TemplateId.OPEN_HOUSE, "Open House"),
    (TemplateId.GEOMETRIC_POP, "Geometric"),
    (TemplateId.CLASSIC_CARD, "Classic"),
    (TemplateId.UNDER_CONTRACT, "Contract"),
    (TemplateId.SOLD, "Sold"),
    (TemplateId.PRICE_DROP, "Price Drop"),
    (TemplateId.NEW_PRICE, "New Price"),
    (TemplateId.NEIGHBORHOOD_FOCUS, "Location"),
]


class ListingStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    SOLD = "sold"


class PostStatus(str, Enum):
    DRAFT = "draft"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"


class PropertyDetails(BaseModel):
    """Listing facts fed to the renderer and the caption service."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    address: str = ""
    price: str = ""  # display string, never parsed
    beds: float = Field(default=0, ge=0)
    baths: float = Field(default=0, ge=0)
    sqft: float = Field(default=0, ge=0)
    description: str = ""
    features: List[str] = Field(default_factory=list)
    image_url: str = Field(default="", validation_alias=AliasChoices("image_url", "imageUrl"))

    @field_validator("features", mode="before")
    @classmethod
    def normalize_features(cls, v):
        """Accept a comma separated string as well as a list."""
        if v is None:
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return [str(s).strip() for s in v if str(s).strip()]


class Listing(PropertyDetails):
    id: str = ""
    status: ListingStatus = ListingStatus.ACTIVE
    date_added: datetime = Field(default_factory=_utcnow, validation_alias=AliasChoices("date_added", "dateAdded"))

    def property_details(self) -> PropertyDetails:
        return PropertyDetails(**self.model_dump(include=set(PropertyDetails.model_fields)))


class ImageStyles(BaseModel):
    """Photo filter parameters. Ranges are enforced here, not by the renderer."""
    brightness: float = Field(default=100, ge=0, le=200)
    contrast: float = Field(default=100, ge=0, le=200)
    saturation: float = Field(default=100, ge=0, le=200)
    sepia: float = Field(default=0, ge=0, le=100)
    blur: float = Field(default=0, ge=0, le=20)
    zoom: float = Field(default=1, ge=1, le=2)
    rotation: float = Field(default=0, ge=0, le=360)


class LayoutConfig(BaseModel):
    """
    Layout flags for the custom builder (several fixed layouts read them too).

    When used inside TemplateConfig only the fields the caller actually set
    override the defaults; see rendering.style_resolver.merge_layout.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    show_logo: bool = Field(default=True, validation_alias=AliasChoices("show_logo", "showLogo"))
    show_agent_info: bool = Field(default=True, validation_alias=AliasChoices("show_agent_info", "showAgentInfo"))
    show_badge: bool = Field(default=True, validation_alias=AliasChoices("show_badge", "showBadge"))
    text_alignment: TextAlignment = Field(default="left", validation_alias=AliasChoices("text_alignment", "textAlignment"))
    content_position: ContentPosition = Field(default="bottom", validation_alias=AliasChoices("content_position", "contentPosition"))
    header_style: HeaderStyle = Field(default="transparent", validation_alias=AliasChoices("header_style", "headerStyle"))
    footer_style: FooterStyle = Field(default="transparent", validation_alias=AliasChoices("footer_style", "footerStyle"))


class TemplateConfig(BaseModel):
    """Saved overrides layered over the brand kit and the layout defaults."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    badge_text: Optional[str] = Field(default=None, validation_alias=AliasChoices("badge_text", "badgeText"))
    primary_color: Optional[str] = Field(default=None, validation_alias=AliasChoices("primary_color", "primaryColor"))
    secondary_color: Optional[str] = Field(default=None, validation_alias=AliasChoices("secondary_color", "secondaryColor"))
    overlay_opacity: Optional[float] = Field(default=None, ge=0, le=1, validation_alias=AliasChoices("overlay_opacity", "overlayOpacity"))
    image_styles: Optional[ImageStyles] = Field(default=None, validation_alias=AliasChoices("image_styles", "imageStyles"))
    layout: Optional[LayoutConfig] = None


class CustomTemplate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    base_template_id: TemplateId = Field(validation_alias=AliasChoices("base_template_id", "baseTemplateId"))
    config: TemplateConfig = Field(default_factory=TemplateConfig)
    created_at: datetime = Field(default_factory=_utcnow, validation_alias=AliasChoices("created_at", "createdAt"))


class SocialPost(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    platforms: List[Platform]
    content: str = ""
    hashtags: List[str] = Field(default_factory=list)
    scheduled_date: Optional[datetime] = Field(default=None, validation_alias=AliasChoices("scheduled_date", "scheduledDate"))
    status: PostStatus = PostStatus.DRAFT
    template_id: str = Field(default=TemplateId.JUST_LISTED.value, validation_alias=AliasChoices("template_id", "templateId"))
    property_details: PropertyDetails = Field(validation_alias=AliasChoices("property_details", "propertyDetails"))


# --- Request/response schemas ---

class RenderRequest(BaseModel):
    """Body for POST /render/preview and POST /render/png."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    template_id: str = Field(validation_alias=AliasChoices("template_id", "templateId", "type"))
    property_data: PropertyDetails = Field(validation_alias=AliasChoices("property_data", "propertyData", "property", "data"))
    brand: Optional[BrandSettings] = Field(default=None, validation_alias=AliasChoices("brand", "brandSettings"))
    config: Optional[TemplateConfig] = Field(default=None, validation_alias=AliasChoices("config", "customConfig"))
    use_brand_kit: bool = Field(default=True, validation_alias=AliasChoices("use_brand_kit", "useBrandKit"))


class CustomTemplateCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    base_template_id: str = Field(
        default=TemplateId.CUSTOM_BUILDER.value,
        validation_alias=AliasChoices("base_template_id", "baseTemplateId"),
    )
    config: TemplateConfig = Field(default_factory=TemplateConfig)


class PostCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    platforms: List[Platform] = Field(default_factory=list)
    content: str = ""
    hashtags: List[str] = Field(default_factory=list)
    scheduled_date: Optional[datetime] = Field(default=None, validation_alias=AliasChoices("scheduled_date", "scheduledDate"))
    template_id: str = Field(default=TemplateId.JUST_LISTED.value, validation_alias=AliasChoices("template_id", "templateId"))
    property_details: PropertyDetails = Field(validation_alias=AliasChoices("property_details", "propertyDetails"))


class CaptionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    property_details: PropertyDetails = Field(validation_alias=AliasChoices("property_details", "propertyDetails", "details"))
    platforms: List[Platform] = Field(default_factory=list)
    tone: Tone = "professional"


class CaptionResponse(BaseModel):
    caption: str
    hashtags: List[str]
    source: Literal["ai", "fallback"] = "ai"
    warnings: List[str] = Field(default_factory=list)


class DescriptionRequest(BaseModel):
    text: str = ""


class DescriptionResponse(BaseModel):
    text: str
    optimized: bool = False
    warnings: List[str] = Field(default_factory=list)


class PostStats(BaseModel):
    total: int = 0
    scheduled: int = 0
    published: int = 0


class DashboardResponse(BaseModel):
    stats: PostStats
    recent_posts: List[SocialPost]


class UploadResponse(BaseModel):
    url: str
    content_type: str
    size_bytes: int
