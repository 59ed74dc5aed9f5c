"""
Merge brand kit, saved template overrides and photo filters into one style set.

Precedence, highest first: TemplateConfig, BrandSettings, fixed fallbacks.
Everything here is pure; the same inputs always yield an equal ResolvedStyle.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from models import ImageStyles, LayoutConfig, PropertyDetails, TemplateConfig
from models_branding import BrandSettings

FALLBACK_PRIMARY_COLOR = "#0284c7"
FALLBACK_SECONDARY_COLOR = "#0c4a6e"
FALLBACK_FONT_FAMILY = "Inter"
DEFAULT_OVERLAY_OPACITY = 0.9
PLACEHOLDER_PHOTO_URL = "https://picsum.photos/800/1000"

DEFAULT_LAYOUT = LayoutConfig()


def _num(value: float) -> str:
    return f"{float(value):g}"


def image_filter_for(styles: ImageStyles) -> str:
    return (
        f"brightness({_num(styles.brightness)}%) contrast({_num(styles.contrast)}%) "
        f"saturate({_num(styles.saturation)}%) sepia({_num(styles.sepia)}%) blur({_num(styles.blur)}px)"
    )


def image_transform_for(styles: ImageStyles) -> str:
    return f"scale({_num(styles.zoom)}) rotate({_num(styles.rotation)}deg)"


def merge_layout(override: LayoutConfig | dict[str, Any] | None) -> LayoutConfig:
    """Defaults updated with only the fields the override explicitly sets."""
    if override is None:
        return DEFAULT_LAYOUT.model_copy()
    if isinstance(override, dict):
        override = LayoutConfig.model_validate(override)
    return DEFAULT_LAYOUT.model_copy(update=override.model_dump(exclude_unset=True))


@dataclass(frozen=True)
class ResolvedStyle:
    primary_color: str
    secondary_color: str
    overlay_opacity: float
    image_filter: str
    image_transform: str
    layout: LayoutConfig
    font_family: str
    badge_override: str = ""

    def badge_text(self, default: str) -> str:
        """Override when non-empty (whitespace counts as text), else the layout default."""
        return self.badge_override or default

    def image_css(self, *, opacity: float | None = None, extra_filter: str = "") -> dict[str, str]:
        """Inline CSS for the listing photo; layouts pass opacity=1 or an intrinsic filter."""
        css: dict[str, str] = {}
        filters = " ".join(f for f in (self.image_filter, extra_filter) if f)
        if filters:
            css["filter"] = filters
        if self.image_transform:
            css["transform"] = self.image_transform
        css["opacity"] = _num(self.overlay_opacity if opacity is None else opacity)
        css["object-fit"] = "cover"
        return css


def resolve_style(brand: BrandSettings | None, config: TemplateConfig | None) -> ResolvedStyle:
    config = config or TemplateConfig()
    brand_primary = brand.primary_color if brand else ""
    brand_secondary = brand.secondary_color if brand else ""

    if config.image_styles is not None:
        image_filter = image_filter_for(config.image_styles)
        image_transform = image_transform_for(config.image_styles)
    else:
        image_filter = ""
        image_transform = ""

    return ResolvedStyle(
        primary_color=config.primary_color or brand_primary or FALLBACK_PRIMARY_COLOR,
        secondary_color=config.secondary_color or brand_secondary or FALLBACK_SECONDARY_COLOR,
        # 0 is a valid override
        overlay_opacity=(
            config.overlay_opacity if config.overlay_opacity is not None else DEFAULT_OVERLAY_OPACITY
        ),
        image_filter=image_filter,
        image_transform=image_transform,
        layout=merge_layout(config.layout),
        font_family=(brand.font_family if brand and brand.font_family else FALLBACK_FONT_FAMILY),
        badge_override=config.badge_text or "",
    )


@dataclass(frozen=True)
class RenderContext:
    """Everything one layout routine reads."""
    data: PropertyDetails
    brand: BrandSettings | None
    style: ResolvedStyle

    @property
    def layout(self) -> LayoutConfig:
        return self.style.layout

    @property
    def photo_url(self) -> str:
        return self.data.image_url or PLACEHOLDER_PHOTO_URL


def build_context(
    data: PropertyDetails,
    brand: BrandSettings | None = None,
    config: TemplateConfig | None = None,
) -> RenderContext:
    return RenderContext(data=data, brand=brand, style=resolve_style(brand, config))
