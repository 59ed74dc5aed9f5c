from models import ImageStyles, LayoutConfig, PropertyDetails, TemplateConfig
from models_branding import BrandSettings
from rendering.style_resolver import (
    DEFAULT_OVERLAY_OPACITY,
    FALLBACK_FONT_FAMILY,
    FALLBACK_PRIMARY_COLOR,
    FALLBACK_SECONDARY_COLOR,
    PLACEHOLDER_PHOTO_URL,
    build_context,
    image_filter_for,
    merge_layout,
    resolve_style,
)


def _brand(**kw) -> BrandSettings:
    base = dict(primary_color="#112233", secondary_color="#445566", font_family="Montserrat", agent_name="Ann Agent")
    base.update(kw)
    return BrandSettings(**base)


def test_fallbacks_without_brand_or_config():
    s = resolve_style(None, None)
    assert s.primary_color == FALLBACK_PRIMARY_COLOR
    assert s.secondary_color == FALLBACK_SECONDARY_COLOR
    assert s.overlay_opacity == DEFAULT_OVERLAY_OPACITY
    assert s.font_family == FALLBACK_FONT_FAMILY
    assert s.image_filter == ""
    assert s.image_transform == ""
    assert s.layout == LayoutConfig()


def test_brand_colors_and_font_apply():
    s = resolve_style(_brand(), None)
    assert s.primary_color == "#112233"
    assert s.secondary_color == "#445566"
    assert s.font_family == "Montserrat"


def test_config_override_beats_brand():
    s = resolve_style(_brand(), TemplateConfig(primary_color="#ff0000"))
    assert s.primary_color == "#ff0000"
    assert s.secondary_color == "#445566"


def test_zero_overlay_opacity_is_kept():
    s = resolve_style(None, TemplateConfig(overlay_opacity=0))
    assert s.overlay_opacity == 0
    assert s.image_css()["opacity"] == "0"
    assert s.image_css(opacity=1)["opacity"] == "1"


def test_image_styles_become_filter_and_transform():
    styles = ImageStyles(brightness=120, contrast=90, saturation=0, sepia=10, blur=2, zoom=1.5, rotation=90)
    s = resolve_style(None, TemplateConfig(image_styles=styles))
    assert s.image_filter == "brightness(120%) contrast(90%) saturate(0%) sepia(10%) blur(2px)"
    assert s.image_transform == "scale(1.5) rotate(90deg)"
    css = s.image_css(extra_filter="grayscale(100%)")
    assert css["filter"].endswith("grayscale(100%)")
    assert css["filter"].startswith("brightness(120%)")


def test_default_image_styles_filter_is_neutral():
    assert image_filter_for(ImageStyles()) == "brightness(100%) contrast(100%) saturate(100%) sepia(0%) blur(0px)"


def test_partial_layout_override_keeps_other_defaults():
    layout = merge_layout({"showAgentInfo": False, "textAlignment": "center"})
    assert layout.show_agent_info is False
    assert layout.text_alignment == "center"
    assert layout.show_logo is True
    assert layout.show_badge is True
    assert layout.content_position == "bottom"


def test_badge_text_falls_back_only_when_empty():
    assert resolve_style(None, TemplateConfig(badge_text="")).badge_text("Just Listed") == "Just Listed"
    assert resolve_style(None, TemplateConfig()).badge_text("Just Listed") == "Just Listed"
    assert resolve_style(None, TemplateConfig(badge_text=" ")).badge_text("Just Listed") == " "
    assert resolve_style(None, TemplateConfig(badge_text="Coming Soon")).badge_text("Just Listed") == "Coming Soon"


def test_resolution_is_deterministic():
    cfg = TemplateConfig(primary_color="#abcdef", overlay_opacity=0.4, layout=LayoutConfig(show_badge=False))
    assert resolve_style(_brand(), cfg) == resolve_style(_brand(), cfg)


def test_placeholder_photo_when_image_missing():
    ctx = build_context(PropertyDetails(address="1 Main St", price="$1"))
    assert ctx.photo_url == PLACEHOLDER_PHOTO_URL
    ctx = build_context(PropertyDetails(address="1 Main St", price="$1", imageUrl="https://x/p.jpg"))
    assert ctx.photo_url == "https://x/p.jpg"
