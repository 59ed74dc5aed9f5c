import pytest

from models import LayoutConfig, PropertyDetails, TemplateConfig, TemplateId
from models_branding import BrandSettings
from rendering import render_template
from rendering.layouts import (
    LAYOUTS,
    LUXURY_GOLD,
    LUXURY_SERIF_FILTER,
    SOLD_FILTER,
    UNDER_CONTRACT_FILTER,
)

DATA = PropertyDetails(
    address="8800 Sunset Blvd, LA",
    price="$1,200,000",
    beds=2,
    baths=2,
    sqft=1400,
    image_url="https://example.com/p.jpg",
)
BRAND = BrandSettings(
    primary_color="#b08d57",
    secondary_color="#1a1a1a",
    agent_name="Jane Smith",
    agency_name="Coastal Luxury Estates",
    phone="(555) 987-6543",
    email="jane@coastalluxury.com",
    website="www.coastalluxury.com",
    logo_url="https://example.com/logo.png",
)

# Layouts whose headline is a status, not the price
NO_PRICE = {TemplateId.SOLD, TemplateId.UNDER_CONTRACT}


def test_every_fixed_template_has_a_layout():
    assert set(LAYOUTS) == set(TemplateId) - {TemplateId.CUSTOM_BUILDER}


@pytest.mark.parametrize("template_id", list(LAYOUTS))
def test_fixed_layout_renders_card(template_id):
    node = render_template(template_id, DATA, BRAND)
    assert node.role == "card"
    assert node.attrs["data-template"] == template_id.value
    assert node.style["width"] == "400px"
    assert node.style["height"] == "500px"
    assert node.find("photo").attrs["src"] == "https://example.com/p.jpg"
    text = node.text_content()
    if template_id not in NO_PRICE:
        assert "$1,200,000" in text
    assert "8800 Sunset Blvd" in text
    assert "2.0" not in text
    html = node.to_html()
    assert html.startswith("<div")
    assert 'data-template="%s"' % template_id.value in html


@pytest.mark.parametrize("template_id", list(LAYOUTS))
def test_fixed_layout_renders_without_brand(template_id):
    node = render_template(template_id, DATA, None)
    assert node.role == "card"
    assert node.find("logo") is None
    assert node.find("agent-badge") is None


def test_sold_photo_is_grayscale_with_user_filters():
    config = TemplateConfig(image_styles={"brightness": 110})
    photo = render_template(TemplateId.SOLD, DATA, BRAND, config).find("photo")
    assert photo.style["filter"].startswith("brightness(110%)")
    assert photo.style["filter"].endswith(SOLD_FILTER)


def test_under_contract_photo_is_blurred():
    photo = render_template(TemplateId.UNDER_CONTRACT, DATA, BRAND).find("photo")
    assert UNDER_CONTRACT_FILTER in photo.style["filter"]


def test_luxury_serif_photo_filter():
    photo = render_template(TemplateId.LUXURY_SERIF, DATA, BRAND).find("photo")
    assert LUXURY_SERIF_FILTER in photo.style["filter"]


def test_luxury_serif_uses_gold_when_primary_is_stock_blue():
    badge = render_template(TemplateId.LUXURY_SERIF, DATA, None).find("badge")
    assert badge.style["color"] == LUXURY_GOLD
    badge = render_template(TemplateId.LUXURY_SERIF, DATA, BRAND).find("badge")
    assert badge.style["color"] == "#b08d57"


def test_sidebar_badge_ignores_show_badge_but_tag_does_not():
    config = TemplateConfig(layout=LayoutConfig(show_badge=False))
    node = render_template(TemplateId.SIDEBAR_LISTING, DATA, BRAND, config)
    assert node.find("badge").text == "Just Listed"
    assert node.find("tag") is None
    node = render_template(TemplateId.SIDEBAR_LISTING, DATA, BRAND, TemplateConfig(badge_text="Coming Soon"))
    assert node.find("badge").text == "Coming Soon"
    assert node.find("tag").text == "New Listing"


def test_under_contract_headline_always_shown():
    config = TemplateConfig(layout=LayoutConfig(show_badge=False))
    node = render_template(TemplateId.UNDER_CONTRACT, DATA, BRAND, config)
    assert node.find("badge").text == "Under Contract"


def test_under_contract_agent_name_fallback():
    node = render_template(TemplateId.UNDER_CONTRACT, DATA, None)
    assert node.find("agent-name").text == "Agent"


def test_open_house_event_time_and_contact():
    node = render_template(TemplateId.OPEN_HOUSE, DATA, BRAND)
    assert "SUN" in node.find("event-time").text_content()
    info = node.find("agent-info")
    assert info.find("agent-website").text == "www.coastalluxury.com"
    assert info.find("agent-phone").text == "(555) 987-6543"


def test_price_drop_badge_override():
    node = render_template(TemplateId.PRICE_DROP, DATA, BRAND, TemplateConfig(badge_text="Reduced"))
    assert node.find("badge").text == "Reduced"


def test_bold_grid_frame_uses_primary_color():
    node = render_template(TemplateId.BOLD_GRID, DATA, BRAND, TemplateConfig(primary_color="#00ff00"))
    assert node.find("frame").style["border"] == "8px solid #00ff00"
    assert "filter" not in node.find("logo").style


@pytest.mark.parametrize("position", ["top", "center", "bottom", "below-image"])
def test_just_listed_accepts_every_content_position(position):
    config = TemplateConfig(layout=LayoutConfig(content_position=position))
    node = render_template(TemplateId.JUST_LISTED, DATA, BRAND, config)
    expected = {"top": "flex-start", "center": "center"}.get(position, "flex-end")
    assert node.style["justify-content"] == expected
