from models import CustomTemplate, LayoutConfig, PropertyDetails, TemplateConfig, TemplateId
from models_branding import BrandSettings
from rendering import build_card_html, render_custom_template, render_template
from rendering.layouts import SOLD_FILTER
from rendering.template_renderer import UNKNOWN_TEMPLATE_TEXT


def _property(**kw) -> PropertyDetails:
    base = dict(
        address="123 Maple Avenue, Beverly Hills",
        price="$2,450,000",
        beds=4,
        baths=2.0,
        sqft=3200,
        image_url="https://example.com/house.jpg",
    )
    base.update(kw)
    return PropertyDetails(**base)


def _brand(**kw) -> BrandSettings:
    base = dict(
        primary_color="#0ea5e9",
        secondary_color="#0c4a6e",
        font_family="Inter",
        logo_url="https://example.com/logo.png",
        agent_name="John Doe",
        agency_name="Realty One Group",
        website="www.johndoerealty.com",
        phone="(555) 123-4567",
        email="john@realty.com",
    )
    base.update(kw)
    return BrandSettings(**base)


def _spec_texts(node):
    return [spec.children[-1].text for spec in node.find_all("spec")]


def test_just_listed_end_to_end():
    node = render_template(TemplateId.JUST_LISTED, _property(), _brand())
    assert node.role == "card"
    assert node.attrs["data-template"] == "just-listed"
    assert node.find("badge").text == "Just Listed"
    assert node.find("badge").style["background-color"] == "#0ea5e9"
    assert node.find("price").text == "$2,450,000"
    assert node.find("address").text == "123 Maple Avenue, Beverly Hills"
    assert _spec_texts(node) == ["4", "2", "3200"]
    assert node.find("logo").attrs["src"] == "https://example.com/logo.png"
    badge = node.find("agent-badge")
    assert badge is not None
    assert badge.find("agent-name").text == "John Doe"
    assert badge.find("agent-phone") is not None
    assert badge.find("agent-photo-placeholder") is not None
    photo = node.find("photo")
    assert photo.attrs["src"] == "https://example.com/house.jpg"
    assert photo.style["opacity"] == "0.9"


def test_string_template_id_is_accepted():
    a = render_template("just-listed", _property(), _brand())
    b = render_template(TemplateId.JUST_LISTED, _property(), _brand())
    assert a.to_html() == b.to_html()


def test_rendering_is_pure_and_repeatable():
    data = _property()
    brand = _brand()
    config = TemplateConfig(badge_text="Coming Soon", overlay_opacity=0.5)
    before = data.model_dump()
    first = render_template(TemplateId.STORY_PORTRAIT, data, brand, config).to_html()
    second = render_template(TemplateId.STORY_PORTRAIT, data, brand, config).to_html()
    assert first == second
    assert data.model_dump() == before


def test_unknown_template_renders_placeholder():
    node = render_template("not-a-template", _property(), _brand())
    assert node.role == "placeholder"
    assert node.text == UNKNOWN_TEMPLATE_TEXT
    assert node.find("photo") is None
    assert UNKNOWN_TEMPLATE_TEXT in node.to_html()


def test_show_agent_info_false_hides_agent_fragments_everywhere():
    config = TemplateConfig(layout=LayoutConfig(show_agent_info=False))
    for tid in TemplateId:
        node = render_template(tid, _property(), _brand(agent_photo_url="https://example.com/a.jpg"), config)
        agent_roles = {r for r in node.roles() if r.startswith("agent-")}
        assert agent_roles == set(), tid


def test_missing_logo_leaves_no_logo_slot():
    for tid in TemplateId:
        node = render_template(tid, _property(), _brand(logo_url=None))
        assert node.find("logo") is None, tid


def test_show_logo_false_hides_logo():
    config = TemplateConfig(layout=LayoutConfig(show_logo=False))
    node = render_template(TemplateId.JUST_LISTED, _property(), _brand(), config)
    assert node.find("logo") is None


def test_no_brand_hides_agent_badge_and_logo():
    node = render_template(TemplateId.JUST_LISTED, _property(), None)
    assert node.find("agent-badge") is None
    assert node.find("logo") is None
    assert node.find("badge").style["background-color"] == "#0284c7"


def test_badge_text_override():
    node = render_template(TemplateId.JUST_LISTED, _property(), _brand(), TemplateConfig(badge_text="Coming Soon"))
    assert node.find("badge").text == "Coming Soon"


def test_show_badge_false_hides_just_listed_badge():
    node = render_template(TemplateId.JUST_LISTED, _property(), _brand(), TemplateConfig(layout=LayoutConfig(show_badge=False)))
    assert node.find("badge") is None


def test_sold_custom_template_with_primary_override():
    template = CustomTemplate(
        id="custom-abc",
        name="Red Sold",
        base_template_id=TemplateId.SOLD,
        config=TemplateConfig(primary_color="#ff0000"),
    )
    node = render_custom_template(template, _property(), _brand())
    badge = node.find("badge")
    assert badge.text == "SOLD"
    assert badge.style["color"] == "#ff0000"
    assert SOLD_FILTER in node.find("photo").style["filter"]
    assert node.find("agent-info") is not None


def test_card_document_wraps_node():
    node = render_template(TemplateId.MODERN_MINIMAL, _property(address="<b>1 Main</b>"), _brand(font_family="Lato"))
    doc = build_card_html(node, font_family="Lato")
    assert doc.startswith("<!doctype html>")
    assert "family=Lato" in doc
    assert "&lt;b&gt;1 Main&lt;/b&gt;" in doc
    assert "<b>1 Main</b>" not in doc
