from datetime import datetime, timedelta, timezone

import pytest

from content_store import (
    ConfirmationRequired,
    ListingStore,
    NotFound,
    PostStore,
    TemplateStore,
    ValidationFailed,
    build_post,
    create_app_state,
)
from models import (
    CustomTemplateCreate,
    Listing,
    PostCreate,
    PostStatus,
    PropertyDetails,
    TemplateConfig,
    TemplateId,
)
from models_branding import BrandSettings

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
DETAILS = PropertyDetails(address="1 Main St", price="$500,000", beds=3, baths=2, sqft=1800)


def test_seeded_state():
    state = create_app_state(now=NOW)
    assert [l.id for l in state.listings.list()] == ["l1", "l2"]
    assert state.posts.get("1").status == PostStatus.SCHEDULED
    assert state.templates.list() == []
    assert state.get_brand().agent_name == "John Doe"
    assert create_app_state(seed=False).listings.list() == []


def test_listing_add_assigns_id_and_validates():
    store = ListingStore()
    saved = store.add(Listing(address="9 Elm St", price="$1"))
    assert saved.id
    assert store.get(saved.id).address == "9 Elm St"
    with pytest.raises(ValidationFailed) as exc:
        store.add(Listing(address="  ", price=""))
    assert exc.value.fields == ["address", "price"]
    assert str(exc.value) == "Address and Price are required."


def test_listing_duplicate_id_rejected():
    store = ListingStore([Listing(id="a", address="x", price="$1")])
    with pytest.raises(ValidationFailed):
        store.add(Listing(id="a", address="y", price="$2"))


def test_listing_search_matches_address_and_status():
    state = create_app_state(now=NOW)
    assert [l.id for l in state.listings.list("ocean")] == ["l2"]
    assert [l.id for l in state.listings.list("PENDING")] == ["l2"]
    assert len(state.listings.list("  ")) == 2


def test_listing_update_and_save():
    state = create_app_state(now=NOW)
    listing = state.listings.get("l1")
    listing.price = "$2,300,000"
    state.listings.update(listing)
    assert state.listings.get("l1").price == "$2,300,000"
    with pytest.raises(NotFound):
        state.listings.update(Listing(id="missing", address="x", price="$1"))
    created = state.listings.save(Listing(address="2 Oak", price="$9"))
    assert created.id not in ("l1", "l2")
    assert len(state.listings.list()) == 3


def test_listing_returned_copies_are_detached():
    state = create_app_state(now=NOW)
    listing = state.listings.get("l1")
    listing.address = "changed"
    assert state.listings.get("l1").address != "changed"


def test_listing_delete_requires_confirmation():
    state = create_app_state(now=NOW)
    with pytest.raises(ConfirmationRequired):
        state.listings.delete("l1")
    assert len(state.listings.list()) == 2
    state.listings.delete("l1", confirm=True)
    assert [l.id for l in state.listings.list()] == ["l2"]
    with pytest.raises(NotFound):
        state.listings.delete("l1", confirm=True)


def test_build_post_scheduled_vs_published():
    scheduled = build_post(PostCreate(platforms=["instagram"], scheduled_date=NOW + timedelta(days=2), property_details=DETAILS))
    assert scheduled.status == PostStatus.SCHEDULED
    published = build_post(PostCreate(platforms=["facebook", "facebook"], property_details=DETAILS))
    assert published.status == PostStatus.PUBLISHED
    assert published.platforms == ["facebook"]
    with pytest.raises(ValidationFailed) as exc:
        build_post(PostCreate(platforms=[], property_details=DETAILS))
    assert exc.value.fields == ["platforms"]


def test_post_save_prepends_new_and_replaces_existing():
    store = PostStore()
    first = store.save(build_post(PostCreate(id="a", platforms=["instagram"], property_details=DETAILS)))
    store.save(build_post(PostCreate(id="b", platforms=["linkedin"], property_details=DETAILS)))
    assert [p.id for p in store.list()] == ["b", "a"]
    store.save(first.model_copy(update={"content": "edited"}))
    assert [p.id for p in store.list()] == ["b", "a"]
    assert store.get("a").content == "edited"


def test_post_stats_and_recent():
    store = PostStore()
    for i in range(7):
        store.save(build_post(PostCreate(
            id=str(i),
            platforms=["instagram"],
            scheduled_date=NOW if i % 2 else None,
            property_details=DETAILS,
        )))
    stats = store.stats()
    assert (stats.total, stats.scheduled, stats.published) == (7, 3, 4)
    assert [p.id for p in store.recent()] == ["6", "5", "4", "3", "2"]


def test_post_delete_requires_confirmation():
    state = create_app_state(now=NOW)
    with pytest.raises(ConfirmationRequired):
        state.posts.delete("1")
    state.posts.delete("1", confirm=True)
    assert state.posts.list() == []


def test_template_create_validates_name_and_base():
    store = TemplateStore()
    with pytest.raises(ValidationFailed) as exc:
        store.create(CustomTemplateCreate(name="  ", base_template_id="sold"))
    assert exc.value.fields == ["name"]
    with pytest.raises(ValidationFailed) as exc:
        store.create(CustomTemplateCreate(name="Mine", base_template_id="nope"))
    assert exc.value.fields == ["base_template_id"]
    assert store.list() == []


def test_template_create_drops_brand_colors_and_blank_badge():
    brand = BrandSettings(primary_color="#111111", secondary_color="#222222")
    store = TemplateStore()
    template = store.create(
        CustomTemplateCreate(
            name=" Red Sold ",
            base_template_id="sold",
            config=TemplateConfig(primary_color="#111111", secondary_color="#ff0000", badge_text="  "),
        ),
        brand=brand,
    )
    assert template.id.startswith("custom-")
    assert template.name == "Red Sold"
    assert template.base_template_id == TemplateId.SOLD
    assert template.config.primary_color is None
    assert template.config.secondary_color == "#ff0000"
    assert template.config.badge_text is None
    assert store.get(template.id) == template


def test_template_delete():
    store = TemplateStore()
    template = store.create(CustomTemplateCreate(name="A", base_template_id="just-listed"))
    with pytest.raises(ConfirmationRequired):
        store.delete(template.id)
    store.delete(template.id, confirm=True)
    with pytest.raises(NotFound):
        store.get(template.id)


def test_brand_save_round_trip():
    state = create_app_state(now=NOW)
    state.save_brand(BrandSettings(agent_name="New Agent", primary_color="#000000"))
    assert state.get_brand().agent_name == "New Agent"
