"""
In-memory stores for listings, social posts and saved templates.

State lives for the life of the process: seeded at startup, discarded at exit.
Stores are plain objects passed to whoever needs them (see AppState); nothing
here touches disk or the network.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Iterable

from brands import get_brand as get_seed_brand
from models import (
    CustomTemplate,
    CustomTemplateCreate,
    Listing,
    ListingStatus,
    PostCreate,
    PostStats,
    PostStatus,
    PropertyDetails,
    SocialPost,
    TemplateId,
)
from models_branding import BrandSettings

logger = logging.getLogger(__name__)

RECENT_POSTS_LIMIT = 5


class StoreError(Exception):
    """Base for store failures that callers are expected to report back to the user."""


class ValidationFailed(StoreError):
    def __init__(self, fields: Iterable[str], message: str = ""):
        self.fields = list(fields)
        super().__init__(message or f"Required fields missing: {', '.join(self.fields)}")


class ConfirmationRequired(StoreError):
    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"Deleting {kind} {item_id} requires confirmation")


class NotFound(StoreError):
    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} {item_id} not found")


def new_id() -> str:
    return uuid.uuid4().hex[:9]


def _require_confirm(kind: str, item_id: str, confirm: bool) -> None:
    if not confirm:
        raise ConfirmationRequired(kind, item_id)


class ListingStore:
    def __init__(self, listings: Iterable[Listing] = ()):
        self._items: list[Listing] = [l.model_copy(deep=True) for l in listings]

    def list(self, search: str | None = None) -> list[Listing]:
        """All listings, optionally filtered by a case-insensitive address/status match."""
        term = (search or "").strip().lower()
        items = self._items
        if term:
            items = [l for l in items if term in l.address.lower() or term in l.status.value.lower()]
        return [l.model_copy(deep=True) for l in items]

    def get(self, listing_id: str) -> Listing:
        for listing in self._items:
            if listing.id == listing_id:
                return listing.model_copy(deep=True)
        raise NotFound("listing", listing_id)

    def _index(self, listing_id: str) -> int:
        for i, listing in enumerate(self._items):
            if listing.id == listing_id:
                return i
        return -1

    @staticmethod
    def validate(listing: PropertyDetails) -> None:
        missing = [name for name in ("address", "price") if not str(getattr(listing, name) or "").strip()]
        if missing:
            raise ValidationFailed(missing, "Address and Price are required.")

    def add(self, listing: Listing) -> Listing:
        self.validate(listing)
        item = listing.model_copy(deep=True)
        if not item.id:
            item.id = new_id()
        if self._index(item.id) >= 0:
            raise ValidationFailed(["id"], f"Listing {item.id} already exists")
        self._items.append(item)
        logger.info("[listings] added id=%s", item.id)
        return item.model_copy(deep=True)

    def update(self, listing: Listing) -> Listing:
        self.validate(listing)
        idx = self._index(listing.id)
        if idx < 0:
            raise NotFound("listing", listing.id)
        self._items[idx] = listing.model_copy(deep=True)
        logger.info("[listings] updated id=%s", listing.id)
        return listing.model_copy(deep=True)

    def save(self, listing: Listing) -> Listing:
        """Update when the id is known, add otherwise."""
        if listing.id and self._index(listing.id) >= 0:
            return self.update(listing)
        return self.add(listing)

    def delete(self, listing_id: str, confirm: bool = False) -> None:
        idx = self._index(listing_id)
        if idx < 0:
            raise NotFound("listing", listing_id)
        _require_confirm("listing", listing_id, confirm)
        del self._items[idx]
        logger.info("[listings] deleted id=%s", listing_id)


def build_post(payload: PostCreate) -> SocialPost:
    """Post from the editor form: at least one platform; scheduled if dated, else published."""
    if not payload.platforms:
        raise ValidationFailed(["platforms"], "Please select at least one platform.")
    return SocialPost(
        id=payload.id or new_id(),
        platforms=list(dict.fromkeys(payload.platforms)),
        content=payload.content,
        hashtags=list(payload.hashtags),
        scheduled_date=payload.scheduled_date,
        status=PostStatus.SCHEDULED if payload.scheduled_date else PostStatus.PUBLISHED,
        template_id=payload.template_id,
        property_details=payload.property_details,
    )


class PostStore:
    def __init__(self, posts: Iterable[SocialPost] = ()):
        self._items: list[SocialPost] = [p.model_copy(deep=True) for p in posts]

    def list(self) -> list[SocialPost]:
        return [p.model_copy(deep=True) for p in self._items]

    def get(self, post_id: str) -> SocialPost:
        for post in self._items:
            if post.id == post_id:
                return post.model_copy(deep=True)
        raise NotFound("post", post_id)

    def save(self, post: SocialPost) -> SocialPost:
        """Replace in place when the id exists, otherwise prepend."""
        item = post.model_copy(deep=True)
        for i, existing in enumerate(self._items):
            if existing.id == item.id:
                self._items[i] = item
                logger.info("[posts] updated id=%s", item.id)
                break
        else:
            self._items.insert(0, item)
            logger.info("[posts] created id=%s status=%s", item.id, item.status.value)
        return item.model_copy(deep=True)

    def delete(self, post_id: str, confirm: bool = False) -> None:
        for i, existing in enumerate(self._items):
            if existing.id == post_id:
                _require_confirm("post", post_id, confirm)
                del self._items[i]
                logger.info("[posts] deleted id=%s", post_id)
                return
        raise NotFound("post", post_id)

    def stats(self) -> PostStats:
        return PostStats(
            total=len(self._items),
            scheduled=sum(1 for p in self._items if p.status == PostStatus.SCHEDULED),
            published=sum(1 for p in self._items if p.status == PostStatus.PUBLISHED),
        )

    def recent(self, limit: int = RECENT_POSTS_LIMIT) -> list[SocialPost]:
        return self.list()[:limit]


class TemplateStore:
    """Saved templates. No update: edit means delete and recreate."""

    def __init__(self, templates: Iterable[CustomTemplate] = ()):
        self._items: list[CustomTemplate] = [t.model_copy(deep=True) for t in templates]

    def list(self) -> list[CustomTemplate]:
        return [t.model_copy(deep=True) for t in self._items]

    def get(self, template_id: str) -> CustomTemplate:
        for template in self._items:
            if template.id == template_id:
                return template.model_copy(deep=True)
        raise NotFound("template", template_id)

    def create(self, payload: CustomTemplateCreate, brand: BrandSettings | None = None) -> CustomTemplate:
        """Validate and store. Colors equal to the brand kit are dropped so later brand edits flow through."""
        missing = []
        name = (payload.name or "").strip()
        if not name:
            missing.append("name")
        try:
            base = TemplateId(payload.base_template_id)
        except ValueError:
            base = None
            missing.append("base_template_id")
        if missing:
            raise ValidationFailed(missing, "Please enter a template name" if "name" in missing else "Unknown base template")
        config = payload.config.model_copy(deep=True)
        if config.badge_text is not None and not config.badge_text.strip():
            config.badge_text = None
        if brand is not None:
            if config.primary_color == brand.primary_color:
                config.primary_color = None
            if config.secondary_color == brand.secondary_color:
                config.secondary_color = None
        template = CustomTemplate(id=f"custom-{new_id()}", name=name, base_template_id=base, config=config)
        self._items.append(template)
        logger.info("[templates] created id=%s base=%s", template.id, base.value)
        return template.model_copy(deep=True)

    def delete(self, template_id: str, confirm: bool = False) -> None:
        for i, existing in enumerate(self._items):
            if existing.id == template_id:
                _require_confirm("template", template_id, confirm)
                del self._items[i]
                logger.info("[templates] deleted id=%s", template_id)
                return
        raise NotFound("template", template_id)


@dataclass
class AppState:
    listings: ListingStore
    posts: PostStore
    templates: TemplateStore
    brand: BrandSettings = field(default_factory=BrandSettings)

    def get_brand(self) -> BrandSettings:
        return self.brand.model_copy(deep=True)

    def save_brand(self, settings: BrandSettings) -> BrandSettings:
        self.brand = settings.model_copy(deep=True)
        logger.info("[brand] updated agent=%s", self.brand.agent_name)
        return self.get_brand()


def seed_listings(now: datetime) -> list[Listing]:
    return [
        Listing(
            id="l1",
            address="123 Maple Avenue, Beverly Hills",
            price="$2,450,000",
            beds=4,
            baths=3.5,
            sqft=3200,
            description="Stunning modern farmhouse with pool and guest house.",
            features=["Pool", "Smart Home", "Wine Cellar"],
            image_url="https://picsum.photos/800/1000",
            status=ListingStatus.ACTIVE,
            date_added=now,
        ),
        Listing(
            id="l2",
            address="500 Ocean Dr, Miami",
            price="$1,100,000",
            beds=2,
            baths=2,
            sqft=1500,
            description="Beachfront condo with amazing sunrise views.",
            features=["Beach Access", "Balcony"],
            image_url="https://picsum.photos/800/600",
            status=ListingStatus.PENDING,
            date_added=now,
        ),
    ]


def seed_posts(now: datetime) -> list[SocialPost]:
    return [
        SocialPost(
            id="1",
            platforms=["instagram", "facebook"],
            content="Check out this amazing new listing in downtown! #JustListed",
            hashtags=["#realestate", "#cityliving"],
            scheduled_date=now + timedelta(days=1),
            status=PostStatus.SCHEDULED,
            template_id=TemplateId.JUST_LISTED.value,
            property_details=PropertyDetails(
                address="8800 Sunset Blvd, LA",
                price="$1,200,000",
                beds=2,
                baths=2,
                sqft=1400,
                description="Amazing views.",
                features=["View", "Gym"],
                image_url="https://picsum.photos/seed/1/400/500",
            ),
        ),
    ]


def create_app_state(seed: bool = True, now: datetime | None = None) -> AppState:
    now = now or datetime.now(timezone.utc)
    brand = get_seed_brand("default") or BrandSettings()
    if not seed:
        return AppState(ListingStore(), PostStore(), TemplateStore(), brand)
    return AppState(
        listings=ListingStore(seed_listings(now)),
        posts=PostStore(seed_posts(now)),
        templates=TemplateStore(),
        brand=brand,
    )
