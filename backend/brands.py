"""Built-in brand kits used to seed a fresh session."""
from __future__ import annotations

from models_branding import BrandSettings

BRANDS: dict[str, BrandSettings] = {
    "default": BrandSettings(
        primary_color="#0ea5e9",
        secondary_color="#0c4a6e",
        font_family="Inter",
        logo_url=None,
        agent_name="John Doe",
        agent_photo_url=None,
        agency_name="Realty One Group",
        website="www.johndoerealty.com",
        phone="(555) 123-4567",
        email="john@realty.com",
    ),
    "luxury": BrandSettings(
        primary_color="#b08d57",
        secondary_color="#1a1a1a",
        font_family="Playfair Display",
        logo_url=None,
        agent_name="Jane Smith",
        agent_photo_url=None,
        agency_name="Coastal Luxury Estates",
        website="www.coastalluxury.com",
        phone="(555) 987-6543",
        email="jane@coastalluxury.com",
    ),
}


def get_brand(brand_id: str) -> BrandSettings | None:
    brand = BRANDS.get(brand_id)
    return brand.model_copy(deep=True) if brand is not None else None


def list_brands() -> list[tuple[str, BrandSettings]]:
    """(brand_id, kit) pairs in registry order."""
    return [(brand_id, b.model_copy(deep=True)) for brand_id, b in BRANDS.items()]
