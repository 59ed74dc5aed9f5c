"""
Renderer entry point: template id + listing + brand + overrides -> Node tree.
"""
from __future__ import annotations

import logging
from typing import Any

from models import CustomTemplate, PropertyDetails, TemplateConfig, TemplateId
from models_branding import BrandSettings

from .components import CARD_HEIGHT_PX, CARD_WIDTH_PX
from .custom_builder import custom_builder
from .layouts import LAYOUTS, LayoutFn
from .nodes import Node, el
from .style_resolver import FALLBACK_FONT_FAMILY, build_context

logger = logging.getLogger(__name__)

UNKNOWN_TEMPLATE_TEXT = "Unknown Template"

RENDERERS: dict[TemplateId, LayoutFn] = {TemplateId.CUSTOM_BUILDER: custom_builder, **LAYOUTS}


def parse_template_id(value: Any) -> TemplateId | None:
    if isinstance(value, TemplateId):
        return value
    try:
        return TemplateId(str(value or "").strip())
    except ValueError:
        return None


def unknown_template(template_id: Any, brand: BrandSettings | None = None) -> Node:
    font = brand.font_family if brand and brand.font_family else FALLBACK_FONT_FAMILY
    return el(
        "div",
        role="placeholder",
        cls="card",
        style={
            "width": f"{CARD_WIDTH_PX}px",
            "height": f"{CARD_HEIGHT_PX}px",
            "font-family": f"'{font}', sans-serif",
            "background-color": "#e5e7eb",
            "display": "flex",
            "align-items": "center",
            "justify-content": "center",
        },
        text=UNKNOWN_TEMPLATE_TEXT,
        data_template=str(template_id or ""),
    )


def render_template(
    template_id: TemplateId | str,
    property_data: PropertyDetails,
    brand: BrandSettings | None = None,
    config: TemplateConfig | None = None,
) -> Node:
    """
    Render one card. Pure: no I/O, no shared state. An id outside the
    template set yields the "Unknown Template" placeholder instead of raising.
    """
    tid = parse_template_id(template_id)
    if tid is None:
        logger.info("[render] unknown template id=%r", template_id)
        return unknown_template(template_id, brand)
    ctx = build_context(property_data, brand, config)
    return RENDERERS[tid](ctx)


def render_custom_template(
    template: CustomTemplate,
    property_data: PropertyDetails,
    brand: BrandSettings | None = None,
) -> Node:
    """Base layout of a saved template, drawn with its stored overrides."""
    return render_template(template.base_template_id, property_data, brand, template.config)
