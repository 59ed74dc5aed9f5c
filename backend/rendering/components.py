"""
Shared presentational fragments: agent badges, brand logo, listing text blocks.

Each function returns a Node, or None when the fragment is suppressed. A
suppressed fragment never leaves an empty box or a stand-in icon behind.
"""
from __future__ import annotations

from models import ContentPosition, TextAlignment

from .format_utils import format_count
from .nodes import Node, el, img
from .style_resolver import RenderContext

CARD_WIDTH_PX = 400
CARD_HEIGHT_PX = 500  # 4:5 portrait

TEXT_DARK = "#111827"
TEXT_MUTED = "#6b7280"
TEXT_LIGHT_MUTED = "#d1d5db"

ICONS = {
    "bed": "\U0001F6CF",
    "bath": "\U0001F6C1",
    "area": "⬚",
    "pin": "\U0001F4CD",
    "phone": "☎",
    "mail": "✉",
    "home": "⌂",
    "user": "\U0001F464",
    "star": "★",
    "key": "\U0001F511",
    "tag": "\U0001F3F7",
    "arrow-right": "→",
}


def Icon(name: str, *, size: int = 16, color: str = "") -> Node:
    style = {"font-size": f"{size}px", "line-height": "1"}
    if color:
        style["color"] = color
    return el("span", role="icon", cls="icon", style=style, text=ICONS.get(name, ""), data_icon=name, aria_hidden="true")


def align_style(alignment: TextAlignment) -> dict[str, str]:
    if alignment == "center":
        return {"text-align": "center", "align-items": "center"}
    if alignment == "right":
        return {"text-align": "right", "align-items": "flex-end"}
    return {"text-align": "left", "align-items": "flex-start"}


def position_style(position: ContentPosition) -> dict[str, str]:
    """Vertical pinning for layouts that float text over the photo; below-image acts as bottom."""
    if position == "top":
        return {"justify-content": "flex-start", "padding-top": "80px"}
    if position == "center":
        return {"justify-content": "center"}
    return {"justify-content": "flex-end", "padding-bottom": "32px"}


def card(ctx: RenderContext, *children: Node | None, template_id: str, cls: str = "", style: dict[str, str] | None = None) -> Node:
    base = {
        "position": "relative",
        "width": f"{CARD_WIDTH_PX}px",
        "height": f"{CARD_HEIGHT_PX}px",
        "overflow": "hidden",
        "font-family": f"'{ctx.style.font_family}', sans-serif",
    }
    base.update(style or {})
    return el("div", *children, role="card", cls=f"card {cls}".strip(), style=base, data_template=template_id)


def Photo(
    ctx: RenderContext,
    *,
    opacity: float | None = 1,
    extra_filter: str = "",
    style: dict[str, str] | None = None,
) -> Node:
    """Listing photo. opacity=None keeps the resolved overlay opacity."""
    css = {"width": "100%", "height": "100%", "transform-origin": "center", "display": "block"}
    css.update(style or {})
    css.update(ctx.style.image_css(opacity=opacity, extra_filter=extra_filter))
    return img(ctx.photo_url, role="photo", style=css, alt="Property")


def Scrim(gradient: str, style: dict[str, str] | None = None) -> Node:
    css = {"position": "absolute", "inset": "0", "pointer-events": "none", "background": gradient}
    css.update(style or {})
    return el("div", role="scrim", style=css)


def Badge(text: str, style: dict[str, str] | None = None, cls: str = "caps bold") -> Node:
    return el("div", role="badge", cls=cls, style=style, text=text)


def Price(ctx: RenderContext, style: dict[str, str] | None = None, tag: str = "h2", cls: str = "") -> Node:
    return el(tag, role="price", cls=cls, style={"margin": "0", **(style or {})}, text=ctx.data.price)


def Address(ctx: RenderContext, style: dict[str, str] | None = None, text: str | None = None, cls: str = "") -> Node:
    return el("p", role="address", cls=cls, style={"margin": "0", **(style or {})}, text=ctx.data.address if text is None else text)


def spec_values(ctx: RenderContext) -> tuple[str, str, str]:
    d = ctx.data
    return format_count(d.beds), format_count(d.baths), format_count(d.sqft)


def Logo(ctx: RenderContext, *, dark: bool = False, height: str = "40px") -> Node | None:
    brand = ctx.brand
    if not brand or not brand.logo_url or not ctx.layout.show_logo:
        return None
    style = {"height": height, "width": "auto", "object-fit": "contain", "filter": "drop-shadow(0 4px 3px rgba(0,0,0,0.07))"}
    if dark:
        style["filter"] = "brightness(0)"
    return img(brand.logo_url, role="logo", style=style, alt="Logo")


def AgentBadge(ctx: RenderContext, *, light: bool = False, style: dict[str, str] | None = None) -> Node | None:
    """Full agent card: photo or placeholder, name, agency, phone, email."""
    brand = ctx.brand
    if not brand or not ctx.layout.show_agent_info:
        return None
    text_main = "#ffffff" if light else TEXT_DARK
    text_sub = TEXT_LIGHT_MUTED if light else TEXT_MUTED
    box = {
        "display": "flex",
        "align-items": "center",
        "gap": "12px",
        "padding": "10px",
        "border-radius": "8px",
        "max-width": "240px",
        "border": "1px solid " + ("rgba(255,255,255,0.2)" if light else "#f3f4f6"),
        "background-color": "rgba(0,0,0,0.5)" if light else "rgba(255,255,255,0.95)",
    }
    box.update(style or {})

    if brand.agent_photo_url:
        photo = img(
            brand.agent_photo_url,
            role="agent-photo",
            style={"width": "40px", "height": "40px", "border-radius": "9999px", "object-fit": "cover", "border": "1px solid #e5e7eb"},
            alt="Agent",
        )
    else:
        photo = el(
            "div",
            Icon("user", size=20, color=TEXT_MUTED),
            role="agent-photo-placeholder",
            style={
                "width": "40px",
                "height": "40px",
                "border-radius": "9999px",
                "background-color": "#f3f4f6",
                "display": "flex",
                "align-items": "center",
                "justify-content": "center",
            },
        )

    contact = el(
        "div",
        el("span", Icon("phone", size=8), el("span", text=brand.phone), role="agent-phone") if brand.phone else None,
        el("span", Icon("mail", size=8), el("span", text=brand.email), role="agent-email") if brand.email else None,
        cls="stack",
        style={"font-size": "8px", "line-height": "1.25", "font-weight": "500", "color": text_main, "opacity": "0.9"},
    )
    return el(
        "div",
        photo,
        el(
            "div",
            el("p", role="agent-name", cls="caps bold", style={"font-size": "10px", "margin": "0", "color": text_main}, text=brand.agent_name),
            el("p", role="agent-agency", style={"font-size": "8px", "margin": "0 0 4px 0", "color": text_sub}, text=brand.agency_name),
            contact,
            style={"flex": "1", "min-width": "0", "text-align": "left"},
        ),
        role="agent-badge",
        cls="glass shadow",
        style=box,
    )


def AgentBadgeSimple(ctx: RenderContext, *, light: bool = False, style: dict[str, str] | None = None) -> Node | None:
    """Compact agent line: photo (if any), name and phone."""
    brand = ctx.brand
    if not brand or not ctx.layout.show_agent_info:
        return None
    text_main = "#ffffff" if light else TEXT_DARK
    text_sub = TEXT_LIGHT_MUTED if light else TEXT_MUTED
    photo = None
    if brand.agent_photo_url:
        photo = img(
            brand.agent_photo_url,
            role="agent-photo",
            style={"width": "32px", "height": "32px", "border-radius": "9999px", "border": "2px solid #ffffff", "object-fit": "cover"},
            alt="Agent",
        )
    box = {"display": "flex", "align-items": "center", "gap": "8px"}
    box.update(style or {})
    return el(
        "div",
        photo,
        el(
            "div",
            el("span", role="agent-name", cls="bold", style={"font-size": "10px", "line-height": "1", "color": text_main}, text=brand.agent_name),
            el("span", role="agent-phone", style={"font-size": "8px", "color": text_sub, "opacity": "0.9"}, text=brand.phone),
            cls="stack",
            style={"justify-content": "center"},
        ),
        role="agent-badge-simple",
        style=box,
    )


def positioned(child: Node | None, style: dict[str, str]) -> Node | None:
    """Absolutely placed wrapper that disappears with its child."""
    if child is None:
        return None
    return el("div", child, style={"position": "absolute", "z-index": "20", **style})
