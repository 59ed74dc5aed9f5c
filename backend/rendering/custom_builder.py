"""
Parametric "blank canvas" layout.

Every structural decision comes from the resolved LayoutConfig:

* header strip when header_style is not transparent or show_logo is set;
* body: split (60% photo over a 40% white panel) for ``below-image``,
  otherwise a full-bleed photo with a scrim and a floating text panel;
* footer when show_agent_info is set: a floating compact badge for
  ``minimal``, otherwise a full-width contact strip.
"""
from __future__ import annotations

from models import FooterStyle, HeaderStyle, TemplateId

from .components import (
    AgentBadgeSimple,
    Icon,
    Logo,
    Photo,
    Scrim,
    TEXT_DARK,
    align_style,
    card,
    position_style,
    spec_values,
)
from .nodes import Node, el, img
from .style_resolver import RenderContext, ResolvedStyle

DARK_STRIP_STYLES = frozenset({"solid-primary", "solid-secondary"})


def strip_background(style_name: HeaderStyle | FooterStyle, style: ResolvedStyle) -> str:
    if style_name == "solid-white":
        return "#ffffff"
    if style_name == "solid-primary":
        return style.primary_color
    if style_name == "solid-secondary":
        return style.secondary_color
    return "transparent"


def is_dark_strip(style_name: str) -> bool:
    return style_name in DARK_STRIP_STYLES


def _header(ctx: RenderContext) -> Node | None:
    layout = ctx.layout
    if layout.header_style == "transparent" and not layout.show_logo:
        return None
    dark = is_dark_strip(layout.header_style)
    badge = None
    if layout.show_badge:
        badge = el(
            "div",
            role="badge",
            cls="caps bold",
            style={
                "padding": "4px 12px",
                "font-size": "12px",
                "letter-spacing": "0.05em",
                "background-color": "#ffffff" if dark else TEXT_DARK,
                "color": TEXT_DARK if dark else "#ffffff",
            },
            text=ctx.style.badge_text("Just Listed"),
        )
    return el(
        "div",
        # Logo goes black on light solid headers
        Logo(ctx, dark=not dark and layout.header_style != "transparent"),
        badge,
        role="header",
        style={
            "position": "absolute",
            "top": "0",
            "left": "0",
            "width": "100%",
            "z-index": "30",
            "padding": "16px",
            "box-sizing": "border-box",
            "display": "flex",
            "align-items": "center",
            "justify-content": "space-between",
            "background-color": strip_background(layout.header_style, ctx.style),
        },
        data_header_style=layout.header_style,
    )


def _listing_text(ctx: RenderContext, split: bool) -> list[Node]:
    color = TEXT_DARK if split else "#ffffff"
    beds, baths, sqft = spec_values(ctx)

    def spec(icon: str, text: str) -> Node:
        return el("span", Icon(icon, size=16), el("span", text=text), role="spec",
                  style={"display": "flex", "align-items": "center", "gap": "4px"})

    return [
        el("h2", role="price", cls="bold", style={"margin": "0 0 8px", "font-size": "36px", "color": color}, text=ctx.data.price),
        el("p", role="address", style={"margin": "0 0 24px", "font-size": "18px", "opacity": "0.9", "color": color}, text=ctx.data.address),
        el(
            "div",
            spec("bed", f"{beds} Beds"),
            spec("bath", f"{baths} Baths"),
            spec("area", f"{sqft} Sqft"),
            role="specs",
            style={
                "display": "flex",
                "gap": "16px",
                "font-size": "14px",
                "font-weight": "500",
                "color": color,
                "opacity": "0.8",
                "border-top": "1px solid currentColor",
                "padding-top": "16px",
            },
        ),
    ]


def _body(ctx: RenderContext) -> Node:
    layout = ctx.layout
    split = layout.content_position == "below-image"

    if split:
        image = el("div", Photo(ctx), role="image-region", style={"position": "relative", "height": "60%", "overflow": "hidden"})
        panel_style = {"height": "40%", "justify-content": "center", "background-color": "#ffffff"}
    else:
        image = el(
            "div",
            Photo(ctx),
            Scrim("linear-gradient(to bottom, rgba(0,0,0,0.1), transparent, rgba(0,0,0,0.8))"),
            role="image-region",
            style={"position": "absolute", "inset": "0", "z-index": "0", "overflow": "hidden"},
        )
        panel_style = {"height": "100%", "background-color": "transparent", **position_style(layout.content_position)}

    panel = el(
        "div",
        *_listing_text(ctx, split),
        role="text-panel",
        style={
            "position": "relative",
            "z-index": "10",
            "padding": "24px",
            "box-sizing": "border-box",
            "display": "flex",
            "flex-direction": "column",
            **align_style(layout.text_alignment),
            **panel_style,
        },
        data_position=layout.content_position,
        data_align=layout.text_alignment,
    )
    return el(
        "div",
        image,
        panel,
        role="body",
        style={"flex": "1", "display": "flex", "flex-direction": "column", "position": "relative", "height": "100%"},
        data_mode="split" if split else "overlay",
    )


def _footer(ctx: RenderContext) -> Node | None:
    layout = ctx.layout
    if not layout.show_agent_info:
        return None

    if layout.footer_style == "minimal":
        split = layout.content_position == "below-image"
        badge_style = {"background-color": "rgba(255,255,255,0.1)", "border": "1px solid #e5e7eb"} if split else None
        badge = AgentBadgeSimple(ctx, light=not split, style=badge_style)
        if badge is None:
            return None
        return el(
            "div",
            badge,
            role="footer",
            style={"position": "absolute", "bottom": "16px", "right": "16px", "z-index": "30", "background-color": "transparent"},
            data_footer_style="minimal",
        )

    brand = ctx.brand
    dark = is_dark_strip(layout.footer_style)
    photo = None
    if brand and brand.agent_photo_url:
        photo = img(
            brand.agent_photo_url,
            role="agent-photo",
            style={"width": "40px", "height": "40px", "border-radius": "9999px", "object-fit": "cover",
                   "border": "2px solid rgba(255,255,255,0.2)"},
        )
    identity = el(
        "div",
        photo,
        el(
            "div",
            el("p", role="agent-name", cls="bold", style={"margin": "0", "font-size": "14px", "line-height": "1"},
               text=brand.agent_name if brand else ""),
            el("p", role="agent-agency", style={"margin": "0", "font-size": "12px", "opacity": "0.8"},
               text=brand.agency_name if brand else ""),
            style={"color": "#ffffff" if dark else TEXT_DARK},
        ),
        style={"display": "flex", "align-items": "center", "gap": "12px"},
    )
    contact = el(
        "div",
        el("p", role="agent-phone", style={"margin": "0"}, text=brand.phone if brand else ""),
        el("p", role="agent-website", style={"margin": "0"}, text=brand.website if brand else ""),
        style={"text-align": "right", "font-size": "12px", "color": "rgba(255,255,255,0.8)" if dark else "#4b5563"},
    )
    return el(
        "div",
        el("div", identity, contact, role="agent-info",
           style={"display": "flex", "align-items": "center", "justify-content": "space-between"}),
        role="footer",
        style={
            "position": "relative",
            "z-index": "30",
            "width": "100%",
            "padding": "16px",
            "box-sizing": "border-box",
            "background-color": strip_background(layout.footer_style, ctx.style),
        },
        data_footer_style=layout.footer_style,
    )


def custom_builder(ctx: RenderContext) -> Node:
    return card(
        ctx,
        _header(ctx),
        _body(ctx),
        _footer(ctx),
        template_id=TemplateId.CUSTOM_BUILDER.value,
        cls="shadow",
        style={"display": "flex", "flex-direction": "column", "background-color": "#ffffff"},
    )
