"""
Fixed card layouts.

Each layout is a function RenderContext -> Node with its own geometry, default
badge text and color treatment. Layouts only read the context, so rendering
the same inputs twice yields equal trees.
"""
from __future__ import annotations

from typing import Callable

from models import TemplateId

from .components import (
    Address,
    AgentBadge,
    AgentBadgeSimple,
    Badge,
    Icon,
    Logo,
    Photo,
    Price,
    Scrim,
    TEXT_DARK,
    TEXT_MUTED,
    align_style,
    card,
    position_style,
    positioned,
    spec_values,
)
from .format_utils import split_address
from .nodes import Node, el
from .style_resolver import FALLBACK_PRIMARY_COLOR, RenderContext

# Intrinsic photo treatments, layered after the user's own filters
SOLD_FILTER = "grayscale(100%)"
UNDER_CONTRACT_FILTER = "blur(4px) brightness(50%)"
LUXURY_SERIF_FILTER = "grayscale(20%)"

LUXURY_GOLD = "#d4af37"
ALERT_RED = "#dc2626"
CONTRACT_GREEN = "#16a34a"

FILL = {"position": "absolute", "inset": "0"}
WHITE = "#ffffff"


def _text_block(ctx: RenderContext, *children: Node | None, role: str = "text-block", style: dict[str, str] | None = None) -> Node:
    """Column of text aligned per the layout's text alignment."""
    css = {"display": "flex", "flex-direction": "column", **align_style(ctx.layout.text_alignment)}
    css.update(style or {})
    return el("div", *children, role=role, style=css)


def _specs(*items: Node | str, style: dict[str, str] | None = None) -> Node:
    children = [el("span", role="spec", text=i) if isinstance(i, str) else i for i in items]
    return el("div", *children, role="specs", style={"display": "flex", "gap": "16px", **(style or {})})


def _dot(text: str = "•", color: str = "") -> Node:
    return el("span", role="separator", style={"color": color} if color else None, text=text)


def _icon_spec(icon: str, value: str, icon_color: str = "", style: dict[str, str] | None = None) -> Node:
    return el(
        "span",
        Icon(icon, size=14, color=icon_color),
        el("span", text=value),
        role="spec",
        style={"display": "flex", "align-items": "center", "gap": "4px", **(style or {})},
    )


def _stacked_stat(value: str, label: str, *, value_style: dict[str, str], label_style: dict[str, str]) -> Node:
    return el(
        "div",
        el("span", role="spec-value", style=value_style, text=value),
        el("span", role="spec-label", cls="caps", style=label_style, text=label),
        role="spec",
        style={"display": "flex", "flex-direction": "column"},
    )


def _wrap(child: Node | None, style: dict[str, str]) -> Node | None:
    if child is None:
        return None
    return el("div", child, style=style)


def _label(text: str) -> Node:
    return el("p", cls="caps bold", style={"font-size": "12px", "opacity": "0.7", "margin": "0 0 4px"}, text=text)


# --- Editorial layouts ---

def sidebar_listing(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    sidebar = el(
        "div",
        el(
            "div",
            Logo(ctx),
            el("div", role="rule", style={"height": "2px", "width": "48px", "background-color": "rgba(255,255,255,0.3)"}),
            el(
                "div",
                # Shown regardless of show_badge
                el("p", role="badge", cls="caps", style={"font-size": "10px", "letter-spacing": "0.1em", "opacity": "0.8", "margin": "0 0 4px"},
                   text=s.badge_text("Just Listed")),
                Price(ctx, style={"font-size": "24px", "font-weight": "700", "line-height": "1.25"}),
                style={"color": WHITE},
            ),
            cls="stack",
            style={"gap": "16px"},
        ),
        el(
            "div",
            el("div", _label("Address"), Address(ctx, style={"font-size": "14px", "font-weight": "500", "line-height": "1.25"})),
            el(
                "div",
                _label("Features"),
                el("div",
                   el("p", role="spec", style={"font-size": "14px", "margin": "0"}, text=f"{beds} Bed • {baths} Bath"),
                   el("p", role="spec", style={"font-size": "14px", "margin": "0"}, text=f"{sqft} Sqft"),
                   role="specs"),
                style={"margin-top": "16px"},
            ),
            style={"color": WHITE},
        ),
        AgentBadgeSimple(ctx, light=True, style={"border-top": "1px solid rgba(255,255,255,0.2)", "padding-top": "16px"}),
        role="text-panel",
        style={
            "width": "35%", "height": "100%", "padding": "24px", "box-sizing": "border-box",
            "display": "flex", "flex-direction": "column", "justify-content": "space-between",
            "position": "relative", "z-index": "10", "background-color": s.primary_color,
            **align_style(ctx.layout.text_alignment),
        },
    )
    tag = None
    if ctx.layout.show_badge:
        # Fixed label; the badge override does not apply here
        tag = el("div", role="tag", cls="caps bold",
                 style={"position": "absolute", "top": "0", "right": "0", "z-index": "10", "padding": "8px 16px",
                        "font-size": "12px", "letter-spacing": "0.1em", "background-color": WHITE, "color": TEXT_DARK},
                 text="New Listing")
    image = el("div", Photo(ctx), tag, role="image-region",
               style={"position": "relative", "width": "65%", "height": "100%", "overflow": "hidden"})
    return card(ctx, sidebar, image, template_id=TemplateId.SIDEBAR_LISTING.value,
                cls="shadow", style={"display": "flex", "background-color": WHITE})


def diagonal_feature(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    text = _text_block(
        ctx,
        el("div", Badge(s.badge_text("For Sale"), style={
            "padding": "2px 8px", "font-size": "10px", "letter-spacing": "0.1em", "border-radius": "2px",
            "background-color": WHITE, "color": TEXT_DARK,
        }), style={"display": "flex", "margin-bottom": "8px"}),
        Price(ctx, style={"font-size": "36px", "font-weight": "900", "margin-bottom": "4px"}),
        Address(ctx, style={"color": "rgba(255,255,255,0.8)", "font-weight": "500", "margin-bottom": "16px"}),
        _specs(_icon_spec("bed", beds), _icon_spec("bath", baths), _icon_spec("area", sqft),
               style={"font-size": "14px", "font-weight": "700", "border-top": "1px solid rgba(255,255,255,0.2)",
                      "padding-top": "16px", "width": "100%"}),
        style={"color": WHITE, "margin-top": "48px"},
    )
    overlay = el(
        "div",
        text,
        role="text-panel",
        style={
            "position": "absolute", "left": "0", "bottom": "0", "width": "100%", "height": "45%", "z-index": "10",
            "display": "flex", "flex-direction": "column", "justify-content": "flex-end",
            "padding": "32px", "box-sizing": "border-box", "background-color": s.secondary_color,
            "clip-path": "polygon(0 20%, 100% 0, 100% 100%, 0 100%)",
        },
    )
    return card(
        ctx,
        el("div", Photo(ctx), role="image-region",
           style={"position": "absolute", "top": "0", "left": "0", "right": "0", "height": "75%", "overflow": "hidden"}),
        overlay,
        positioned(AgentBadgeSimple(ctx, light=True), {"bottom": "24px", "right": "24px"}),
        positioned(Logo(ctx), {"top": "24px", "left": "24px"}),
        template_id=TemplateId.DIAGONAL_FEATURE.value,
        cls="shadow",
        style={"background-color": WHITE},
    )


def soft_luxury(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    agent_row = None
    if ctx.layout.show_agent_info:
        brand = ctx.brand
        photo = None
        if brand and brand.agent_photo_url:
            photo = el("img", role="agent-photo", src=brand.agent_photo_url, alt="Agent",
                       style={"width": "24px", "height": "24px", "border-radius": "9999px", "object-fit": "cover"})
        agent_row = el(
            "div",
            el("div", photo, el("span", role="agent-name", cls="bold", style={"font-size": "12px", "color": "#1f2937"},
                                text=brand.agent_name if brand else ""),
               style={"display": "flex", "align-items": "center", "gap": "8px"}),
            el("span", role="agent-agency", style={"font-size": "10px", "color": "#9ca3af", "font-weight": "500"},
               text=brand.agency_name if brand else ""),
            role="agent-info",
            style={"display": "flex", "align-items": "center", "justify-content": "space-between", "width": "100%",
                   "border-top": "1px solid #e5e7eb", "padding-top": "12px"},
        )
    glass = _text_block(
        ctx,
        el("div",
           el("div", Icon("home", size=20, color=s.primary_color), role="emblem", cls="shadow",
              style={"background-color": WHITE, "padding": "8px", "border-radius": "9999px"}),
           style={"display": "flex", "justify-content": "center", "margin": "-48px 0 12px", "align-self": "stretch"}),
        el("p", role="badge", cls="caps serif", style={"font-size": "12px", "letter-spacing": "0.2em", "color": TEXT_MUTED, "margin": "0 0 8px"},
           text=s.badge_text("Luxury Residence")),
        Price(ctx, cls="serif", style={"font-size": "30px", "color": TEXT_DARK, "margin-bottom": "4px"}),
        Address(ctx, style={"font-size": "14px", "font-weight": "300", "color": "#4b5563", "margin-bottom": "16px"}),
        _specs(f"{beds} Bedrooms", _dot(), f"{baths} Bathrooms", _dot(), f"{sqft} Sq. Ft.",
               style={"justify-content": "center", "font-size": "12px", "font-weight": "500", "color": TEXT_MUTED, "margin-bottom": "16px"}),
        agent_row,
        role="text-panel",
        style={"position": "relative", "z-index": "10", "padding": "24px", "border-radius": "16px",
               "background-color": "rgba(255,255,255,0.9)", "border": "1px solid rgba(255,255,255,0.5)"},
    )
    glass.classes.extend(["glass", "shadow"])
    return card(
        ctx,
        el("div", Photo(ctx), role="image-region", style=FILL),
        Scrim("linear-gradient(to bottom, rgba(0,0,0,0.1), transparent, rgba(0,0,0,0.6))"),
        glass,
        positioned(Logo(ctx), {"top": "24px", "right": "24px"}),
        template_id=TemplateId.SOFT_LUXURY.value,
        cls="shadow",
        style={"display": "flex", "flex-direction": "column", "padding": "16px", "box-sizing": "border-box",
               **position_style(ctx.layout.content_position)},
    )


# --- Announcement layouts ---

def just_listed(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    badge = None
    if ctx.layout.show_badge:
        badge = Badge(s.badge_text("Just Listed"), style={
            "padding": "8px 16px", "font-size": "14px", "letter-spacing": "0.1em",
            "background-color": s.primary_color, "color": WHITE,
        }, cls="caps bold shadow")
    top_row = el(
        "div",
        badge or el("div"),
        Logo(ctx),
        role="header",
        style={"position": "absolute", "top": "16px", "left": "16px", "right": "16px", "z-index": "10",
               "display": "flex", "justify-content": "space-between", "align-items": "flex-start"},
    )
    content = _text_block(
        ctx,
        Price(ctx, style={"font-size": "36px", "font-weight": "800", "color": WHITE, "margin-bottom": "8px", "letter-spacing": "-0.025em"}),
        el("div", Icon("pin", size=16, color=s.primary_color), Address(ctx, style={"font-size": "14px", "font-weight": "500"}),
           style={"display": "flex", "align-items": "center", "gap": "4px", "color": "#f3f4f6", "margin-bottom": "20px"}),
        el(
            "div",
            _specs(
                _icon_spec("bed", beds, "#d1d5db", {"font-size": "14px", "font-weight": "700"}),
                _icon_spec("bath", baths, "#d1d5db", {"font-size": "14px", "font-weight": "700"}),
                _icon_spec("area", sqft, "#d1d5db", {"font-size": "14px", "font-weight": "700"}),
            ),
            AgentBadge(ctx, light=True),
            style={"display": "flex", "align-items": "center", "justify-content": "space-between", "width": "100%",
                   "border-top": "1px solid rgba(255,255,255,0.2)", "padding-top": "16px"},
        ),
        role="body",
        style={"position": "relative", "z-index": "10", "padding": "24px"},
    )
    return card(
        ctx,
        el("div", Photo(ctx, opacity=None), role="image-region", style=FILL),
        Scrim("linear-gradient(to top, rgba(0,0,0,0.9), rgba(0,0,0,0.2), transparent)"),
        top_row,
        content,
        template_id=TemplateId.JUST_LISTED.value,
        cls="shadow",
        style={"background-color": "#111827", "color": WHITE, "display": "flex", "flex-direction": "column",
               **position_style(ctx.layout.content_position)},
    )


def sold(ctx: RenderContext) -> Node:
    s = ctx.style
    badge = None
    if ctx.layout.show_badge:
        badge = el("h1", role="badge", cls="serif",
                   style={"margin": "0 0 8px", "font-size": "48px", "letter-spacing": "0.1em", "color": s.primary_color},
                   text=s.badge_text("SOLD"))
    agent = None
    if ctx.brand and ctx.layout.show_agent_info:
        agent = el(
            "div",
            el("p", cls="caps", style={"font-size": "10px", "letter-spacing": "0.1em", "color": "#9ca3af", "margin": "0"}, text="Represented by"),
            el("p", role="agent-name", style={"font-size": "14px", "font-weight": "500", "margin": "4px 0 0"}, text=ctx.brand.agent_name),
            el("p", role="agent-phone", style={"font-size": "9px", "color": "#9ca3af", "margin": "4px 0 0"}, text=ctx.brand.phone),
            el("p", role="agent-email", style={"font-size": "9px", "color": "#9ca3af", "margin": "0"}, text=ctx.brand.email),
            role="agent-info",
            style={"margin-top": "24px", "padding-top": "16px", "width": "100%", "text-align": "center",
                   "border-top": "1px solid rgba(255,255,255,0.1)"},
        )
    box = _text_block(
        ctx,
        badge,
        el("div", role="rule", style={"height": "2px", "width": "64px", "margin": "0 auto 16px",
                                      "background-color": WHITE, "opacity": "0.5"}),
        Address(ctx, style={"font-size": "18px", "font-weight": "300", "letter-spacing": "0.025em"}),
        agent,
        role="text-panel",
        style={"position": "relative", "z-index": "10", "padding": "32px", "margin": "0 24px", "max-width": "320px",
               "background-color": "rgba(0,0,0,0.8)", "border": f"1px solid {s.primary_color}"},
    )
    box.classes.append("glass")
    return card(
        ctx,
        el("div", Photo(ctx, opacity=None, extra_filter=SOLD_FILTER), role="image-region", style=FILL),
        el("div", role="frame", style={"position": "absolute", "inset": "16px", "opacity": "0.8", "pointer-events": "none",
                                       "border": "16px solid rgba(255,255,255,0.1)"}),
        positioned(Logo(ctx), {"top": "32px", "right": "32px"}),
        box,
        template_id=TemplateId.SOLD.value,
        cls="shadow",
        style={"background-color": "#000000", "color": WHITE, "display": "flex",
               "align-items": "center", "justify-content": "center"},
    )


def open_house(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    badge = None
    if ctx.layout.show_badge:
        badge = positioned(
            Badge(s.badge_text("Open House"), style={
                "padding": "4px 12px", "font-size": "12px", "letter-spacing": "0.05em",
                "background-color": WHITE, "color": TEXT_DARK,
            }, cls="caps bold shadow"),
            {"bottom": "16px", "right": "16px"},
        )
    image = el(
        "div",
        Photo(ctx),
        positioned(Logo(ctx), {"top": "16px", "left": "16px"}),
        badge,
        role="image-region",
        style={"position": "relative", "height": "60%", "overflow": "hidden"},
    )
    when = el(
        "div",
        el("span", text="SUN"),
        el("br"),
        el("span", text="1-4PM"),
        role="event-time",
        cls="bold shadow",
        style={
            "position": "absolute", "top": "0", "left": "50%", "transform": "translate(-50%, -50%)",
            "width": "64px", "height": "64px", "border-radius": "9999px", "display": "flex", "flex-direction": "column",
            "align-items": "center", "justify-content": "center", "text-align": "center", "font-size": "12px",
            "background-color": s.primary_color, "color": WHITE, "border": f"4px solid {WHITE}",
        },
    )
    stat_value = {"font-size": "18px", "line-height": "1"}
    stat_label = {"font-size": "12px", "font-weight": "700"}
    divider = el("div", role="separator", style={"width": "1px", "height": "32px", "background-color": "#e5e7eb"})
    contact = None
    if ctx.brand and ctx.layout.show_agent_info:
        contact = el(
            "div",
            el("p", cls="caps bold", style={"font-size": "10px", "color": "#9ca3af", "margin": "0"}, text="Contact"),
            el("p", role="agent-website", cls="bold", style={"font-size": "12px", "margin": "0", "color": s.primary_color}, text=ctx.brand.website),
            el("p", role="agent-phone", style={"font-size": "9px", "margin": "0", "color": TEXT_MUTED}, text=ctx.brand.phone),
            role="agent-info",
            style={"display": "flex", "flex-direction": "column", "align-items": "flex-end", "text-align": "right"},
        )
    body = _text_block(
        ctx,
        when,
        Price(ctx, tag="h3", style={"font-size": "30px", "font-weight": "800", "margin-top": "16px", "color": s.secondary_color}),
        Address(ctx, style={"font-size": "14px", "color": TEXT_MUTED, "margin-bottom": "24px"}),
        el(
            "div",
            _specs(
                _stacked_stat(beds, "Bed", value_style=stat_value, label_style=stat_label),
                divider,
                _stacked_stat(baths, "Bath", value_style=stat_value, label_style=stat_label),
                divider,
                _stacked_stat(sqft, "Sqft", value_style=stat_value, label_style=stat_label),
                style={"color": "#4b5563", "align-items": "center"},
            ),
            contact,
            style={"display": "flex", "justify-content": "space-between", "align-items": "flex-end", "width": "100%"},
        ),
        role="body",
        style={"position": "relative", "z-index": "10", "height": "40%", "padding": "24px", "box-sizing": "border-box",
               "justify-content": "center", "background-color": WHITE},
    )
    return card(ctx, image, body, template_id=TemplateId.OPEN_HOUSE.value, cls="shadow",
                style={"background-color": WHITE, "color": TEXT_DARK, "display": "flex", "flex-direction": "column"})


def price_drop(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    badge = None
    if ctx.layout.show_badge:
        badge = Badge(s.badge_text("PRICE DROP"), style={
            "position": "absolute", "top": "40px", "right": "0", "z-index": "10", "padding": "12px 32px",
            "font-size": "20px", "background-color": ALERT_RED, "color": WHITE, "border": f"2px solid {WHITE}",
            "transform": "translate(24px, 16px) rotate(3deg)",
        }, cls="bold shadow")
    bottom = el(
        "div",
        _text_block(
            ctx,
            Price(ctx, style={"font-size": "48px", "font-weight": "800", "line-height": "1.25", "letter-spacing": "-0.025em", "margin-bottom": "8px"}),
            Address(ctx, style={"font-size": "20px", "font-weight": "300", "opacity": "0.9", "margin-bottom": "24px"}),
            el(
                "div",
                _specs(f"{beds} Beds", _dot(), f"{baths} Baths", _dot(), f"{sqft} sqft", style={"font-size": "14px", "font-weight": "500"}),
                AgentBadge(ctx, light=True),
                style={"display": "flex", "align-items": "center", "justify-content": "space-between", "width": "100%",
                       "border-top": "1px solid rgba(255,255,255,0.2)", "padding-top": "16px"},
            ),
        ),
        role="body",
        style={"position": "absolute", "left": "0", "right": "0", "bottom": "0", "padding": "96px 32px 32px",
               "background": "linear-gradient(to top, rgba(0,0,0,0.9), transparent)"},
    )
    return card(
        ctx,
        el("div", Photo(ctx, opacity=None, style={"mix-blend-mode": "overlay"}), role="image-region", style=FILL),
        positioned(Logo(ctx), {"top": "16px", "left": "16px"}),
        badge,
        bottom,
        template_id=TemplateId.PRICE_DROP.value,
        cls="shadow",
        style={"background-color": s.secondary_color, "color": WHITE},
    )


# --- Split and framed layouts ---

def modern_minimal(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    badge = None
    if ctx.layout.show_badge:
        badge = positioned(
            Badge(s.badge_text("For Sale"), style={
                "padding": "4px 12px", "font-size": "12px", "letter-spacing": "0.05em",
                "background-color": "rgba(255,255,255,0.9)", "color": TEXT_DARK,
            }, cls="caps bold glass"),
            {"top": "16px", "right": "16px"},
        )
    image = el("div", Photo(ctx), badge, role="image-region",
               style={"position": "relative", "height": "65%", "width": "100%", "overflow": "hidden"})
    value = {"font-size": "20px", "font-weight": "700"}
    label = {"font-size": "10px", "color": "#9ca3af"}
    body = _text_block(
        ctx,
        Price(ctx, style={"font-size": "30px", "font-weight": "300", "color": TEXT_DARK, "margin-bottom": "4px"}),
        Address(ctx, style={"font-size": "14px", "font-weight": "500", "color": TEXT_MUTED, "margin-bottom": "24px"}),
        _specs(
            _stacked_stat(beds, "Beds", value_style=value, label_style=label),
            _stacked_stat(baths, "Baths", value_style=value, label_style=label),
            _stacked_stat(sqft, "Sqft", value_style=value, label_style=label),
            style={"gap": "24px", "color": "#1f2937", "border-top": "1px solid #f3f4f6", "padding-top": "24px", "width": "100%"},
        ),
        el(
            "div",
            AgentBadgeSimple(ctx),
            Logo(ctx, dark=True),
            role="footer",
            style={"margin-top": "auto", "padding-top": "16px", "display": "flex", "justify-content": "space-between",
                   "align-items": "center", "width": "100%"},
        ),
        role="body",
        style={"flex": "1", "padding": "32px", "justify-content": "center", "position": "relative", "z-index": "10",
               "background-color": WHITE},
    )
    return card(ctx, image, body, template_id=TemplateId.MODERN_MINIMAL.value, cls="shadow",
                style={"background-color": WHITE, "display": "flex", "flex-direction": "column"})


def luxury_serif(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    # Gold replaces the stock blue accent
    accent = LUXURY_GOLD if s.primary_color == FALLBACK_PRIMARY_COLOR else s.primary_color
    badge = None
    if ctx.layout.show_badge:
        badge = el(
            "div",
            el("span", role="badge", cls="caps serif", style={"font-size": "12px", "letter-spacing": "0.2em", "color": accent},
               text=s.badge_text("Exclusive Listing")),
            style={"position": "absolute", "bottom": "-12px", "left": "50%", "transform": "translateX(-50%)", "z-index": "10",
                   "padding": "4px 16px", "background-color": "#1a1a1a", "border": f"1px solid {accent}"},
        )
    image = el(
        "div",
        Photo(ctx, extra_filter=LUXURY_SERIF_FILTER),
        badge,
        role="image-region",
        style={"position": "relative", "height": "60%", "width": "100%", "margin-bottom": "24px", "overflow": "hidden"},
    )
    body = _text_block(
        ctx,
        Price(ctx, cls="serif", style={"font-size": "30px", "font-style": "italic", "color": WHITE, "margin-bottom": "8px"}),
        Address(ctx, cls="caps", style={"font-size": "12px", "letter-spacing": "0.1em", "color": "#9ca3af", "margin-bottom": "24px"}),
        el(
            "div",
            el("span", role="spec", cls="serif", text=f"{beds} Bed"),
            el("span", role="spec", cls="serif", text=f"{baths} Bath"),
            el("span", role="spec", cls="serif", text=f"{sqft} Sqft"),
            role="specs",
            style={"display": "grid", "grid-template-columns": "repeat(3, 1fr)", "gap": "32px", "color": accent,
                   "border-top": "1px solid rgba(255,255,255,0.1)", "padding-top": "16px", "margin-bottom": "auto"},
        ),
        _wrap(AgentBadge(ctx, light=True), {"padding-bottom": "16px"}),
        role="body",
        style={"flex": "1", "padding": "0 16px", "align-items": "center"},
    )
    frame = el(
        "div",
        image,
        body,
        role="frame",
        style={"position": "relative", "width": "100%", "height": "100%", "padding": "4px", "box-sizing": "border-box",
               "display": "flex", "flex-direction": "column", "border": f"1px solid {accent}"},
    )
    return card(
        ctx,
        frame,
        template_id=TemplateId.LUXURY_SERIF.value,
        cls="shadow",
        style={"background-color": "#1a1a1a", "padding": "24px", "box-sizing": "border-box", "display": "flex",
               "flex-direction": "column", "align-items": "center", "justify-content": "center", "text-align": "center"},
    )


def bold_grid(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, _ = spec_values(ctx)
    chip = {"padding": "4px 8px", "background-color": "#f3f4f6"}
    agent = None
    if ctx.layout.show_agent_info and ctx.brand:
        agent = el(
            "div",
            el(
                "div",
                el("span", role="agent-name", text=ctx.brand.agent_name),
                el("span", role="agent-phone", style={"font-size": "10px", "font-weight": "400"}, text=ctx.brand.phone),
                style={"display": "flex", "flex-direction": "column", "font-size": "12px", "font-weight": "700", "color": "#4b5563"},
            ),
            role="agent-info",
            style={"border-top": "1px solid #e5e7eb", "padding-top": "12px", "display": "flex", "align-items": "center", "gap": "8px"},
        )
    panel = _text_block(
        ctx,
        Price(ctx, style={"font-size": "30px", "font-weight": "900", "color": "#000000", "margin-bottom": "4px"}),
        Address(ctx, style={"font-size": "14px", "font-weight": "700", "color": "#4b5563", "line-height": "1.25", "margin-bottom": "16px"}),
        _specs(el("span", role="spec", style=chip, text=f"{beds} BD"), el("span", role="spec", style=chip, text=f"{baths} BA"),
               style={"gap": "12px", "font-size": "14px", "font-weight": "700", "margin-bottom": "16px"}),
        agent,
        role="text-panel",
        style={"position": "absolute", "bottom": "32px", "right": "32px", "z-index": "20", "max-width": "280px",
               "padding": "24px", "background-color": WHITE, "box-shadow": "8px 8px 0px 0px rgba(0,0,0,1)"},
    )
    badge = None
    if ctx.layout.show_badge:
        badge = positioned(
            Badge(s.badge_text("New on Market"), style={
                "padding": "4px 12px", "font-size": "14px", "letter-spacing": "-0.05em",
                "background-color": "#000000", "color": WHITE,
            }),
            {"top": "32px", "left": "32px"},
        )
    logo = Logo(ctx, height="32px")
    logo_box = None
    if logo is not None:
        logo.style.pop("filter", None)
        logo_box = positioned(el("div", logo, style={"padding": "8px", "background-color": WHITE}), {"top": "32px", "right": "32px"})
    inner = el(
        "div",
        Photo(ctx),
        el("div", role="frame", style={**FILL, "z-index": "10", "pointer-events": "none", "border": f"8px solid {s.primary_color}"}),
        panel,
        badge,
        logo_box,
        role="image-region",
        style={"position": "relative", "width": "100%", "height": "100%", "overflow": "hidden"},
    )
    return card(ctx, inner, template_id=TemplateId.BOLD_GRID.value, cls="shadow",
                style={"background-color": WHITE, "padding": "16px", "box-sizing": "border-box"})


def geometric_pop(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    image = el(
        "div",
        Photo(ctx),
        role="image-region",
        cls="shadow",
        style={"position": "absolute", "top": "0", "right": "0", "width": "90%", "height": "65%", "z-index": "10",
               "overflow": "hidden", "clip-path": "polygon(0 0, 100% 0, 100% 85%, 0 100%)"},
    )
    dot = el("span", style={"width": "4px", "height": "4px", "border-radius": "9999px", "background-color": WHITE})
    text = _text_block(
        ctx,
        el("div", role="rule", style={"width": "48px", "height": "4px", "margin-bottom": "16px", "background-color": s.primary_color}),
        Price(ctx, style={"font-size": "36px", "font-weight": "700", "color": WHITE, "margin-bottom": "8px"}),
        Address(ctx, style={"font-weight": "300", "color": "rgba(255,255,255,0.8)", "margin-bottom": "24px"}),
        _specs(
            _icon_spec("home", f"{beds}bd"),
            el("span", dot, el("span", text=f"{baths}ba"), role="spec", style={"display": "flex", "align-items": "center", "gap": "8px"}),
            el("span", dot, el("span", text=f"{sqft}sqft"), role="spec", style={"display": "flex", "align-items": "center", "gap": "8px"}),
            style={"gap": "24px", "align-items": "center", "font-size": "14px", "color": WHITE},
        ),
    )
    return card(
        ctx,
        el("div", role="shape", style={**FILL, "z-index": "0", "background-color": WHITE,
                                       "clip-path": "polygon(0 0, 100% 0, 100% 40%, 0 70%)"}),
        image,
        el("div", text, role="body", style={"position": "absolute", "left": "0", "bottom": "0", "width": "100%",
                                            "padding": "32px", "box-sizing": "border-box", "z-index": "20"}),
        positioned(
            AgentBadgeSimple(ctx, light=True, style={"background-color": "rgba(0,0,0,0.3)"}),
            {"bottom": "32px", "right": "32px"},
        ),
        template_id=TemplateId.GEOMETRIC_POP.value,
        cls="shadow",
        style={"background-color": s.secondary_color},
    )


def feature_split(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)

    def tile(icon: str, value: str) -> Node:
        return el(
            "div",
            el("div", Icon(icon, size=20, color=WHITE), style={"margin-bottom": "4px"}),
            el("span", cls="bold", style={"color": WHITE}, text=value),
            role="spec",
            cls="glass",
            style={"padding": "12px", "border-radius": "8px", "text-align": "center", "background-color": "rgba(255,255,255,0.1)"},
        )

    image = el(
        "div",
        Photo(ctx),
        el("div", Address(ctx, style={"font-size": "14px", "font-weight": "700"}), role="tag",
           style={"position": "absolute", "bottom": "0", "left": "0", "z-index": "10", "padding": "8px 16px",
                  "background-color": WHITE, "color": s.secondary_color, "border-top-right-radius": "12px"}),
        role="image-region",
        style={"position": "relative", "height": "50%", "overflow": "hidden"},
    )
    label = None
    if ctx.layout.show_badge:
        label = el("p", role="badge", cls="caps",
                   style={"font-size": "12px", "letter-spacing": "0.05em", "color": "rgba(255,255,255,0.6)", "margin": "0 0 4px"},
                   text=s.badge_text("Listing Price"))
    panel = el(
        "div",
        el(
            "div",
            _text_block(ctx, label, Price(ctx, style={"font-size": "36px", "font-weight": "300", "color": WHITE})),
            Logo(ctx),
            style={"display": "flex", "justify-content": "space-between", "align-items": "flex-start", "margin-bottom": "24px"},
        ),
        el("div", tile("bed", beds), tile("bath", baths), tile("area", sqft), role="specs",
           style={"display": "grid", "grid-template-columns": "repeat(3, 1fr)", "gap": "16px", "margin-bottom": "24px"}),
        el(
            "div",
            el(
                "div",
                el("div", Icon("arrow-right", size=16, color=WHITE),
                   style={"width": "32px", "height": "32px", "border-radius": "9999px", "background-color": "rgba(255,255,255,0.2)",
                          "display": "flex", "align-items": "center", "justify-content": "center"}),
                el("span", role="cta", style={"font-size": "14px", "font-weight": "500", "color": WHITE}, text="Swipe for details"),
                style={"display": "flex", "align-items": "center", "gap": "12px"},
            ),
            AgentBadgeSimple(ctx, light=True),
            role="footer",
            style={"margin-top": "auto", "padding-top": "16px", "border-top": "1px solid rgba(255,255,255,0.1)",
                   "display": "flex", "align-items": "center", "justify-content": "space-between"},
        ),
        role="text-panel",
        style={"height": "50%", "padding": "24px", "box-sizing": "border-box", "display": "flex", "flex-direction": "column",
               "position": "relative", "z-index": "10", "background-color": s.secondary_color},
    )
    return card(ctx, image, panel, template_id=TemplateId.FEATURE_SPLIT.value, cls="shadow",
                style={"display": "flex", "flex-direction": "column"})


def story_portrait(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    badge = None
    if ctx.layout.show_badge:
        badge = el(
            "div",
            Badge(s.badge_text("Just Listed"), style={
                "display": "inline-block", "padding": "4px 16px", "border-radius": "9999px", "font-size": "12px",
                "letter-spacing": "0.1em", "color": WHITE, "background-color": "rgba(255,255,255,0.2)",
                "border": "1px solid rgba(255,255,255,0.3)",
            }, cls="caps bold glass"),
            style={"position": "absolute", "top": "32px", "left": "0", "width": "100%", "text-align": "center", "z-index": "10"},
        )
    content = _text_block(
        ctx,
        Price(ctx, style={"font-size": "48px", "font-weight": "700", "color": WHITE, "letter-spacing": "-0.05em", "margin-bottom": "8px"}),
        Address(ctx, style={"font-size": "18px", "line-height": "1.375", "color": "rgba(255,255,255,0.9)", "margin-bottom": "16px"}),
        _specs(f"{beds} Beds", _dot("|"), f"{baths} Baths", _dot("|"), f"{sqft} Sq. Ft.",
               style={"font-size": "14px", "font-weight": "500", "color": "rgba(255,255,255,0.8)", "margin-bottom": "16px"}),
        AgentBadge(ctx, light=True),
        role="body",
        style={"position": "relative", "z-index": "10", "padding": "0 24px"},
    )
    return card(
        ctx,
        el("div", Photo(ctx, opacity=None), role="image-region", style=FILL),
        Scrim("linear-gradient(to top, #000000, transparent, transparent)"),
        badge,
        content,
        template_id=TemplateId.STORY_PORTRAIT.value,
        cls="shadow",
        style={"display": "flex", "flex-direction": "column", **position_style(ctx.layout.content_position)},
    )


def classic_card(ctx: RenderContext) -> Node:
    s = ctx.style
    beds, baths, sqft = spec_values(ctx)
    star = None
    if ctx.layout.show_badge:
        star = el(
            "div",
            Icon("star", size=24, color=WHITE),
            role="badge",
            cls="shadow",
            style={"position": "absolute", "top": "-12px", "left": "-12px", "z-index": "10", "width": "48px", "height": "48px",
                   "border-radius": "9999px", "display": "flex", "align-items": "center", "justify-content": "center",
                   "transform": "rotate(12deg)", "background-color": s.secondary_color},
        )
    light_sep = "#d1d5db"
    text = _text_block(
        ctx,
        Price(ctx, tag="h3", cls="serif", style={"font-size": "24px", "color": TEXT_DARK, "margin-bottom": "4px"}),
        Address(ctx, cls="caps", style={"font-size": "12px", "letter-spacing": "0.025em", "color": TEXT_MUTED, "margin-bottom": "12px"}),
        _specs(f"{beds} BD", _dot(color=light_sep), f"{baths} BA", _dot(color=light_sep), f"{sqft} SF",
               style={"justify-content": "center", "gap": "12px", "width": "100%", "font-size": "12px",
                      "font-weight": "700", "color": "#374151", "margin-bottom": "12px"}),
        el("div", AgentBadgeSimple(ctx, style={"background-color": "#f9fafb", "padding": "4px"}),
           style={"border-top": "1px solid #e5e7eb", "padding-top": "8px", "width": "100%", "display": "flex", "justify-content": "center"}),
        role="body",
    )
    polaroid = el(
        "div",
        el("div", Photo(ctx), role="image-region",
           style={"height": "60%", "width": "100%", "margin-bottom": "16px", "overflow": "hidden", "background-color": "#f3f4f6"}),
        text,
        star,
        role="text-panel",
        cls="shadow",
        style={"position": "relative", "width": "85%", "height": "85%", "padding": "16px", "box-sizing": "border-box",
               "background-color": WHITE, "transform": "rotate(1deg)"},
    )
    return card(ctx, polaroid, template_id=TemplateId.CLASSIC_CARD.value, cls="shadow",
                style={"background-color": "#f3f4f6", "display": "flex", "align-items": "center", "justify-content": "center"})


def under_contract(ctx: RenderContext) -> Node:
    s = ctx.style
    contact = None
    if ctx.layout.show_agent_info:
        brand = ctx.brand
        photo = None
        if brand and brand.agent_photo_url:
            photo = el("img", role="agent-photo", src=brand.agent_photo_url, alt="Agent",
                       style={"width": "40px", "height": "40px", "border-radius": "9999px", "object-fit": "cover"})
        contact = el(
            "div",
            el(
                "div",
                photo,
                el(
                    "div",
                    el("p", cls="caps", style={"font-size": "12px", "color": TEXT_MUTED, "margin": "0"}, text="Contact for similar listings"),
                    el("p", role="agent-name", cls="bold", style={"font-size": "14px", "color": TEXT_DARK, "margin": "0"},
                       text=(brand.agent_name if brand and brand.agent_name else "Agent")),
                    el("p", role="agent-phone", style={"font-size": "10px", "color": "#4b5563", "margin": "0"},
                       text=brand.phone if brand else ""),
                    style={"text-align": "left"},
                ),
                style={"display": "flex", "align-items": "center", "gap": "12px"},
            ),
            role="agent-info",
            style={"padding": "12px", "border-radius": "8px", "background-color": WHITE},
        )
    panel = el(
        "div",
        el("div", Icon("key", size=32, color=CONTRACT_GREEN), role="emblem", cls="shadow",
           style={"width": "64px", "height": "64px", "border-radius": "9999px", "background-color": WHITE, "margin": "0 auto 16px",
                  "display": "flex", "align-items": "center", "justify-content": "center"}),
        # Always shown
        el("h2", role="badge", cls="bold", style={"margin": "0 0 8px", "font-size": "30px", "color": WHITE},
           text=s.badge_text("Under Contract")),
        Address(ctx, style={"font-size": "14px", "color": "rgba(255,255,255,0.8)", "margin-bottom": "24px"}),
        contact,
        role="text-panel",
        cls="glass",
        style={"position": "relative", "z-index": "10", "width": "80%", "padding": "24px", "border-radius": "12px",
               "text-align": "center", "background-color": "rgba(255,255,255,0.1)", "border": "1px solid rgba(255,255,255,0.2)"},
    )
    return card(
        ctx,
        el("div", Photo(ctx, opacity=None, extra_filter=UNDER_CONTRACT_FILTER), role="image-region", style=FILL),
        panel,
        template_id=TemplateId.UNDER_CONTRACT.value,
        cls="shadow",
        style={"display": "flex", "align-items": "center", "justify-content": "center"},
    )


def new_price(ctx: RenderContext) -> Node:
    s = ctx.style
    badge = None
    if ctx.layout.show_badge:
        badge = el(
            "div",
            el("span", cls="caps bold", style={"font-size": "12px"}, text=s.badge_text("New")),
            el("span", cls="caps bold", style={"font-size": "14px"}, text=s.badge_text("Price")),
            role="badge",
            cls="shadow",
            style={"position": "absolute", "bottom": "-32px", "right": "32px", "z-index": "10", "width": "96px", "height": "96px",
                   "border-radius": "9999px", "display": "flex", "flex-direction": "column", "align-items": "center",
                   "justify-content": "center", "background-color": "red", "color": WHITE,
                   "border": f"4px solid {WHITE}", "transform": "rotate(12deg)"},
        )
    image = el("div", Photo(ctx), badge, role="image-region", style={"position": "relative", "height": "60%"})
    body = _text_block(
        ctx,
        Price(ctx, style={"font-size": "36px", "font-weight": "900", "color": TEXT_DARK, "margin-bottom": "8px"}),
        Address(ctx, style={"font-weight": "500", "color": TEXT_MUTED, "margin-bottom": "24px"}),
        el("div",
           Icon("tag", size=16, color="#ef4444"),
           el("p", role="tagline", style={"font-size": "14px", "font-style": "italic", "color": "#4b5563", "margin": "0"},
              text='"Motivated seller! Beautiful updates throughout."'),
           style={"display": "flex", "gap": "8px"}),
        el("div", AgentBadgeSimple(ctx), role="footer",
           style={"margin-top": "auto", "padding-top": "16px", "border-top": "1px solid #f3f4f6", "width": "100%"}),
        role="body",
        style={"flex": "1", "padding": "40px 32px 32px"},
    )
    return card(ctx, image, body, template_id=TemplateId.NEW_PRICE.value, cls="shadow",
                style={"background-color": WHITE, "display": "flex", "flex-direction": "column"})


def neighborhood_focus(ctx: RenderContext) -> Node:
    s = ctx.style
    street, locality = split_address(ctx.data.address)
    top = el(
        "div",
        el("div", Icon("pin", size=128, color=WHITE), role="watermark",
           style={"position": "absolute", "top": "0", "right": "0", "padding": "32px", "opacity": "0.1", "pointer-events": "none"}),
        _text_block(
            ctx,
            el("div",
               Icon("pin", size=16, color=WHITE),
               # Always shown
               el("span", role="badge", text=s.badge_text("Location Spotlight")),
               cls="caps",
               style={"display": "flex", "align-items": "center", "gap": "8px", "margin-bottom": "8px", "opacity": "0.8",
                      "font-size": "14px", "font-weight": "500", "letter-spacing": "0.05em"}),
            el("h2", role="address", cls="bold", style={"margin": "0 0 8px", "font-size": "30px", "line-height": "1.25"}, text=street),
            el("p", role="address-locality", style={"margin": "0", "font-size": "20px", "opacity": "0.9"}, text=locality),
            style={"position": "relative", "z-index": "10"},
        ),
        role="text-panel",
        style={"position": "relative", "height": "40%", "padding": "32px", "box-sizing": "border-box", "overflow": "hidden",
               "display": "flex", "flex-direction": "column", "justify-content": "center", "color": WHITE},
    )
    image = el(
        "div",
        el(
            "div",
            Photo(ctx),
            el("div", Price(ctx, tag="p", style={"font-size": "24px", "font-weight": "700", "color": TEXT_DARK}),
               role="price-box", cls="glass shadow",
               style={"position": "absolute", "bottom": "16px", "left": "16px", "z-index": "10", "padding": "8px 16px",
                      "border-radius": "8px", "background-color": "rgba(255,255,255,0.9)"}),
            positioned(AgentBadgeSimple(ctx), {"top": "16px", "right": "16px", "z-index": "10"}),
            style={"position": "relative", "width": "100%", "height": "100%", "border-radius": "8px", "overflow": "hidden"},
        ),
        role="image-region",
        style={"height": "60%", "padding": "8px", "box-sizing": "border-box", "background-color": WHITE, "position": "relative"},
    )
    return card(ctx, top, image, template_id=TemplateId.NEIGHBORHOOD_FOCUS.value, cls="shadow",
                style={"display": "flex", "flex-direction": "column", "background-color": s.primary_color})


LayoutFn = Callable[[RenderContext], Node]

LAYOUTS: dict[TemplateId, LayoutFn] = {
    TemplateId.SIDEBAR_LISTING: sidebar_listing,
    TemplateId.DIAGONAL_FEATURE: diagonal_feature,
    TemplateId.SOFT_LUXURY: soft_luxury,
    TemplateId.JUST_LISTED: just_listed,
    TemplateId.SOLD: sold,
    TemplateId.OPEN_HOUSE: open_house,
    TemplateId.PRICE_DROP: price_drop,
    TemplateId.MODERN_MINIMAL: modern_minimal,
    TemplateId.LUXURY_SERIF: luxury_serif,
    TemplateId.BOLD_GRID: bold_grid,
    TemplateId.GEOMETRIC_POP: geometric_pop,
    TemplateId.FEATURE_SPLIT: feature_split,
    TemplateId.STORY_PORTRAIT: story_portrait,
    TemplateId.CLASSIC_CARD: classic_card,
    TemplateId.UNDER_CONTRACT: under_contract,
    TemplateId.NEW_PRICE: new_price,
    TemplateId.NEIGHBORHOOD_FOCUS: neighborhood_focus,
}
