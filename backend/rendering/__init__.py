"""Listing card rendering: style resolution, layouts, HTML/PNG output."""
from .card_document import RenderRuntimeUnavailable, build_card_html, render_card_png
from .nodes import Node
from .style_resolver import ResolvedStyle, build_context, resolve_style
from .template_renderer import render_custom_template, render_template

__all__ = [
    "Node",
    "RenderRuntimeUnavailable",
    "ResolvedStyle",
    "build_card_html",
    "build_context",
    "render_card_png",
    "render_custom_template",
    "render_template",
    "resolve_style",
]
