"""
Standalone HTML document for a rendered card, plus PNG export via Playwright.

The document embeds its CSS and loads the brand font, so it can be previewed
directly in a browser or screenshotted without the frontend runtime.
"""
from __future__ import annotations

from urllib.parse import quote_plus

from .components import CARD_HEIGHT_PX, CARD_WIDTH_PX
from .nodes import Node, _esc
from .style_resolver import FALLBACK_FONT_FAMILY

DEFAULT_DOCUMENT_TITLE = "Listing Card"


class RenderRuntimeUnavailable(RuntimeError):
    """Headless browser is not installed or could not start."""


def _card_css(font_family: str) -> str:
    return f"""
    * {{ box-sizing: border-box; }}
    html, body {{ margin: 0; padding: 0; background: transparent; }}
    body {{ width: {CARD_WIDTH_PX}px; height: {CARD_HEIGHT_PX}px; }}
    p, h1, h2, h3 {{ margin: 0; }}
    .card {{ font-family: '{font_family}', 'Inter', system-ui, sans-serif; -webkit-font-smoothing: antialiased; }}
    .stack {{ display: flex; flex-direction: column; }}
    .caps {{ text-transform: uppercase; letter-spacing: 0.08em; }}
    .bold {{ font-weight: 700; }}
    .serif {{ font-family: 'Playfair Display', Georgia, serif; }}
    .shadow {{ box-shadow: 0 10px 25px -5px rgba(0,0,0,0.25); }}
    .glass {{ -webkit-backdrop-filter: blur(12px); backdrop-filter: blur(12px); }}
    .icon {{ display: inline-block; }}
    img {{ display: block; }}
    """.strip()


def _font_link(font_family: str) -> str:
    family = quote_plus(font_family)
    return (
        '<link rel="stylesheet" '
        f'href="https://fonts.googleapis.com/css2?family={family}:wght@300;400;500;700;800;900&amp;display=swap" />'
    )


def build_card_html(node: Node, *, font_family: str = FALLBACK_FONT_FAMILY, title: str = DEFAULT_DOCUMENT_TITLE) -> str:
    return f"""
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width={CARD_WIDTH_PX}" />
  <title>{_esc(title)}</title>
  {_font_link(font_family)}
  <style>{_card_css(font_family)}</style>
</head>
<body>
  {node.to_html()}
</body>
</html>
    """.strip()


def render_card_png(html_content: str, *, device_scale_factor: float = 2.0) -> bytes:
    """Screenshot the card document at 400x500 CSS pixels."""
    try:
        from playwright.sync_api import Error as PlaywrightError
        from playwright.sync_api import sync_playwright
    except ImportError as exc:
        raise RenderRuntimeUnavailable("playwright is not installed") from exc

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch()
            page = browser.new_page(
                viewport={"width": CARD_WIDTH_PX, "height": CARD_HEIGHT_PX},
                device_scale_factor=device_scale_factor,
            )
            page.set_content(html_content, wait_until="networkidle")
            png_bytes = page.screenshot(
                type="png",
                clip={"x": 0, "y": 0, "width": CARD_WIDTH_PX, "height": CARD_HEIGHT_PX},
                omit_background=True,
            )
            browser.close()
    except PlaywrightError as exc:
        raise RenderRuntimeUnavailable(str(exc)) from exc
    return png_bytes
