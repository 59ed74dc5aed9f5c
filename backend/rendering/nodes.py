"""
Visual tree produced by the template renderer.

A rendered card is a tree of Node objects. Each node carries a semantic role
(``"badge"``, ``"agent-badge"``, ``"price"``...) so callers and tests can
inspect the composition without parsing HTML, and serializes itself to
escaped, self-contained HTML with inline styles.
"""
from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Any, Iterator

VOID_TAGS = frozenset({"img", "br", "hr"})


def _esc(value: Any) -> str:
    return html.escape(str(value if value is not None else ""), quote=True)


def style_text(style: dict[str, str]) -> str:
    return "; ".join(f"{k}: {v}" for k, v in style.items() if v not in (None, ""))


@dataclass
class Node:
    tag: str
    role: str = ""
    classes: list[str] = field(default_factory=list)
    style: dict[str, str] = field(default_factory=dict)
    attrs: dict[str, str] = field(default_factory=dict)
    text: str = ""
    children: list[Node] = field(default_factory=list)

    def walk(self) -> Iterator[Node]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, role: str) -> list[Node]:
        return [n for n in self.walk() if n.role == role]

    def find(self, role: str) -> Node | None:
        for n in self.walk():
            if n.role == role:
                return n
        return None

    def roles(self) -> set[str]:
        return {n.role for n in self.walk() if n.role}

    def text_content(self, sep: str = " ") -> str:
        parts = [n.text for n in self.walk() if n.text]
        return sep.join(parts)

    def to_html(self) -> str:
        attrs = []
        if self.classes:
            attrs.append(f'class="{_esc(" ".join(self.classes))}"')
        if self.role:
            attrs.append(f'data-role="{_esc(self.role)}"')
        for key, value in self.attrs.items():
            attrs.append(f'{key}="{_esc(value)}"')
        css = style_text(self.style)
        if css:
            attrs.append(f'style="{_esc(css)}"')
        open_tag = f"<{self.tag}{(' ' + ' '.join(attrs)) if attrs else ''}>"
        if self.tag in VOID_TAGS:
            return open_tag
        inner = _esc(self.text) + "".join(c.to_html() for c in self.children)
        return f"{open_tag}{inner}</{self.tag}>"


def el(
    tag: str,
    *children: Node | None,
    role: str = "",
    cls: str = "",
    style: dict[str, str] | None = None,
    text: Any = "",
    **attrs: str,
) -> Node:
    """Build a node; ``None`` children (suppressed fragments) are dropped."""
    return Node(
        tag=tag,
        role=role,
        classes=cls.split() if cls else [],
        style=dict(style or {}),
        attrs={k.rstrip("_").replace("_", "-"): str(v) for k, v in attrs.items()},
        text="" if text is None else str(text),
        children=[c for c in children if c is not None],
    )


def img(src: str, *, role: str = "", cls: str = "", style: dict[str, str] | None = None, alt: str = "") -> Node:
    return el("img", role=role, cls=cls, style=style, src=src, alt=alt)
