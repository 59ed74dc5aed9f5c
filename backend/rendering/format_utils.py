"""Consistent display formatting for listing facts. Never render raw floats."""
from __future__ import annotations

from typing import Any


def format_count(value: Any) -> str:
    """2.0 -> "2", 3.5 -> "3.5", 1234567.5 -> "1234567.5", None -> "0"."""
    if value is None or value == "":
        return "0"
    try:
        n = float(value)
    except (TypeError, ValueError):
        return str(value).strip()
    if n.is_integer():
        return str(int(n))
    return f"{n:.15g}"


def split_address(address: str) -> tuple[str, str]:
    """Street line and the remainder ("8800 Sunset Blvd", "LA")."""
    parts = (address or "").split(",")
    head = parts[0].strip()
    rest = ", ".join(p.strip() for p in parts[1:])
    return head, rest
