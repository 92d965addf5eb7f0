"""Color themes for the SVG renderer."""

from __future__ import annotations

__all__ = ["THEMES", "Theme"]

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    name: str
    background: str
    primary: str
    secondary: str
    accent: str
    text: str
    muted: str
    font_family: str = "Inter, Helvetica, Arial, sans-serif"


THEMES: dict[str, Theme] = {
    "modern": Theme(
        name="Modern Clean",
        background="#ffffff",
        primary="#3b82f6",
        secondary="#eff6ff",
        accent="#1e40af",
        text="#1e293b",
        muted="#64748b",
    ),
    "midnight": Theme(
        name="Midnight Sky",
        background="#0f172a",
        primary="#38bdf8",
        secondary="#1e293b",
        accent="#0ea5e9",
        text="#f8fafc",
        muted="#94a3b8",
    ),
    "rosegold": Theme(
        name="Rose Gold",
        background="#fff7ed",
        primary="#fb923c",
        secondary="#fed7aa",
        accent="#ea580c",
        text="#431407",
        muted="#9a3412",
    ),
    "emerald": Theme(
        name="Emerald Forest",
        background="#f0fdf4",
        primary="#10b981",
        secondary="#a7f3d0",
        accent="#047857",
        text="#064e3b",
        muted="#065f46",
    ),
}
