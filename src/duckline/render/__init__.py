"""SVG rendering and slide export.

Public API:
- render_svg: draw a layout (or one slide of it) with drawsvg
- export_slides: lay out, render and write one file per slide
- THEMES / Theme: color presets
"""

from duckline.render.export import export_slides, prepare_config
from duckline.render.style import THEMES, Theme
from duckline.render.svg import render_svg

__all__ = ["THEMES", "Theme", "export_slides", "prepare_config", "render_svg"]
