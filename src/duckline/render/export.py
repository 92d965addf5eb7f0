"""Single-image and carousel export.

One layout pass is shared by every slide.  Slides are rendered and
written one after another, never concurrently.
"""

from __future__ import annotations

__all__ = ["export_slides", "prepare_config", "slide_paths"]

import dataclasses
import logging
import warnings
from pathlib import Path

from duckline.layout.config import LayoutConfig
from duckline.layout.engine import compute_layout
from duckline.layout.overlap import has_temporal_overlap
from duckline.parser.model import TimelineItem
from duckline.render.style import THEMES, Theme
from duckline.render.svg import render_svg

logger = logging.getLogger(__name__)

PNG_SCALE = 2


def prepare_config(items: list[TimelineItem], config: LayoutConfig) -> LayoutConfig:
    """Turn off slide snapping when the dataset makes it unreliable.

    Snapping labels of temporally overlapping items can push them back
    and forth across a boundary, so the request is dropped with a warning.
    """
    if not (config.avoid_split and config.carousel):
        return config
    if not has_temporal_overlap(items, config.invalid_period):
        return config
    warnings.warn(
        "Items overlap in time; keeping items within slides is disabled "
        "for this timeline",
        stacklevel=2,
    )
    return dataclasses.replace(config, avoid_split=False)


def slide_paths(output: Path, total_slices: int, suffix: str = ".svg") -> list[Path]:
    """Output file per slide: ``out.svg`` or ``out-1.svg`` .. ``out-N.svg``."""
    output = Path(output)
    if total_slices == 1:
        return [output.with_suffix(suffix)]
    return [
        output.with_name(f"{output.stem}-{i + 1}{suffix}")
        for i in range(total_slices)
    ]


def export_slides(
    items: list[TimelineItem],
    config: LayoutConfig,
    output: str | Path,
    theme: Theme = THEMES["modern"],
    png: bool = False,
) -> list[Path]:
    """Lay out *items* and write one SVG (or PNG) per slide.

    PNG output needs the optional ``cairosvg`` dependency; an
    ``ImportError`` is raised when it is missing.
    """
    config = prepare_config(items, config)
    layout = compute_layout(items, config)

    if png:
        import cairosvg

    paths = slide_paths(Path(output), config.total_slices, ".png" if png else ".svg")
    for i, path in enumerate(paths):
        slide = i if config.carousel else None
        svg = render_svg(items, layout, theme, slide=slide)
        path.parent.mkdir(parents=True, exist_ok=True)
        if png:
            cairosvg.svg2png(
                bytestring=svg.encode(), write_to=str(path), scale=PNG_SCALE
            )
        else:
            path.write_text(svg)
        logger.info("Wrote %s", path)
    return paths
