"""Layout configuration and canvas presets."""

from __future__ import annotations

__all__ = ["ASPECT_RATIOS", "LayoutConfig", "SIDE_POLICIES", "canvas_size"]

from dataclasses import dataclass

from duckline.layout.constants import (
    BASE_CANVAS_EDGE,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
)
from duckline.parser.dates import INVALID_PERIOD_POLICIES

SIDE_POLICIES = ("alternate", "balanced", "top")

# Label -> (width, height) ratio terms.
ASPECT_RATIOS: dict[str, tuple[int, int]] = {
    "16:9": (16, 9),
    "3:2": (3, 2),
    "4:3": (4, 3),
    "1:1": (1, 1),
    "4:5": (4, 5),
    "9:16": (9, 16),
}


def canvas_size(aspect: str) -> tuple[int, int]:
    """Canvas (width, height) for an aspect label such as ``"3:2"``.

    The long edge is always 1200px.  Unlisted labels of the form
    ``"W:H"`` are accepted too.
    """
    if aspect in ASPECT_RATIOS:
        w, h = ASPECT_RATIOS[aspect]
    else:
        try:
            w_text, h_text = aspect.split(":")
            w, h = int(w_text), int(h_text)
        except ValueError as e:
            raise ValueError(f"Invalid aspect ratio {aspect!r}") from e
        if w <= 0 or h <= 0:
            raise ValueError(f"Invalid aspect ratio {aspect!r}")

    if w >= h:
        return BASE_CANVAS_EDGE, round(BASE_CANVAS_EDGE * h / w)
    return round(BASE_CANVAS_EDGE * w / h), BASE_CANVAS_EDGE


@dataclass(frozen=True)
class LayoutConfig:
    """Everything besides the items that a layout pass depends on.

    ``canvas_width`` is the width of one slide; the full layout spans
    ``canvas_width * total_slices`` pixels.
    """

    canvas_width: float = DEFAULT_CANVAS_WIDTH
    canvas_height: float = DEFAULT_CANVAS_HEIGHT
    total_slices: int = 1
    compress_gaps: bool = False
    avoid_split: bool = False
    content_scale: float = 1.0
    compact_dates: bool = True
    side_policy: str = "alternate"
    invalid_period: str = "clamp"

    def __post_init__(self) -> None:
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got "
                f"{self.canvas_width}x{self.canvas_height}"
            )
        if self.total_slices < 1:
            raise ValueError(f"total_slices must be >= 1, got {self.total_slices}")
        if self.content_scale <= 0:
            raise ValueError(
                f"content_scale must be positive, got {self.content_scale}"
            )
        if self.side_policy not in SIDE_POLICIES:
            raise ValueError(
                f"Unknown side policy {self.side_policy!r}, "
                f"expected one of {', '.join(SIDE_POLICIES)}"
            )
        if self.invalid_period not in INVALID_PERIOD_POLICIES:
            raise ValueError(
                f"Unknown invalid_period policy {self.invalid_period!r}, "
                f"expected one of {', '.join(INVALID_PERIOD_POLICIES)}"
            )

    @property
    def full_width(self) -> float:
        return self.canvas_width * self.total_slices

    @property
    def carousel(self) -> bool:
        return self.total_slices > 1
