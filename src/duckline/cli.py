"""Command-line interface for duckline.

Entry point: ``duckline`` command (defined in pyproject.toml).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from duckline.layout.config import (
    ASPECT_RATIOS,
    SIDE_POLICIES,
    LayoutConfig,
    canvas_size,
)
from duckline.layout.engine import compute_layout
from duckline.layout.overlap import has_temporal_overlap
from duckline.parser.dates import INVALID_PERIOD_POLICIES
from duckline.parser.loader import TimelineFormatError, load_items
from duckline.parser.model import TimelineItem
from duckline.render.export import export_slides, prepare_config
from duckline.render.style import THEMES

console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )
    logging.captureWarnings(True)


def _load(path: str) -> list[TimelineItem]:
    try:
        return load_items(path)
    except TimelineFormatError as e:
        raise click.ClickException(f"{path}: {e}") from e


def layout_options(func):
    """Options shared by every command that computes a layout."""
    options = [
        click.option(
            "--aspect",
            default="3:2",
            show_default=True,
            help=f"Canvas aspect ratio ({', '.join(ASPECT_RATIOS)} or W:H).",
        ),
        click.option(
            "--slides",
            type=click.IntRange(min=1),
            default=1,
            show_default=True,
            help="Number of carousel slides.",
        ),
        click.option(
            "--scale",
            "content_scale",
            type=click.FloatRange(min=0, min_open=True),
            default=1.0,
            show_default=True,
            help="Content scale for text and shapes.",
        ),
        click.option("--compress-gaps", is_flag=True, help="Shrink long empty gaps."),
        click.option(
            "--avoid-split",
            is_flag=True,
            help="Keep labels from straddling slide boundaries.",
        ),
        click.option(
            "--no-compact-dates",
            is_flag=True,
            help="Always print full dates on labels.",
        ),
        click.option(
            "--sides",
            "side_policy",
            type=click.Choice(SIDE_POLICIES),
            default="alternate",
            show_default=True,
            help="How labels are split above and below the axis.",
        ),
        click.option(
            "--invalid-period",
            type=click.Choice(INVALID_PERIOD_POLICIES),
            default="clamp",
            show_default=True,
            help="How periods ending before they start are handled.",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(
    aspect: str,
    slides: int,
    content_scale: float,
    compress_gaps: bool,
    avoid_split: bool,
    no_compact_dates: bool,
    side_policy: str,
    invalid_period: str,
) -> LayoutConfig:
    try:
        width, height = canvas_size(aspect)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--aspect") from e
    return LayoutConfig(
        canvas_width=width,
        canvas_height=height,
        total_slices=slides,
        compress_gaps=compress_gaps,
        avoid_split=avoid_split,
        content_scale=content_scale,
        compact_dates=not no_compact_dates,
        side_policy=side_policy,
        invalid_period=invalid_period,
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.version_option(package_name="duckline")
def main(verbose: bool) -> None:
    """Lay out and render timelines of events, periods and notes."""
    setup_logging(verbose)


@main.command()
@click.argument("items_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="Output file; carousels write OUTPUT-1 .. OUTPUT-N.",
)
@click.option(
    "--theme",
    type=click.Choice(sorted(THEMES)),
    default="modern",
    show_default=True,
)
@click.option("--png", is_flag=True, help="Write PNG instead of SVG (needs cairosvg).")
@layout_options
def render(items_file: str, output: str, theme: str, png: bool, **options) -> None:
    """Render ITEMS_FILE to SVG (or PNG), one file per slide."""
    items = _load(items_file)
    config = _build_config(**options)
    try:
        paths = export_slides(items, config, Path(output), THEMES[theme], png=png)
    except ImportError as e:
        raise click.ClickException(
            "PNG export needs cairosvg (pip install 'duckline[png]')"
        ) from e
    for path in paths:
        console.print(f"[green]Wrote[/green] {path}")


@main.command()
@click.argument("items_file", type=click.Path(exists=True, dir_okay=False))
@layout_options
def layout(items_file: str, **options) -> None:
    """Print the computed layout of ITEMS_FILE as JSON."""
    items = _load(items_file)
    config = prepare_config(items, _build_config(**options))
    result = compute_layout(items, config)
    click.echo(json.dumps(result.to_dict(), indent=2))


@main.command()
@click.argument("items_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--invalid-period",
    type=click.Choice(INVALID_PERIOD_POLICIES),
    default="clamp",
    show_default=True,
)
def check(items_file: str, invalid_period: str) -> None:
    """Report whether labels can be kept within slides for ITEMS_FILE."""
    items = _load(items_file)
    if has_temporal_overlap(items, invalid_period):
        click.echo("overlap: items overlap in time, --avoid-split will be ignored")
        raise SystemExit(1)
    click.echo(f"ok: {len(items)} item(s), no temporal overlap")


if __name__ == "__main__":
    main()
