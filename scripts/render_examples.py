#!/usr/bin/env python3
"""Batch render all example timelines to SVG (and PNG when possible).

Each .json file under examples/ is rendered as a single image and as a
three-slide carousel.  Outputs go to /tmp/duckline_renders/.

Usage:
    python scripts/render_examples.py
"""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from duckline.layout.config import LayoutConfig, canvas_size  # noqa: E402
from duckline.parser.loader import TimelineFormatError, load_items  # noqa: E402
from duckline.render.export import export_slides  # noqa: E402
from duckline.render.style import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/duckline_renders")
EXAMPLES_DIR = project_root / "examples"


def render_file(
    json_path: Path,
    output_dir: Path,
    *,
    slides: int = 1,
    compress_gaps: bool = False,
    avoid_split: bool = False,
    theme: str = "modern",
    png: bool = False,
) -> tuple[str, list[str]]:
    """Load, lay out and render one example file.

    Returns (name, list_of_issues).
    """
    name = json_path.stem if slides == 1 else f"{json_path.stem}_carousel"
    issues: list[str] = []

    try:
        items = load_items(json_path)
    except TimelineFormatError as e:
        return name, [f"PARSE ERROR: {e}"]

    width, height = canvas_size("3:2")
    config = LayoutConfig(
        canvas_width=width,
        canvas_height=height,
        total_slices=slides,
        compress_gaps=compress_gaps,
        avoid_split=avoid_split,
    )

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        try:
            export_slides(items, config, output_dir / f"{name}.svg", THEMES[theme])
        except Exception as e:
            return name, [f"RENDER ERROR: {e}"]
    issues.extend(str(w.message) for w in caught)

    if png:
        try:
            export_slides(
                items, config, output_dir / f"{name}.png", THEMES[theme], png=True
            )
        except ImportError:
            issues.append("cairosvg not available, skipping PNG")
        except Exception as e:
            issues.append(f"PNG conversion error: {e}")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render the example timelines")
    parser.add_argument(
        "--compress-gaps", action="store_true", help="Compress long empty gaps"
    )
    parser.add_argument(
        "--avoid-split", action="store_true",
        help="Keep carousel labels within slides",
    )
    parser.add_argument("--theme", default="modern", choices=sorted(THEMES))
    parser.add_argument("--png", action="store_true", help="Also write PNG files")
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = sorted(EXAMPLES_DIR.glob("*.json"))
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    any_errors = False
    for json_path in all_files:
        for slides in (1, 3):
            name, issues = render_file(
                json_path, OUTPUT_DIR, slides=slides,
                compress_gaps=args.compress_gaps,
                avoid_split=args.avoid_split,
                theme=args.theme,
                png=args.png,
            )
            status = "OK" if not issues else "ISSUES"
            if any("ERROR" in i for i in issues):
                status = "FAIL"
                any_errors = True

            print(f"  {name:<32}  [{status}]")
            for issue in issues:
                print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
