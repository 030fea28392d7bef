#!/usr/bin/env python3
"""
Run the palette pipeline over a directory of images.

Each image gets a `<stem>-palette.txt` report and, with --swatches, a
`<stem>-palette.png` swatch strip next to it in the output directory.
"""

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from analyze import render, render_swatches, run_pipeline
from sample_pixels import ImageLoadError

IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.webp', '.gif'}


@dataclass
class ImageResult:
    name: str
    color_count: int = 0
    hexes: tuple = ()
    elapsed: float = 0.0
    error: Optional[str] = None


def find_images(directory: Path) -> list[Path]:
    """Image files directly inside directory, by extension (any case)."""
    return sorted(
        path for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS
    )


def process_image(image_path: Path, output_dir: Path, swatches: bool = False) -> ImageResult:
    """Analyze one image and write its outputs; failures are recorded, not raised."""
    start = time.perf_counter()
    try:
        analysis = run_pipeline(image_path)
        report_path = output_dir / f"{image_path.stem}-palette.txt"
        report_path.write_text(render(analysis) + "\n", encoding='utf-8')
        if swatches:
            render_swatches(analysis.colors, str(output_dir / f"{image_path.stem}-palette.png"))
    except (ImageLoadError, OSError) as e:
        return ImageResult(image_path.name, elapsed=time.perf_counter() - start,
                           error=f"{type(e).__name__}: {e}")

    return ImageResult(
        image_path.name,
        color_count=len(analysis.colors),
        hexes=tuple(c.hex for c in analysis.colors),
        elapsed=time.perf_counter() - start,
    )


def summarize(results: list[ImageResult], elapsed: float) -> str:
    succeeded = [r for r in results if r.error is None]
    failed = [r for r in results if r.error is not None]

    lines = [f"Completed: {len(succeeded)}/{len(results)} succeeded in {elapsed:.2f}s"]
    if succeeded:
        average_colors = sum(r.color_count for r in succeeded) / len(succeeded)
        lines.append(f"Average: {elapsed / len(results):.2f}s and {average_colors:.1f} colors per image")
    if failed:
        lines.append(f"Failed ({len(failed)}):")
        lines.extend(f"  - {r.name}: {r.error}" for r in failed)
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Extract palettes from every image in a directory.'
    )
    parser.add_argument('--input', '-i', required=True, help='Directory containing images')
    parser.add_argument('--output', '-o', required=True, help='Directory for reports')
    parser.add_argument('--swatches', action='store_true', help='Also write PNG swatch strips')

    args = parser.parse_args(argv)

    input_dir = Path(args.input)
    output_dir = Path(args.output)

    if not input_dir.is_dir():
        print(f"Error: Input directory not found: {input_dir}", file=sys.stderr)
        return 2

    images = find_images(input_dir)
    if not images:
        print(f"No images found in {input_dir}", file=sys.stderr)
        return 2

    output_dir.mkdir(parents=True, exist_ok=True)

    results = []
    batch_start = time.perf_counter()
    for i, image_path in enumerate(images, 1):
        result = process_image(image_path, output_dir, swatches=args.swatches)
        results.append(result)

        prefix = f"[{i}/{len(images)}] {result.name}"
        if result.error:
            print(f"{prefix} → ERROR: {result.error}", file=sys.stderr)
        else:
            print(f"{prefix} → {' '.join(result.hexes) or 'no colors'} ({result.elapsed:.2f}s)")

    print()
    print(summarize(results, time.perf_counter() - batch_start))

    return 1 if any(r.error for r in results) else 0


if __name__ == '__main__':
    sys.exit(main())
