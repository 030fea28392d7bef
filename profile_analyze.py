#!/usr/bin/env python3
"""Profile the extraction pipeline to identify performance bottlenecks."""

import cProfile
import io
import pstats
import sys
import time
from pathlib import Path

from extract_colors import assign_percentages, build_clusters, select_distinct, select_palette
from sample_pixels import sample_pixels
from semantic_colors import identify_semantic_colors


def profile_image(image_path: str, verbose: bool = True):
    """Time each stage of the pipeline for a single image."""

    if verbose:
        print(f"\n{'='*60}")
        print(f"Profiling: {Path(image_path).name}")
        print(f"{'='*60}")

    timings = {}

    start = time.perf_counter()
    buffer = sample_pixels(image_path)
    timings['sample_pixels'] = time.perf_counter() - start

    start = time.perf_counter()
    clusters = build_clusters(buffer.data)
    timings['build_clusters'] = time.perf_counter() - start

    start = time.perf_counter()
    colors = assign_percentages(select_palette(select_distinct(clusters)))
    timings['select'] = time.perf_counter() - start

    start = time.perf_counter()
    identify_semantic_colors(colors)
    timings['semantic'] = time.perf_counter() - start

    total = sum(timings.values())
    timings['total'] = total

    if verbose:
        print(f"  Sample size: {buffer.width}x{buffer.height} (scale {buffer.scale:.3f})")
        print(f"  Clusters: {len(clusters):,}")
        print(f"  Palette colors: {len(colors)}")
        print(f"\nStage timings:")
        for stage, t in timings.items():
            pct = (t / total * 100) if stage != 'total' and total > 0 else 100
            print(f"  {stage:20s}: {t:6.3f}s ({pct:5.1f}%)")

    return timings, len(clusters)


def detailed_profile(image_path: str) -> str:
    """Run cProfile on build_clusters (the main compute stage)."""

    print(f"\n{'='*60}")
    print("Detailed profile of build_clusters()")
    print(f"{'='*60}")

    # Sample first (outside profiling)
    buffer = sample_pixels(image_path)

    profiler = cProfile.Profile()
    profiler.enable()
    build_clusters(buffer.data)
    profiler.disable()

    stream = io.StringIO()
    stats = pstats.Stats(profiler, stream=stream)
    stats.sort_stats('cumulative')
    stats.print_stats(30)  # Top 30 functions

    print(stream.getvalue())

    return stream.getvalue()


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv
    images_dir = Path(args[0]) if args else Path(__file__).parent / "source_images"
    images = sorted(p for p in images_dir.glob("*") if p.suffix.lower() in {'.jpg', '.jpeg', '.png', '.webp'})

    if not images:
        print(f"No images found in {images_dir}/")
        return 1

    print(f"Found {len(images)} test images")

    all_timings = []
    for img in images:
        timings, cluster_count = profile_image(str(img))
        all_timings.append((img.name, timings, cluster_count))

    # Summary
    print(f"\n{'='*60}")
    print("SUMMARY")
    print(f"{'='*60}")
    print(f"{'Image':<35} {'Clusters':>10} {'Total':>10}")
    print("-" * 60)
    for name, timings, cluster_count in all_timings:
        print(f"{name:<35} {cluster_count:>10,} {timings['total']:>9.3f}s")

    detailed_profile(str(images[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
