#!/usr/bin/env python3
"""
RUN_SAMPLE_FRAME: Workbook to Interactive 3D View
=================================================

This demo shows the complete viewer pipeline:
1. Write a sample workbook (or take one from the command line)
2. Load members and nodes
3. Compose the scene (cylinders, endpoint cubes, node points)
4. Print a summary
5. Save an interactive HTML view

The sample is a two-storey portal with a cantilever arm, plus one member
pointing at a missing node and one zero-length member, so both skip
paths show up in the summary.

Run with:
    python demos/run_sample_frame.py
    python demos/run_sample_frame.py path/to/frame.xlsx
"""

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from frame_viewer.loader import load_workbook
from frame_viewer.scene import compose_scene
from frame_viewer.viz.viz3d import plot_scene


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def write_sample_workbook(path: Path) -> Path:
    """Write a small frame workbook with the two expected sheets."""
    nodes = pd.DataFrame({
        'Node': [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
        'X':    [0, 6, 0, 6, 0, 6, 0, 6, 9, 6, 6],
        'Y':    [0, 0, 3, 3, 6, 6, 0, 0, 6, 8, 8],
        'Z':    [0, 0, 0, 0, 0, 0, 4, 4, 0, 0, 0],
    })
    members = pd.DataFrame({
        'Start Node': [1, 2, 3, 4, 3, 5, 1, 2, 7, 6, 6, 4, 10],
        'End Node':   [3, 4, 5, 6, 4, 6, 7, 8, 8, 9, 10, 42, 11],
    })
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine='openpyxl') as writer:
        members.to_excel(writer, sheet_name='Members', index=False)
        nodes.to_excel(writer, sheet_name='Nodes', index=False)
    return path


def main():
    parser = argparse.ArgumentParser(description="Render a frame workbook to HTML")
    parser.add_argument('workbook', nargs='?', help="Workbook to load (default: generated sample)")
    parser.add_argument('--out', default='artifacts/frame.html', help="HTML output path")
    parser.add_argument('--show', action='store_true', help="Open the figure in a browser")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print_header("STEP 1: Workbook")
    if args.workbook:
        path = Path(args.workbook)
    else:
        path = write_sample_workbook(Path('artifacts/sample_frame.xlsx'))
    print(f"  Using: {path}")

    print_header("STEP 2: Load")
    dataset = load_workbook(path)
    print(f"  Loaded {len(dataset.members)} members and {len(dataset.nodes)} nodes")

    print_header("STEP 3: Compose Scene")
    scene = compose_scene(dataset)
    print(f"  Center:     {scene.bounds.center}")
    print(f"  Size:       {scene.bounds.size:.2f}")
    print(f"  Camera at:  {scene.camera.position}")

    print_header("STEP 4: Summary")
    print(f"  Cylinders:  {len(scene.cylinders)}")
    print(f"  Endpoints:  {', '.join(e.node_id for e in scene.endpoints) or '-'}")
    for skipped in scene.skipped:
        print(f"  Skipped {skipped.member.label}: {skipped.reason}")

    print_header("STEP 5: Render")
    plot_scene(scene, outpath=args.out, show=args.show, title=path.stem)


if __name__ == "__main__":
    main()
