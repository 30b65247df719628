#!/usr/bin/env python3
"""
polygeom command line - measure a polygon given as text.

Example:
    polygeom "(0, 0); (1, 0); (1, 2); (0, 2)" --loop
"""
import argparse
import logging
import sys
from typing import List, Optional

from polygeom import __version__
from polygeom.errors import ArgumentError
from polygeom.geometry.measure import area, is_rectangular, perimeter
from polygeom.geometry.polygon import Polygon
from polygeom.geometry.rendering import line_loop

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polygeom",
        description="Measure a polygon given as semicolon-separated points.",
    )
    parser.add_argument(
        "polygon",
        help='Points in the form "(x1, y1); (x2, y2); (x3, y3)"',
    )
    parser.add_argument(
        "--loop",
        action="store_true",
        help="Also print the closed x/y coordinate lists used for drawing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function; returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        polygon = Polygon.from_string(args.polygon)
    except ArgumentError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.debug(f"Measuring polygon with {len(polygon)} points")
    print(f"polygon: {polygon}")
    print(f"points: {len(polygon)}")
    print(f"perimeter: {perimeter(polygon):.6g}")
    print(f"area: {area(polygon):.6g}")
    print(f"rectangular: {is_rectangular(polygon)}")

    if args.loop:
        xs, ys = line_loop(polygon)
        print(f"x: {', '.join(str(x) for x in xs)}")
        print(f"y: {', '.join(str(y) for y in ys)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
