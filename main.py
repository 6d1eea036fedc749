#!/usr/bin/env python3
"""
Luna - ray/shape intersection demo

Casts a grid of parallel rays along +z at a transformed sphere and prints
its silhouette as ASCII art.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Tuple

from luna import Ray, Sphere, Transform, point, vector, scale, translate, hit

logger = logging.getLogger(__name__)


@dataclass
class DemoSettings:
    """Configuration for the silhouette demo."""
    width: int = 40
    height: int = 20
    extent: float = 3.0  # half-size of the square viewed in world units
    scale: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    translate: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    eye_z: float = -5.0
    hit_char: str = '#'
    miss_char: str = '.'


def render_silhouette(settings: DemoSettings) -> List[str]:
    """Return one string per row, marking rays that hit the sphere."""
    sphere = Sphere()
    sphere.set_transform(Transform.compose(translate(*settings.translate), scale(*settings.scale)))

    rows = []
    hits = 0
    for j in range(settings.height):
        y = settings.extent - 2 * settings.extent * (j + 0.5) / settings.height
        row = []
        for i in range(settings.width):
            x = -settings.extent + 2 * settings.extent * (i + 0.5) / settings.width
            ray = Ray(point(x, y, settings.eye_z), vector(0, 0, 1))
            if hit(sphere.intersect(ray)) is not None:
                row.append(settings.hit_char)
                hits += 1
            else:
                row.append(settings.miss_char)
        rows.append(''.join(row))

    logger.debug("%d of %d rays hit", hits, settings.width * settings.height)
    return rows


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Luna - ray/shape intersection demo',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py
  python main.py --scale 2 1 1 --translate 0.5 0 0
  python main.py --width 80 --height 40 --verbose
        '''
    )

    parser.add_argument('--width', type=int, default=40, help='Columns (default: 40)')
    parser.add_argument('--height', type=int, default=20, help='Rows (default: 20)')
    parser.add_argument('--scale', type=float, nargs=3, default=[1.0, 1.0, 1.0],
                        metavar=('SX', 'SY', 'SZ'), help='Sphere scale (default: 1 1 1)')
    parser.add_argument('--translate', type=float, nargs=3, default=[0.0, 0.0, 0.0],
                        metavar=('TX', 'TY', 'TZ'), help='Sphere offset (default: 0 0 0)')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    settings = DemoSettings(
        width=args.width,
        height=args.height,
        scale=tuple(args.scale),
        translate=tuple(args.translate),
    )

    for row in render_silhouette(settings):
        print(row)

    return 0


if __name__ == '__main__':
    sys.exit(main())
