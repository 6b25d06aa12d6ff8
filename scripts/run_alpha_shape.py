#!/usr/bin/env python3
"""
Alpha-shape (concave hull) script.

This script reads point coordinates from a delimited text file, computes
their alpha-shape polygons and writes them as GeoJSON, optionally with a
plot of the outlines over the points.
"""

import argparse
import logging
import sys
import os

# Add src to path if running from source
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import alpha_hull as ah


METRICS = {
    'euclidean': ah.euclidean_distance,
    'haversine': ah.haversine_distance,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Concave hull (alpha shape) of a planar point set'
    )
    parser.add_argument(
        '--data',
        type=str,
        required=True,
        help='Path to a delimited text file with one point per row'
    )
    parser.add_argument(
        '--delimiter',
        type=str,
        default=',',
        help="Field delimiter (default: ',')"
    )
    parser.add_argument(
        '--x-column',
        type=str,
        default='0',
        help='Index or header name of the x / longitude column (default: 0)'
    )
    parser.add_argument(
        '--y-column',
        type=str,
        default='1',
        help='Index or header name of the y / latitude column (default: 1)'
    )
    parser.add_argument(
        '--alpha',
        type=float,
        default=ah.utils.DEFAULT_ALPHA,
        help=f'Tukey fence multiplier (default: {ah.utils.DEFAULT_ALPHA})'
    )
    parser.add_argument(
        '--metric',
        choices=sorted(METRICS),
        default='euclidean',
        help='Distance metric (default: euclidean)'
    )
    parser.add_argument(
        '--output',
        type=str,
        default='Results_alpha_shape',
        help='Output directory (default: Results_alpha_shape)'
    )
    parser.add_argument(
        '--plot',
        action='store_true',
        help='Also save a PNG of the outlines'
    )
    parser.add_argument(
        '--dpi',
        type=int,
        default=300,
        help='Figure DPI (default: 300)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def _column(value: str):
    return int(value) if value.lstrip('-').isdigit() else value


def main(argv=None) -> int:
    """Main entry point for the alpha-shape computation."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    print(f"Loading points from: {args.data}")
    points = ah.io.load_points(args.data, delimiter=args.delimiter,
                               x_column=_column(args.x_column),
                               y_column=_column(args.y_column))
    print(f"Loaded {len(points)} points")

    print(f"Computing alpha shape (alpha={args.alpha}, metric={args.metric})...")
    polygons = ah.compute_alpha_shape_polygons(points, alpha=args.alpha,
                                               distance=METRICS[args.metric])
    if polygons is None:
        print("Alpha shape could not be computed: not enough triangulated points",
              file=sys.stderr)
        return 1

    print(f"Found {len(polygons)} polygon(s)")
    for rank, polygon in enumerate(polygons, start=1):
        print(f"  Polygon {rank}: {len(polygon) - 1} vertices, area {ah.polygon_area(polygon):.6g}")

    ah.utils.ensure_dir_exists(args.output)
    geojson_path = os.path.join(args.output, 'alpha_shape.geojson')
    ah.io.write_geojson(polygons, geojson_path,
                        properties={'alpha': args.alpha, 'metric': args.metric})

    print(f"\nResults saved to: {args.output}")
    print(f"\nGenerated files:")
    print(f"  - alpha_shape.geojson")

    if args.plot:
        ah.visualization.plot_alpha_shape(
            points, polygons,
            output_path=os.path.join(args.output, 'alpha_shape.png'),
            title=f'Alpha shape (alpha={args.alpha})',
            dpi=args.dpi
        )
        print(f"  - alpha_shape.png")

    return 0


if __name__ == '__main__':
    sys.exit(main())
