"""Command-line entry point for latlng-bounds."""

import argparse
import logging
import sys

from domain.profiles import list_regions, load_region
from geo.bounds import LatLngBounds
from geo.builder import bounds_from_lat_lngs
from geo.lat_lng import LatLng
from shared.constants import DEFAULT_TILE_COUNT_MAX_ZOOM, LOG_FORMAT
from tiles.tile_bounds import bounds_from_tile

logger = logging.getLogger(__name__)


def setup_logging(*, verbose: bool = False) -> None:
    """Configure logging to stderr; stdout carries command output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _print_bounds(bounds: LatLngBounds) -> None:
    print(bounds)
    span = bounds.span
    print(f'span: latitude={span.latitude} longitude={span.longitude}')
    print(f'center: {bounds.center.latitude}, {bounds.center.longitude}')


def _cmd_tile(args: argparse.Namespace) -> int:
    _print_bounds(bounds_from_tile(args.zoom, args.x, args.y))
    return 0


def _cmd_fit(args: argparse.Namespace) -> int:
    points = [LatLng.parse(text) for text in args.points]
    _print_bounds(bounds_from_lat_lngs(points))
    return 0


def _cmd_region(args: argparse.Namespace) -> int:
    if args.name is None:
        for name in list_regions():
            print(name)
        return 0
    region = load_region(args.name)
    _print_bounds(region.bounds)
    print(f'zoom: {region.min_zoom}..{region.max_zoom}')
    print(f'tiles: {region.tile_count(args.max_zoom_cap)}')
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='latlng-bounds',
        description='Antimeridian-aware latitude/longitude bounds',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    tile = sub.add_parser('tile', help='bounds of a Web Mercator tile')
    tile.add_argument('zoom', type=int)
    tile.add_argument('x', type=int)
    tile.add_argument('y', type=int)
    tile.set_defaults(func=_cmd_tile)

    fit = sub.add_parser('fit', help='bounds covering points given as LAT,LNG')
    fit.add_argument('points', nargs='+', metavar='LAT,LNG')
    fit.set_defaults(func=_cmd_fit)

    region = sub.add_parser('region', help='show a stored region, or list regions')
    region.add_argument('name', nargs='?')
    region.add_argument(
        '--max-zoom-cap',
        type=int,
        default=DEFAULT_TILE_COUNT_MAX_ZOOM,
        help='zoom used in place of an unbounded max zoom when counting tiles',
    )
    region.set_defaults(func=_cmd_region)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    try:
        return args.func(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error('%s', e)
        return 1


if __name__ == '__main__':
    sys.exit(main())
