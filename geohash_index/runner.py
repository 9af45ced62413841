"""
Command line runner for geohash-index.

Subcommands:
1. encode    - latitude/longitude to geohash
2. decode    - geohash to center point and box
3. neighbors - the eight neighbors of a geohash
4. circle    - widening-circle region around a geohash

Usage:
    python -m geohash_index.runner encode 42.350072 -71.047656 --precision 12

    # Range-scan keys reliably covering 5 km around a point
    python -m geohash_index.runner circle drt2zm8ej9eg --radius-km 5

    # Use a YAML config for default precision and logging
    python -m geohash_index.runner --config config/geohash.yaml encode 53.3498 -6.2603
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from geohash_index.core import geohash as gh
from geohash_index.core.hash_circle import HashCircle, cover_radius
from geohash_index.core.point import Point
from geohash_index.utils.config import GeohashIndexConfig, get_default_config, load_config
from geohash_index.utils.exceptions import GeohashIndexError
from geohash_index.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def _emit(payload) -> None:
    """Print one JSON document per line on stdout."""
    print(json.dumps(payload))


def run_encode(args: argparse.Namespace, config: GeohashIndexConfig) -> None:
    precision = args.precision if args.precision is not None else config.codec.default_precision
    code = gh.encode(Point(args.latitude, args.longitude), precision)
    logger.info("point_encoded", latitude=args.latitude, longitude=args.longitude, precision=precision)
    print(code)


def run_decode(args: argparse.Namespace, config: GeohashIndexConfig) -> None:
    code = args.geohash.lower()
    box = gh.decode_box(code)
    center = box.center()
    _emit({
        'geohash': code,
        'latitude': center.latitude,
        'longitude': center.longitude,
        'box': {'north': box.north, 'south': box.south, 'east': box.east, 'west': box.west},
    })


def run_neighbors(args: argparse.Namespace, config: GeohashIndexConfig) -> None:
    code = args.geohash.lower()
    _emit({direction.value: value for direction, value in gh.neighbors(code).items()})


def run_circle(args: argparse.Namespace, config: GeohashIndexConfig) -> None:
    code = args.geohash.lower()
    radius_km = args.radius_km if args.radius_km is not None else config.circle.default_radius_km

    if args.expand is not None:
        circle = HashCircle(code)
        for _ in range(args.expand):
            if not circle.expand(config.circle.expand_step):
                break
    elif radius_km is not None:
        circle = cover_radius(code, radius_km, step=config.circle.expand_step)
    else:
        circle = HashCircle(code)

    logger.info(
        "circle_built",
        center_geohash=code,
        precision=circle.precision,
        max_radius_km=circle.max_radius,
        members=len(circle.region),
    )
    _emit({
        'center_geohash': circle.center_geohash,
        'precision': circle.precision,
        'max_radius_km': circle.max_radius,
        'region': [list(m) if isinstance(m, tuple) else m for m in circle.region.export()],
    })


COMMANDS = {
    'encode': run_encode,
    'decode': run_decode,
    'neighbors': run_neighbors,
    'circle': run_circle,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='geohash-index - geohash encoding and proximity regions',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a point at 12 characters
  geohash-index encode 42.350072 -71.047656 --precision 12

  # Neighbors of a cell
  geohash-index neighbors drt2zm8

  # Region reliably covering 5 km around a geohash
  geohash-index circle drt2zm8ej9eg --radius-km 5
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='YAML config file with codec, circle and logging defaults'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default=None,
        help='Logging level (default: from config, else INFO)'
    )

    parser.add_argument(
        '--json-logs',
        action='store_true',
        help='Render logs as JSON'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    encode_parser = subparsers.add_parser('encode', help='Encode latitude/longitude to a geohash')
    encode_parser.add_argument('latitude', type=float)
    encode_parser.add_argument('longitude', type=float)
    encode_parser.add_argument(
        '--precision',
        type=int,
        default=None,
        help='Geohash length (default: from config, else 8)'
    )

    decode_parser = subparsers.add_parser('decode', help='Decode a geohash to its center and box')
    decode_parser.add_argument('geohash')

    neighbors_parser = subparsers.add_parser('neighbors', help='List the eight neighbors of a geohash')
    neighbors_parser.add_argument('geohash')

    circle_parser = subparsers.add_parser('circle', help='Build a widening-circle region')
    circle_parser.add_argument('geohash')
    group = circle_parser.add_mutually_exclusive_group()
    group.add_argument(
        '--radius-km',
        type=float,
        default=None,
        help='Expand until this radius is reliably covered'
    )
    group.add_argument(
        '--expand',
        type=int,
        default=None,
        help='Number of expansions to apply'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else get_default_config()
    except (FileNotFoundError, GeohashIndexError) as e:
        configure_logging(log_level=args.log_level or "INFO", json_output=args.json_logs)
        logger.error("config_failed", error=str(e))
        return 1

    configure_logging(
        log_level=args.log_level or config.logging.level,
        log_file=config.logging.log_file,
        json_output=args.json_logs or config.logging.json_output,
    )

    try:
        COMMANDS[args.command](args, config)
        return 0
    except GeohashIndexError as e:
        logger.error("command_failed", command=args.command, error=str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
