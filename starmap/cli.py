"""starmap command line entry point.

Generates galaxy maps as JSON and inspects saved map files.
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from .engine.map_generator import generate_map
from .errors import MapConfigError
from .models.config import MapConfig
from .utils.constants import RNG_SEED_DEFAULT
from .utils.serialization import load_map_file, save_map

logger = logging.getLogger(__name__)


def _parse_seed(value: str) -> int | str:
    """Numeric seeds stay integers; anything else is hashed as text."""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starmap",
        description="starmap - Deterministic galaxy map generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate --seed 12345 --map-size 5 --density-min 3 --density-max 7
  %(prog)s generate --seed andromeda --output maps/andromeda.json
  %(prog)s inspect maps/andromeda.json
        """,
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (shows per-sector placement shortfalls)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate a map and print or save it as JSON")
    generate.add_argument(
        "--seed",
        type=_parse_seed,
        default=RNG_SEED_DEFAULT,
        help=f"Integer or text seed (default: {RNG_SEED_DEFAULT})",
    )
    generate.add_argument("--map-size", type=int, default=5, help="Sectors per side, 2-9 (default: 5)")
    generate.add_argument(
        "--density-min", type=int, default=3, help="Minimum stars per sector, 0-9 (default: 3)"
    )
    generate.add_argument(
        "--density-max", type=int, default=7, help="Maximum stars per sector, 0-9 (default: 7)"
    )
    generate.add_argument("--output", "-o", metavar="FILE", help="Write JSON to FILE instead of stdout")

    inspect = subparsers.add_parser("inspect", help="Load a saved map and report its shape")
    inspect.add_argument("file", metavar="FILE", help="Map JSON written by 'generate'")
    inspect.add_argument(
        "--map-size",
        type=int,
        default=None,
        help="Original sectors per side (default: read from the file)",
    )

    return parser


def _run_generate(args) -> int:
    try:
        config = MapConfig(
            seed=args.seed,
            map_size=args.map_size,
            density_min=args.density_min,
            density_max=args.density_max,
        )
    except MapConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    generated = generate_map(config)

    if args.output:
        path = save_map(generated, args.output)
        print(
            f"Saved {len(generated.stars)} stars and {len(generated.wormholes)} wormholes to {path}"
        )
    else:
        print(json.dumps(generated.to_dict(), indent=2))

    if not generated.connected:
        print("Warning: generated map is not fully connected", file=sys.stderr)
    return 0


def _run_inspect(args) -> int:
    try:
        model = load_map_file(args.file, args.map_size)
    except FileNotFoundError:
        print(f"Error: File {args.file} not found.", file=sys.stderr)
        return 1
    except (ValueError, ValidationError) as e:
        # MapConfigError and JSON decode errors are both ValueErrors
        print(f"Error loading map: {e}", file=sys.stderr)
        return 1

    stats = model.stats()
    components = model.connected_components()
    print(f"Seed:       {model.seed}")
    print(f"Sectors:    {stats['sectors']}")
    print(f"Stars:      {stats['stars']}")
    print(f"Wormholes:  {stats['wormholes']}")
    print(f"Avg/sector: {stats['average_stars_per_sector']:.2f}")
    print(f"Connected:  {'yes' if len(components) <= 1 else f'no ({len(components)} components)'}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    if args.command == "generate":
        return _run_generate(args)
    return _run_inspect(args)


if __name__ == "__main__":
    sys.exit(main())
