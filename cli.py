#!/usr/bin/env python
"""
Command-line interface for the OSM to GeoJSON converter

Usage:
    python cli.py convert --input overpass.json --output features.geojson
    python cli.py fetch --type relation --id 1234 --output relation.geojson
    python cli.py around --lat 32.08 --lon 34.78 --radius 100
"""

import os
import sys
import json
import argparse

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from loguru import logger
from osm_geojson.converters import ConversionError
from osm_geojson.overpass import OSMCollector


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def write_output(data, output_path=None):
    """Write JSON to a file, or to stdout when no path is given"""
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if not output_path:
        print(text)
        return
    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info(f"✓ Saved: {output_path}")


def cmd_convert(args):
    """Convert a saved Overpass JSON response to a FeatureCollection"""
    setup_logging(args.verbose)

    if not os.path.exists(args.input):
        logger.error(f"Input file not found: {args.input}")
        return 1

    collector = OSMCollector()
    try:
        collection = collector.load_file(args.input, strict=not args.lenient)
    except (ConversionError, ValueError) as e:
        logger.error(f"Failed to convert {args.input}: {e}")
        return 1

    write_output(collection.model_dump(exclude_none=True), args.output)
    return 0


def cmd_fetch(args):
    """Fetch a single element from Overpass and convert it"""
    setup_logging(args.verbose)

    collector = OSMCollector(cache_dir=args.cache_dir)
    try:
        feature = collector.fetch_element(args.type, args.id)
    except (ConversionError, RuntimeError) as e:
        logger.error(f"Failed to fetch {args.type}/{args.id}: {e}")
        return 1

    if feature is None:
        logger.info(f"{args.type}/{args.id} has no usable geometry, nothing written")
        return 0

    write_output(feature.model_dump(exclude_none=True), args.output)
    return 0


def cmd_around(args):
    """Fetch and convert all tagged elements around a location"""
    setup_logging(args.verbose)

    collector = OSMCollector(cache_dir=args.cache_dir)
    try:
        collection = collector.fetch_around(args.lat, args.lon, args.radius)
    except (ConversionError, RuntimeError) as e:
        logger.error(f"Failed to fetch elements around ({args.lat}, {args.lon}): {e}")
        return 1

    write_output(collection.model_dump(exclude_none=True), args.output)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="OSM to GeoJSON converter CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Convert a saved Overpass response:
    python cli.py convert --input overpass.json --output features.geojson

  Fetch one relation:
    python cli.py fetch --type relation --id 1234

  Fetch everything around a point:
    python cli.py around --lat 32.08 --lon 34.78 --radius 100
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert an Overpass JSON file")
    convert_parser.add_argument("--input", "-i", required=True, help="Input Overpass JSON file")
    convert_parser.add_argument("--output", "-o", help="Output GeoJSON file (stdout if not specified)")
    convert_parser.add_argument("--lenient", action="store_true", help="Skip references to missing elements")
    convert_parser.set_defaults(func=cmd_convert)

    # Fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Fetch and convert one element")
    fetch_parser.add_argument("--type", "-t", required=True, choices=["node", "way", "relation"], help="Element type")
    fetch_parser.add_argument("--id", type=int, required=True, help="Element id")
    fetch_parser.add_argument("--output", "-o", help="Output GeoJSON file (stdout if not specified)")
    fetch_parser.add_argument("--cache-dir", help="Directory for cached Overpass responses")
    fetch_parser.set_defaults(func=cmd_fetch)

    # Around command
    around_parser = subparsers.add_parser("around", help="Fetch and convert elements around a location")
    around_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    around_parser.add_argument("--lon", type=float, required=True, help="Longitude")
    around_parser.add_argument("--radius", "-r", type=float, default=150, help="Search radius in meters")
    around_parser.add_argument("--output", "-o", help="Output GeoJSON file (stdout if not specified)")
    around_parser.add_argument("--cache-dir", help="Directory for cached Overpass responses")
    around_parser.set_defaults(func=cmd_around)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
