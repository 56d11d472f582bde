"""CLI entrypoint for artscope."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from artscope.api.browse_api import artworks_by_ids, featured_exhibitions, random_artists
from artscope.config.loader import Settings, load_settings
from artscope.errors import ArtscopeError
from artscope.output.cards import build_cards, render_json, render_markdown
from artscope.retrieval.fetcher import ApiFetcher
from artscope.retrieval.iiif import build_image_url
from artscope.retrieval.query_urls import ResourceKind, build_query_url
from artscope.resources.assembler import ResourceAssembler
from artscope.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _load_settings(args: argparse.Namespace) -> Settings:
    config_path = Path(args.config) if getattr(args, "config", None) else None
    return load_settings(config_path)


def _print_cards(args: argparse.Namespace, kind: ResourceKind, resources, settings: Settings, heading: str) -> None:
    cards = build_cards(kind, resources, placeholder_url=settings.images.placeholder_url)
    if args.format == "json":
        print(render_json(cards))
    else:
        print(render_markdown(cards, heading=heading))


def cmd_featured(args: argparse.Namespace) -> None:
    """List featured exhibitions."""
    settings = _load_settings(args)
    with ApiFetcher(settings.api) as fetcher:
        assembler = ResourceAssembler(fetcher, settings)
        exhibitions = asyncio.run(featured_exhibitions(assembler, limit=args.limit))
    _print_cards(args, ResourceKind.EXHIBIT, exhibitions, settings, "Featured Exhibitions")


def cmd_artists(args: argparse.Namespace) -> None:
    """List a page of artists with their known works."""
    settings = _load_settings(args)
    with ApiFetcher(settings.api) as fetcher:
        assembler = ResourceAssembler(fetcher, settings)
        artists = asyncio.run(random_artists(assembler, page=args.page))
    _print_cards(args, ResourceKind.ARTIST, artists, settings, "Artists")


def cmd_artworks(args: argparse.Namespace) -> None:
    """List artworks by id."""
    settings = _load_settings(args)
    with ApiFetcher(settings.api) as fetcher:
        assembler = ResourceAssembler(fetcher, settings)
        artworks = asyncio.run(artworks_by_ids(assembler, args.ids))
    _print_cards(args, ResourceKind.ARTWORK, artworks, settings, "Artworks")


def cmd_query_url(args: argparse.Namespace) -> None:
    """Print the REST URL for a kind and its characteristics."""
    settings = _load_settings(args)
    print(build_query_url(
        args.kind,
        args.characteristics,
        required_fields_only=not args.all_fields,
        base_url=settings.api.base_url,
    ))


def cmd_image_url(args: argparse.Namespace) -> None:
    """Print a IIIF image URL."""
    region_x, region_y, region_width, region_height = args.region
    print(build_image_url(
        args.base_url,
        args.image_id,
        width=args.width,
        height=args.height,
        region_x=region_x,
        region_y=region_y,
        region_width=region_width,
        region_height=region_height,
        rotation=args.rotation,
        mirrored=args.mirrored,
    ))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artscope",
        description="Browse the Art Institute of Chicago collection API",
    )
    parser.add_argument("--config", help="Path to config YAML (default: config/artscope.yaml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    featured_parser = subparsers.add_parser("featured", help="List featured exhibitions")
    featured_parser.add_argument("--limit", type=int, default=None, help="Number of exhibitions")
    featured_parser.add_argument("--format", choices=["md", "json"], default="md")
    featured_parser.set_defaults(func=cmd_featured)

    artists_parser = subparsers.add_parser("artists", help="List a page of artists")
    artists_parser.add_argument("--page", type=int, default=None, help="Page number (random if omitted)")
    artists_parser.add_argument("--format", choices=["md", "json"], default="md")
    artists_parser.set_defaults(func=cmd_artists)

    artworks_parser = subparsers.add_parser("artworks", help="List artworks by id")
    artworks_parser.add_argument("ids", nargs="+", help="Artwork ids")
    artworks_parser.add_argument("--format", choices=["md", "json"], default="md")
    artworks_parser.set_defaults(func=cmd_artworks)

    query_parser = subparsers.add_parser("query-url", help="Print a REST query URL")
    query_parser.add_argument("kind", choices=[kind.value for kind in ResourceKind])
    query_parser.add_argument("characteristics", nargs="+", help="Ids or search value")
    query_parser.add_argument("--all-fields", action="store_true", help="Omit the fields= projection")
    query_parser.set_defaults(func=cmd_query_url)

    image_parser = subparsers.add_parser("image-url", help="Print a IIIF image URL")
    image_parser.add_argument("base_url", help="IIIF base URL, e.g. https://www.artic.edu/iiif/2")
    image_parser.add_argument("image_id")
    image_parser.add_argument("--width", type=int, default=None)
    image_parser.add_argument("--height", type=int, default=None)
    image_parser.add_argument(
        "--region",
        type=float,
        nargs=4,
        default=[0, 0, 100, 100],
        metavar=("X", "Y", "W", "H"),
        help="Crop region in percent",
    )
    image_parser.add_argument("--rotation", type=float, default=0)
    image_parser.add_argument("--mirrored", action="store_true")
    image_parser.set_defaults(func=cmd_image_url)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        args.func(args)
    except ArtscopeError as e:
        logger.error(f"{args.command} failed: {e}", exc_info=args.verbose)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        logger.error(f"Config not found: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
