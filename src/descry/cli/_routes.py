"""``descry routes`` and ``descry route`` — routing table reports."""

import argparse
import logging
import sys

from descry.cli._resolve import build_output, load_component
from descry.config import DescribeOptions
from descry.describe.text import TextDescriptor
from descry.errors import DescryError
from descry.routing.route import RouteCollection

logger = logging.getLogger("descry.cli")


def _load_routes(args: argparse.Namespace) -> RouteCollection:
    try:
        return load_component(args.app, "routes", RouteCollection)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def run_routes(args: argparse.Namespace) -> None:
    """List every route as a table of name, method, scheme, host and path."""
    routes = _load_routes(args)
    if not len(routes):
        print("No routes registered.")
        return

    options = DescribeOptions(show_controllers=args.show_controllers, raw_text=args.raw)
    logger.debug("Listing %d routes from %s", len(routes), args.app)
    TextDescriptor(build_output(args)).describe_route_collection(routes, options)


def run_route(args: argparse.Namespace) -> None:
    """Show the detail table for one named route."""
    routes = _load_routes(args)
    route = routes.get(args.name)
    if route is None:
        print(f"Error: The route {args.name!r} does not exist.", file=sys.stderr)
        raise SystemExit(1)

    options = DescribeOptions(name=args.name, raw_text=args.raw)
    try:
        TextDescriptor(build_output(args)).describe_route(route, options)
    except DescryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
