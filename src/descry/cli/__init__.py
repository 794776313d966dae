"""Descry CLI — text reports for routes, services and event listeners.

Entry point registered as ``descry`` in ``pyproject.toml``::

    [project.scripts]
    descry = "descry.cli:main"
"""

import argparse
import sys


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "app",
        help="Import string (e.g. myapp:kernel)",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Strip inline markup from text output",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Never emit ANSI color codes",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``descry`` command."""
    parser = argparse.ArgumentParser(
        prog="descry",
        description="descry — Text reports for routes, services and event listeners.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- descry routes ----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    _add_common(routes_parser)
    routes_parser.add_argument(
        "--show-controllers",
        action="store_true",
        help="Add a Controller column",
    )

    # -- descry route -----------------------------------------------------
    route_parser = subparsers.add_parser("route", help="Show one route in detail")
    _add_common(route_parser)
    route_parser.add_argument("name", help="Route name")

    # -- descry container -------------------------------------------------
    container_parser = subparsers.add_parser("container", help="Describe the service container")
    _add_common(container_parser)
    container_parser.add_argument(
        "--show-private",
        action="store_true",
        help="Include private services",
    )
    container_parser.add_argument("--tag", default=None, help="Only services carrying this tag")
    container_parser.add_argument("--id", default=None, help="Describe a single service")
    container_parser.add_argument(
        "--tags",
        action="store_true",
        help="Group services by tag",
    )
    container_parser.add_argument(
        "--parameters",
        action="store_true",
        help="List container parameters",
    )
    container_parser.add_argument(
        "--parameter",
        default=None,
        help="Show a single container parameter",
    )

    # -- descry events ----------------------------------------------------
    events_parser = subparsers.add_parser("events", help="List registered event listeners")
    _add_common(events_parser)
    events_parser.add_argument("--event", default=None, help="Only this event")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from descry.cli._routes import run_routes

        run_routes(args)
    elif args.command == "route":
        from descry.cli._routes import run_route

        run_route(args)
    elif args.command == "container":
        from descry.cli._container import run_container

        run_container(args)
    elif args.command == "events":
        from descry.cli._events import run_events

        run_events(args)
