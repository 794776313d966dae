"""``descry events`` — registered event listeners, by event or for one event."""

import argparse
import sys

from descry.cli._resolve import build_output, load_component
from descry.config import DescribeOptions
from descry.describe.text import TextDescriptor
from descry.errors import DescryError
from descry.events.registry import ListenerRegistry


def run_events(args: argparse.Namespace) -> None:
    try:
        registry = load_component(args.app, "dispatcher", ListenerRegistry)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    options = DescribeOptions(event=args.event, raw_text=args.raw)
    try:
        TextDescriptor(build_output(args)).describe_event_listeners(registry, options)
    except DescryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
