"""``descry container`` — service container reports.

Without options, lists public services. ``--id`` describes one
service, ``--tags`` groups services by tag, ``--parameters`` lists
parameters and ``--parameter`` shows a single value.
"""

import argparse
import sys

from descry.cli._resolve import build_output, load_component
from descry.config import DescribeOptions
from descry.container.builder import ContainerBuilder
from descry.describe.text import TextDescriptor
from descry.errors import DescryError


def run_container(args: argparse.Namespace) -> None:
    """Describe the container of the resolved kernel."""
    try:
        builder = load_component(args.app, "container", ContainerBuilder)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    options = DescribeOptions(
        id=args.id,
        tag=args.tag,
        parameter=args.parameter,
        group_by="tags" if args.tags else None,
        show_private=args.show_private,
        raw_text=args.raw,
    )
    descriptor = TextDescriptor(build_output(args))

    try:
        if args.parameters:
            descriptor.describe_container_parameters(builder.parameters, options)
        else:
            descriptor.describe(builder, options)
    except DescryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
