"""
Command-line interface for the unit converter.

Usage:
    python -m iconvert convert 1 km m [--category Distance] [--json]
    python -m iconvert units [--category Mass] [--json]
    python -m iconvert form [--category Mass] [--value 2] [--output-units g]
    python -m iconvert make-example [--output example_requests.json]
    python -m iconvert batch --input example_requests.json [--output results.json]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from iconvert import __version__
from iconvert.cli.readable_output import format_categories, format_form, format_result
from iconvert.config import MAX_PRECISION, Settings, load_settings
from iconvert.form import ConversionForm
from iconvert.models.inputs import ConversionRequest
from iconvert.runner import describe_registry, run_batch, run_conversion
from iconvert.units.registry import UnitConversionError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="iconvert",
        description="Convert values between units of distance and mass.",
    )
    parser.add_argument("--version", action="version", version=f"iconvert {__version__}")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: $ICONVERT_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # convert command
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a single value",
    )
    convert_parser.add_argument("value", type=float, help="Value to convert")
    convert_parser.add_argument("from_unit", help="Source unit symbol, e.g. km")
    convert_parser.add_argument("to_unit", help="Target unit symbol, e.g. m")
    convert_parser.add_argument(
        "--category", "-c",
        default=None,
        help="Category (Distance, Mass); inferred from the units if omitted",
    )
    convert_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    convert_parser.add_argument(
        "--precision", "-p",
        type=int,
        choices=range(0, MAX_PRECISION + 1),
        metavar="N",
        default=None,
        help="Significant digits in readable output (default: $ICONVERT_PRECISION or 6)",
    )

    # units command
    units_parser = subparsers.add_parser(
        "units",
        help="List categories and their units",
    )
    units_parser.add_argument(
        "--category", "-c",
        default=None,
        help="Only list this category",
    )
    units_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the listing as JSON",
    )

    # form command
    form_parser = subparsers.add_parser(
        "form",
        help="Show the conversion form after a sequence of edits",
    )
    form_parser.add_argument(
        "--category", "-c",
        default=None,
        help="Category to switch to (default: $ICONVERT_DEFAULT_CATEGORY or Distance)",
    )
    value_group = form_parser.add_mutually_exclusive_group()
    value_group.add_argument(
        "--value", "-v",
        type=float,
        default=0.0,
        help="Value typed into the input field (default: 0)",
    )
    value_group.add_argument(
        "--output-value",
        type=float,
        default=None,
        help="Value typed into the converted field instead",
    )
    form_parser.add_argument("--input-units", default=None, help="Input unit picker")
    form_parser.add_argument("--output-units", default=None, help="Output unit picker")
    form_parser.add_argument(
        "--swap",
        action="store_true",
        help="Swap the two unit pickers",
    )
    form_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the form state as JSON",
    )
    form_parser.add_argument(
        "--precision", "-p",
        type=int,
        choices=range(0, MAX_PRECISION + 1),
        metavar="N",
        default=None,
        help="Significant digits in readable output",
    )

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example batch request file",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=Path("example_requests.json"),
        help="Output path for example file (default: example_requests.json)",
    )

    # batch command
    batch_parser = subparsers.add_parser(
        "batch",
        help="Convert a JSON list of requests",
    )
    batch_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to JSON file with a list of conversion requests",
    )
    batch_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Path to save JSON results (prints to stdout if not specified)",
    )

    return parser


def configure_logging(level: str) -> None:
    """Send log records to stderr at ``level``."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def example_requests() -> list[ConversionRequest]:
    """Requests written by make-example."""
    return [
        ConversionRequest(value=1.0, category="Distance", from_unit="km", to_unit="m"),
        ConversionRequest(value=100.0, category="Distance", from_unit="cm", to_unit="m"),
        ConversionRequest(value=1.0, category="Mass", from_unit="kg", to_unit="lb"),
        ConversionRequest(value=1.0, from_unit="g", to_unit="kg"),
    ]


def cmd_convert(args: argparse.Namespace, settings: Settings) -> int:
    """Convert a single value."""
    try:
        request = ConversionRequest(
            value=args.value,
            category=args.category,
            from_unit=args.from_unit,
            to_unit=args.to_unit,
        )
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1

    result = run_conversion(request)
    precision = args.precision if args.precision is not None else settings.precision

    if args.json:
        print(result.model_dump_json(indent=2))
    elif result.ok:
        print(format_result(result, precision))

    if not result.ok:
        print(f"Error: {result.error.message}", file=sys.stderr)
        return 1
    return 0


def cmd_units(args: argparse.Namespace, settings: Settings) -> int:
    """List categories and units."""
    try:
        categories = describe_registry(args.category)
    except UnitConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([c.model_dump(mode="json") for c in categories], indent=2))
    else:
        print(format_categories(categories))
    return 0


def cmd_form(args: argparse.Namespace, settings: Settings) -> int:
    """Apply a sequence of edits to the conversion form and show it."""
    category = args.category or settings.default_category
    try:
        form = ConversionForm.for_category(category)
        if args.input_units:
            form.set_input_units(args.input_units)
        if args.output_units:
            form.set_output_units(args.output_units)
        if args.swap:
            form.swap()
        if args.output_value is not None:
            form.set_output_value(args.output_value)
        else:
            form.set_input_value(args.value)
    except (UnitConversionError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    precision = args.precision if args.precision is not None else settings.precision

    if args.json:
        print(form.model_dump_json(indent=2))
    else:
        print(format_form(form, precision))
    return 0


def cmd_make_example(args: argparse.Namespace, settings: Settings) -> int:
    """Generate an example batch request file."""
    payload = [r.model_dump(exclude_none=True) for r in example_requests()]

    with open(args.output, "w") as f:
        f.write(json.dumps(payload, indent=2))

    print(f"Created example request file: {args.output}")
    print("\nRun the batch with:")
    print(f"  python -m iconvert batch --input {args.output}")

    return 0


def cmd_batch(args: argparse.Namespace, settings: Settings) -> int:
    """Convert a JSON list of requests."""
    try:
        with open(args.input, encoding="utf-8") as f:
            input_data = json.load(f)

        if isinstance(input_data, dict):
            input_data = input_data.get("requests")
        if not isinstance(input_data, list):
            print(f"Error: {args.input} must contain a JSON list of requests", file=sys.stderr)
            return 1

        requests = [ConversionRequest(**item) for item in input_data]

    except FileNotFoundError:
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read {args.input}: {e}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except (ValidationError, TypeError) as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1

    batch = run_batch(requests)
    output_json = batch.model_dump_json(indent=2)

    if args.output:
        with open(args.output, "w") as f:
            f.write(output_json)
        print(f"\nResults saved to {args.output}", file=sys.stderr)
    else:
        print(output_json)

    print(f"\nSummary: {len(batch.results)} requests", file=sys.stderr)
    print(f"  Succeeded: {batch.succeeded}", file=sys.stderr)
    print(f"  Failed: {batch.failed}", file=sys.stderr)
    for i, r in enumerate(batch.results, start=1):
        if not r.ok:
            print(f"  - #{i}: {r.error.message}", file=sys.stderr)

    return 1 if batch.failed else 0


def cli(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1

    log_level = (args.log_level or settings.log_level).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        print(f"Error: unknown log level {args.log_level!r}", file=sys.stderr)
        return 1
    configure_logging(log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "convert": cmd_convert,
        "units": cmd_units,
        "form": cmd_form,
        "make-example": cmd_make_example,
        "batch": cmd_batch,
    }

    handler = commands.get(args.command)
    if handler:
        logger.debug("Running %s", args.command)
        return handler(args, settings)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
