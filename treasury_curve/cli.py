#!/usr/bin/env python3
"""
Command-line interface for US Treasury par yield curves.
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from .api import TreasuryCurveClient
from .config import TreasuryCurveConfig, load_config_from_file, save_config_to_file
from .core.curve import CurveSnapshot
from .core.labels import label_texts
from .errors import TreasuryCurveError

CLI_DATE_FORMATS = ("%m/%d/%Y", "%Y-%m-%d")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Daily US Treasury par yield curves",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Latest published curve
  treasury-curve latest

  # Curve for a date (weekends and holidays use the prior trading day)
  treasury-curve date 07/02/2023 --label "2 Yr" --label "10 Yr"

  # Whole year to CSV
  treasury-curve year 2000 --output curves_2000.csv
        """
    )

    # Global arguments
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress output except errors")
    parser.add_argument("--log-file", help="Log file path")
    parser.add_argument("--config", "-c", help="Configuration file path")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    latest_parser = subparsers.add_parser("latest", help="Show the latest published curve")
    latest_parser.add_argument("--label", "-l", action="append", help="Maturity to show (repeatable)")

    date_parser = subparsers.add_parser("date", help="Show the curve for a date")
    date_parser.add_argument("date", help="Date as MM/DD/YYYY or YYYY-MM-DD")
    date_parser.add_argument("--label", "-l", action="append", help="Maturity to show (repeatable)")

    year_parser = subparsers.add_parser("year", help="Fetch a whole year of curves")
    year_parser.add_argument("year", type=int, help="Calendar year")
    year_parser.add_argument("--output", "-o", help="Write the history to this CSV file")

    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Configuration operations")
    create_parser = config_subparsers.add_parser("create", help="Write a configuration file with defaults")
    create_parser.add_argument("--output", "-o", default="treasury_curve.json", help="Output file")
    config_subparsers.add_parser("show", help="Show current configuration")
    validate_parser = config_subparsers.add_parser("validate", help="Validate a configuration file")
    validate_parser.add_argument("config_file", help="Configuration file to validate")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Setup logging
    setup_logging(args)

    try:
        if args.command == "latest":
            return show_latest(args)
        elif args.command == "date":
            return show_date(args)
        elif args.command == "year":
            return show_year(args)
        elif args.command == "config":
            return handle_config_command(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except TreasuryCurveError as e:
        logging.error(f"{type(e).__name__}: {e}")
        return 1
    except (FileNotFoundError, ValueError) as e:
        logging.error(f"Configuration error: {e}")
        return 1

    return 0


def setup_logging(args):
    """Setup logging configuration."""
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    if getattr(args, 'log_file', None):
        logging.basicConfig(
            level=level,
            format=log_format,
            handlers=[
                logging.FileHandler(args.log_file),
                logging.StreamHandler(sys.stderr)
            ]
        )
    else:
        logging.basicConfig(level=level, format=log_format)


def parse_cli_date(text: str) -> date:
    for fmt in CLI_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise argparse.ArgumentTypeError(f"invalid date {text!r}, use MM/DD/YYYY or YYYY-MM-DD")


def load_config(args) -> TreasuryCurveConfig:
    """
    Configuration from --config, or from the environment when no file is given

    Raises:
        FileNotFoundError: the --config file does not exist
        ValueError: unreadable or invalid configuration
    """
    if args.config:
        config = load_config_from_file(args.config)
    else:
        config = TreasuryCurveConfig.from_env()
    errors = config.validate()
    if errors:
        raise ValueError("; ".join(errors))
    return config


def build_client(args) -> TreasuryCurveClient:
    return TreasuryCurveClient(config=load_config(args))


def format_curve(curve_date: date, curve: CurveSnapshot, labels: Optional[List[str]] = None) -> str:
    lines = [f"Curve date: {curve_date.strftime('%m/%d/%Y')}"]
    for label in labels or label_texts():
        value = curve.get(label)
        lines.append(f"  {label:>6} : {'n/a' if value is None else f'{value:.2f}'}")
    return "\n".join(lines)


def show_latest(args):
    curve_date, curve = build_client(args).fetch_latest()
    print(format_curve(curve_date, curve, args.label))
    return 0


def show_date(args):
    try:
        request_date = parse_cli_date(args.date)
    except argparse.ArgumentTypeError as e:
        print(str(e), file=sys.stderr)
        return 2
    curve_date, curve = build_client(args).fetch_date(request_date)
    if curve_date != request_date:
        logging.info(f"No curve published on {request_date}, using {curve_date}")
    print(format_curve(curve_date, curve, args.label))
    return 0


def show_year(args):
    history = build_client(args).fetch_year(args.year)
    if args.output:
        output_file = Path(args.output)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        history.to_frame().to_csv(output_file, date_format="%m/%d/%Y")
        print(f"Wrote {len(history)} curves to {output_file}")
    else:
        print(f"{args.year}: {len(history)} curves from "
              f"{history.start_date.strftime('%m/%d/%Y')} to {history.end_date.strftime('%m/%d/%Y')}")
        print(format_curve(*history.latest()))
    return 0


def handle_config_command(args):
    """Handle configuration commands."""
    if args.config_command == "create":
        save_config_to_file(TreasuryCurveConfig(), args.output)
        print(f"Configuration template created: {args.output}")
        return 0
    elif args.config_command == "show":
        print(json.dumps(load_config(args).to_dict(), indent=2))
        return 0
    elif args.config_command == "validate":
        return validate_config_file(args)
    print("Specify a config operation: create, show or validate", file=sys.stderr)
    return 1


def validate_config_file(args):
    """Validate configuration file."""
    config_file = Path(args.config_file)

    if not config_file.exists():
        print(f"Configuration file not found: {config_file}", file=sys.stderr)
        return 1

    try:
        config = load_config_from_file(str(config_file))
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in configuration file: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Invalid configuration file: {e}", file=sys.stderr)
        return 1

    errors = config.validate()
    if errors:
        print("Configuration validation FAILED:")
        for error in errors:
            print(f"  ERROR: {error}")
        return 1

    print("Configuration validation PASSED")
    return 0


if __name__ == "__main__":
    sys.exit(main())
