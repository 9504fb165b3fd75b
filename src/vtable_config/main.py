"""Main entry point for the vtable-config tool."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .domain.exceptions import MalformedInputError
from .domain.models.keyed_container import DuplicatePolicy
from .infrastructure.config import Config, get_duplicate_policy
from .infrastructure.io import dump_vtables, dumps_vtables, load_vtables
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Normalize vtable layouts recovered from a binary: "
        "sort by address, drop duplicates and omit default fields",
        epilog="""
Examples:
  # Print the normalized vtable array
  python main.py config.json

  # Write it to a file
  python main.py config.json -o vtables.json

  # Later vtables at an already seen address win
  python main.py config.json --replace-duplicates

  # Summarize instead of writing JSON
  python main.py config.json --list

  # Using .env file for configuration
  echo 'VTABLE_INPUT=config.json' > .env
  python main.py
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        help="Vtable array or configuration document (optional if using .env)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write the normalized array here instead of stdout",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation (default: VTABLE_JSON_INDENT or 4)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Log a one-line summary per vtable instead of writing JSON",
    )
    parser.add_argument(
        "--replace-duplicates",
        action="store_true",
        help="Keep the last vtable seen at an address instead of the first",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Also write a debug log file into this directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Load, normalize and write a vtable document."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            input_path=args.input,
            output_path=args.output,
            verbose=args.verbose or None,
            log_dir=args.log_dir,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)
    logger.debug(f"Input document: {config.input_path}")

    policy = DuplicatePolicy.REPLACE if args.replace_duplicates else get_duplicate_policy()
    logger.debug(f"Duplicate policy: {policy.value}")

    try:
        container = load_vtables(config.input_path, policy=policy)
    except MalformedInputError as e:
        logger.error(f"Malformed vtable document {config.input_path}: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Cannot read {config.input_path}: {e}")
        sys.exit(1)

    if args.list:
        for vtable in container:
            logger.info(f"{vtable.address}  {vtable.name or '<unnamed>'}  ({len(vtable.items)} items)")
        logger.info(f"Total: {len(container)} vtables, {container.item_count()} items")
        sys.exit(0)

    if config.output_path is not None:
        try:
            config.ensure_output_dir()
            dump_vtables(container, config.output_path, indent=args.indent)
        except OSError as e:
            logger.error(f"Cannot write {config.output_path}: {e}")
            sys.exit(1)
    else:
        sys.stdout.write(dumps_vtables(container, indent=args.indent))

    sys.exit(0)


if __name__ == "__main__":
    main()
