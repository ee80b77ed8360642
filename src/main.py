"""Command-line check for the Cronos zkEVM plugin configuration."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import yaml

from .config.config_loader import MappingSettingsProvider, load_settings
from .config.validator import ConfigValidationError, validate_cronoszkevm_config
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        description="Validate the Cronos zkEVM plugin configuration",
        prog="cronoszkevm-check-config",
    )

    parser.add_argument(
        "-s",
        "--settings",
        default=None,
        help="Path to a YAML settings file (environment variables are the fallback)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv, -vvv)",
    )

    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write a DEBUG log to this file",
    )

    return parser


def mask_secret(value: str, visible: int = 4) -> str:
    """Mask all but the last ``visible`` characters of a secret."""
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


async def run_check(args: argparse.Namespace) -> int:
    """
    Run the configuration check.

    Args:
        args: Parsed command line arguments

    Returns:
        Process exit code
    """
    if args.settings:
        runtime = load_settings(args.settings)
        logger.info(f"Loaded settings from {args.settings}")
    else:
        runtime = MappingSettingsProvider()

    try:
        config = await validate_cronoszkevm_config(runtime)
    except ConfigValidationError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"Address: {config.address}")
    print(f"Private key: {mask_secret(config.private_key)}")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(verbosity=args.verbose, log_file=args.log_file)

    try:
        exit_code = asyncio.run(run_check(args))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
