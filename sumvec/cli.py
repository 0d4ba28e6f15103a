import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .core.config import Config, VerbosityLevel
from .sequence_sum import run

logger = logging.getLogger(__name__)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser."""

    parser = argparse.ArgumentParser(
        prog='sumvec',
        description='Fill a sequence with 1, 2, 3, 4 and print its sum',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  sumvec          # prints: sum is 10
  sumvec -v       # also log the sequence to stderr
  sumvec -vv      # also log every accumulation step to stderr
        """
    )

    # Verbosity options
    verbosity_group = parser.add_argument_group('Verbosity Options')
    verbosity_group.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase diagnostic output on stderr (use -v, -vv for more detail)'
    )
    verbosity_group.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Only report errors on stderr'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def validate_arguments(args: argparse.Namespace) -> bool:
    """Validate command-line arguments and check for conflicts."""

    if args.quiet and args.verbose > 0:
        print("Error: Cannot use --quiet and --verbose together.", file=sys.stderr)
        return False

    return True


def create_config_from_args(args: argparse.Namespace) -> Config:
    """Create a configuration object from parsed command-line arguments."""

    config = Config()

    if args.quiet:
        config.verbosity = VerbosityLevel.QUIET
    elif args.verbose == 1:
        config.verbosity = VerbosityLevel.DETAILED
    elif args.verbose >= 2:
        config.verbosity = VerbosityLevel.EXPERT

    return config


def configure_logging(config: Config) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level,
        format=config.logging.format,
        datefmt=config.logging.date_format,
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application."""

    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not validate_arguments(args):
        return 1

    config = create_config_from_args(args)
    configure_logging(config)
    logger.debug("Verbosity: %s", config.verbosity.value)

    try:
        run(config=config)
    except OSError as e:
        print(f"Error writing result: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
