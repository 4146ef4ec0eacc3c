"""
geoconvert - Main CLI

Prints a coordinate as DMS, DM and/or UTM.

Usage:
    python -m geoconvert.main <latitude> <longitude> [--format dms|dm|utm|all]

Example:
    python -m geoconvert.main 40.446195 -79.948862 --format dms
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import DEFAULT_CONFIG, DECIMAL_MINUTES_PRECISION
from .convert import Converter
from .errors import GeoConvertError

FORMATS = ('dms', 'dm', 'utm', 'all')
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route geoconvert log records to stderr and optionally a file.

    Only the package logger is configured, so handlers installed by a
    host application on the root logger are left alone.

    Args:
        verbose: Show DEBUG records on stderr instead of WARNING and up
        log_file: Optional path; receives every DEBUG record

    Returns:
        The configured package logger
    """
    console_level = logging.DEBUG if verbose else logging.WARNING
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    package_logger = logging.getLogger(__package__)
    package_logger.setLevel(logging.DEBUG if log_file else console_level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    handlers[0].setLevel(console_level)
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    return package_logger


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='geoconvert',
        description='Convert a decimal-degree coordinate to DMS, DM or UTM'
    )

    parser.add_argument('latitude', type=float, help='Latitude in decimal degrees')
    parser.add_argument('longitude', type=float, help='Longitude in decimal degrees')

    parser.add_argument(
        '--format', '-f',
        choices=FORMATS,
        default='all',
        help='Output representation (default: all)'
    )

    parser.add_argument(
        '--template', '-t',
        type=str,
        default=None,
        help='Custom DMS/DM template, e.g. "%%D %%M %%S%%L" (ignored for utm)'
    )

    parser.add_argument(
        '--precision',
        type=int,
        default=DECIMAL_MINUTES_PRECISION,
        help=f'Decimal-minutes digits (default: {DECIMAL_MINUTES_PRECISION})'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Write a DEBUG log to this file'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose, args.log_file)
    logger = logging.getLogger(__name__)

    try:
        config = dataclasses.replace(
            DEFAULT_CONFIG, decimal_minutes_precision=args.precision
        )
        converter = Converter((args.latitude, args.longitude), config)

        lines = []
        if args.format in ('dms', 'all'):
            lines.append(converter.to_dms(args.template))
        if args.format in ('dm', 'all'):
            lines.append(converter.to_dm(args.template))
        if args.format in ('utm', 'all'):
            lines.append(converter.to_utm())

    except (GeoConvertError, ValueError) as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
