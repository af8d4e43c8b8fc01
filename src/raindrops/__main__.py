"""
Command-line interface.

Run with: python -m raindrops
"""
import argparse
from typing import Optional, Sequence

from raindrops.config import DEFAULT_SEED, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, TICK_INTERVAL_MS

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def positive_int(value: str) -> int:
    """argparse type for window sizes and timer periods."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='raindrops',
        description='Raindrops - concentric-ring rain animation'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=DEFAULT_SEED,
        help='Seed for raindrop placement (default: %(default)s)'
    )
    parser.add_argument(
        '--width',
        type=positive_int,
        default=DEFAULT_WINDOW_WIDTH,
        help='Initial window width in pixels (default: %(default)s)'
    )
    parser.add_argument(
        '--height',
        type=positive_int,
        default=DEFAULT_WINDOW_HEIGHT,
        help='Initial window height in pixels (default: %(default)s)'
    )
    parser.add_argument(
        '--interval',
        type=positive_int,
        default=TICK_INTERVAL_MS,
        help='Animation timer period in milliseconds (default: %(default)s)'
    )
    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        default='WARNING',
        help='Logging level (default: %(default)s)'
    )
    parser.add_argument(
        '--log-file',
        help='Also write logs to this file'
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Qt is only imported once the arguments are valid
    from raindrops.main import main as run_app

    return run_app(
        seed=args.seed,
        width=args.width,
        height=args.height,
        interval_ms=args.interval,
        log_level=args.log_level,
        log_file=args.log_file,
    )


if __name__ == "__main__":
    raise SystemExit(main())
