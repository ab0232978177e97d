"""Conversion CLI entry point."""

import argparse
import logging
from pathlib import Path

from rich.markup import escape

from skaitvardis.config import ConverterConfig, NormalizerConfig, load_config
from skaitvardis.exceptions import SkaitvardisError
from skaitvardis.preprocessing.text import LithuanianTextNormalizer
from skaitvardis.utils.logging import console, setup_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the conversion CLI."""
    parser = argparse.ArgumentParser(
        prog="skaitvardis",
        description="Spell out integers in Lithuanian words",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "numbers",
        type=str,
        nargs="*",
        help="Integers to convert",
    )
    parser.add_argument(
        "--text",
        type=str,
        default=None,
        help="Text whose numbers should be expanded",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to normalizer configuration JSON file",
    )
    parser.add_argument(
        "--elide-one",
        action="store_true",
        help="Say 'šimtas' instead of 'vienas šimtas'",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Optional file for persistent logs",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the conversion CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.numbers and args.text is None:
        parser.print_usage()
        return 2

    setup_logger(level=args.log_level, log_file=args.log_file)

    try:
        config = load_config(args.config) if args.config else NormalizerConfig()
        if args.elide_one:
            config = config.model_copy(
                update={"converter": ConverterConfig(elide_count_of_one=True)}
            )
        logger.info(f"Converter options: {config.converter.model_dump()}")

        normalizer = LithuanianTextNormalizer(config)

        for raw in args.numbers:
            number = int(raw)
            words = normalizer.converter.convert(number)
            console.print(f"{number}: {words}", markup=False, soft_wrap=True)

        if args.text is not None:
            console.print(normalizer.normalize(args.text), markup=False, soft_wrap=True)

    except (SkaitvardisError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
