import argparse
import logging
import math
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .converter import convert_number
from .digits import MAX_FRACTION_DIGITS
from .prefix import detect_base


AUTO_BASE = "auto"
QUIT = "q"

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def parse_base(value: str) -> int | float:
    text = value.strip()
    if not text.isascii() or "_" in text:
        raise ValueError(f"Base must be a number, got '{value}'.")
    try:
        return int(text)
    except ValueError:
        pass
    try:
        base = float(text)
    except ValueError:
        raise ValueError(f"Base must be a number, got '{value}'.")
    if not math.isfinite(base):
        raise ValueError(f"Base must be a finite number, got '{value}'.")
    return base


def resolve_source(num_str: str, from_str: str) -> tuple[str, int | float]:
    """Turn the raw number and source-base text into (digits, base).

    ``auto`` reads the base from a 0x/0o/0b prefix, defaulting to decimal.
    """
    if from_str.strip().lower() == AUTO_BASE:
        return detect_base(num_str)
    return num_str, parse_base(from_str)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if number < 0:
        raise argparse.ArgumentTypeError("precision must not be negative")
    return number


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


def print_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def print_result(result: str, upper: bool = False) -> None:
    console.print(result.upper() if upper else result, markup=False, highlight=False, soft_wrap=True)


def interactive_mode(precision: int = MAX_FRACTION_DIGITS, upper: bool = False) -> None:
    console.print("[bold cyan]=== Base Converter (2..36, fractions allowed) ===[/bold cyan]")
    console.print(f"Type '{QUIT}' in any field to exit. Use '{AUTO_BASE}' as source base to read 0x/0o/0b prefixes.\n")

    while True:
        try:
            src_base_str = input("Source base: ").strip()
            if src_base_str.lower() == QUIT:
                console.print("Exiting.")
                return

            dst_base_str = input("Target base: ").strip()
            if dst_base_str.lower() == QUIT:
                console.print("Exiting.")
                return

            num_str = input("Number: ").strip()
            if num_str.lower() == QUIT:
                console.print("Exiting.")
                return
        except (EOFError, KeyboardInterrupt):
            console.print("\nExiting.")
            return

        try:
            digits, src_base = resolve_source(num_str, src_base_str)
            dst_base = parse_base(dst_base_str)
            result = convert_number(digits, src_base, dst_base, precision=precision)
        except ValueError as e:
            print_error(f"{e}\n")
            continue

        if upper:
            result = result.upper()
        console.print(
            f"Result ({escape(str(src_base))} → {escape(str(dst_base))}): {escape(result)}\n",
            highlight=False,
        )


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="radixtool",
        description="Convert a number between bases 2..36, fractional part included. "
        "Run without arguments for interactive mode.",
    )
    parser.add_argument("number", nargs="?", help="Number to convert, e.g. 1a.8")
    parser.add_argument("from_base", nargs="?", help=f"Base of NUMBER, or '{AUTO_BASE}' for 0x/0o/0b prefixes")
    parser.add_argument("to_base", nargs="?", help="Base to convert to")
    parser.add_argument(
        "-p",
        "--precision",
        dest="precision",
        type=_non_negative_int,
        default=MAX_FRACTION_DIGITS,
        help=f"Maximum number of fractional digits (default {MAX_FRACTION_DIGITS})",
    )
    parser.add_argument(
        "-u",
        "--upper",
        dest="upper",
        action="store_true",
        help="Print letter digits in uppercase",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        dest="verbose",
        action="store_true",
        help="Log decoding and encoding steps",
    )
    return parser.parse_args(argv)


def cli(args: argparse.Namespace) -> None:
    positional = [a for a in (args.number, args.from_base, args.to_base) if a is not None]
    if not positional:
        interactive_mode(precision=args.precision, upper=args.upper)
        return

    if len(positional) != 3:
        console.print("Usage: radixtool <number> <from_base> <to_base>")
        console.print("Or run without arguments for interactive mode.")
        sys.exit(1)

    try:
        digits, from_base = resolve_source(args.number.strip(), args.from_base)
        to_base = parse_base(args.to_base)
        result = convert_number(digits, from_base, to_base, precision=args.precision)
    except ValueError as e:
        logger.debug("conversion failed: %s", type(e).__name__)
        print_error(str(e))
        sys.exit(1)

    print_result(result, upper=args.upper)


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    configure_logging(args.verbose)
    cli(args)


if __name__ == "__main__":
    main()
