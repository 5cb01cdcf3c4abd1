"""Command line entry point for location check characters."""

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from location_check.config import Settings
from location_check.logging import configure_logging, get_logger
from location_check.lookup import lookup_location
from location_check.models import LocationResult

logger = get_logger(__name__)


def format_result(result: LocationResult, *, output_format: str = "text") -> str:
    """Format one lookup result for printing.

    Text output is tab-separated: code, phonetic, check, family name.
    """
    if output_format == "json":
        return result.model_dump_json()
    code = result.code or "-"
    return "\t".join([code, result.phonetic, result.check, result.family.display_name])


def _read_codes(stream: TextIO) -> Iterator[str]:
    for line in stream:
        code = line.strip()
        if code:
            yield code


def run(
    codes: Iterable[str],
    *,
    settings: Settings,
    out: TextIO = sys.stdout,
) -> int:
    """Look up each code and print its result.

    Returns:
        Number of codes looked up.
    """
    count = 0
    for raw in codes:
        result = lookup_location(raw, strict=settings.strict_input)
        print(format_result(result, output_format=settings.output_format), file=out, flush=True)
        count += 1
    logger.debug("lookup_complete", count=count)
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="location-check",
        description="Location Check - phonetic and check character for location codes",
    )
    parser.add_argument(
        "codes",
        nargs="*",
        metavar="CODE",
        help="Location codes to look up (reads one per line from stdin if omitted)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per code instead of tab-separated text",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Interpret codes exactly as given instead of filtering disallowed characters",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug-level logging for troubleshooting",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except Exception as e:
        configure_logging(json_output=False, level=logging.INFO)
        logger.error("failed_to_load_settings", error=str(e))
        print(f"Error: Failed to load settings. {e}", file=sys.stderr)
        print("Check the LOCATION_CHECK_* environment variables and .env file.", file=sys.stderr)
        sys.exit(1)

    updates: dict[str, object] = {}
    if args.json:
        updates["output_format"] = "json"
    if args.raw:
        updates["strict_input"] = False
    if args.debug:
        updates["debug"] = True
    if updates:
        settings = settings.model_copy(update=updates)

    configure_logging(
        json_output=settings.json_logs,
        level=logging.DEBUG if settings.debug else logging.INFO,
    )
    logger.debug(
        "starting_location_check",
        output_format=settings.output_format,
        strict_input=settings.strict_input,
        from_stdin=not args.codes,
    )

    codes = args.codes if args.codes else _read_codes(sys.stdin)
    try:
        run(codes, settings=settings)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
