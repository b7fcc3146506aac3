# SPDX-License-Identifier: Apache-2.0
"""
gtranslate - CLI Tool

Translates a piece of text through Google Translate's web endpoints and
prints the result.

Usage:
    gtranslate <text> -t <lang> [options]

Examples:
    gtranslate "hallo ik ga vandaag hardlopen" -t tr        # Auto-detect source
    gtranslate "hallo" -s nl -t tr                           # Explicit source
    gtranslate "hallo" -t tr --variant compact               # translate_a/t endpoint
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import NoReturn

from gtranslate.translator import (
    TranslateOptions,
    Translator,
    TranslatorError,
    Variant,
)

logger = logging.getLogger(__name__)

# Default request timeout in seconds
DEFAULT_TIMEOUT = 2.0


def _env_timeout() -> float:
    """Read GTRANSLATE_TIMEOUT, falling back to the default."""
    raw = os.environ.get("GTRANSLATE_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid GTRANSLATE_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:]).

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="gtranslate",
        description="Translate text with Google Translate (no API key required)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "hallo" -t tr                      # Auto-detect source language
  %(prog)s "hallo" -s nl -t tr                # Dutch to Turkish
  %(prog)s "hallo" -t tr --variant compact    # Use the compact endpoint
  %(prog)s "hallo" -t tr --timeout 5          # 5 second timeout

Environment Variables:
  GTRANSLATE_TARGET    Default target language
  GTRANSLATE_VARIANT   Default endpoint variant (classic or compact)
  GTRANSLATE_TIMEOUT   Default timeout in seconds
""",
    )

    parser.add_argument(
        "text",
        help="Text to translate",
    )

    # Language options
    parser.add_argument(
        "-s",
        "--source",
        default="auto",
        help="Source language code (default: auto)",
    )
    parser.add_argument(
        "-t",
        "--target",
        default=os.environ.get("GTRANSLATE_TARGET"),
        help="Target language code (or set GTRANSLATE_TARGET)",
    )

    # Endpoint options
    parser.add_argument(
        "--variant",
        default=os.environ.get("GTRANSLATE_VARIANT", Variant.CLASSIC.value),
        choices=[v.value for v in Variant],
        help="Endpoint variant (default: classic)",
    )
    parser.add_argument(
        "--client",
        help="Override the client tag (default: gtx for classic, p for compact)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=_env_timeout(),
        help=f"Request timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    args = parser.parse_args(argv)
    if not args.target:
        parser.error("a target language is required (-t or GTRANSLATE_TARGET)")
    # argparse does not check defaults against choices
    if args.variant not in {v.value for v in Variant}:
        parser.error(f"invalid variant: {args.variant!r}")
    return args


def build_options(args: argparse.Namespace) -> TranslateOptions:
    """Create request options from command line arguments.

    Args:
        args: Command line arguments.

    Returns:
        Translation options for the selected variant.
    """
    opts = (
        TranslateOptions.new(Variant(args.variant))
        .set_source_lang(args.source)
        .set_target_lang(args.target)
        .set_query(args.text)
    )
    if args.client:
        opts = opts.set_client(args.client)
    return opts


async def run(args: argparse.Namespace) -> int:
    """Execute a single translation.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    variant = Variant(args.variant)
    opts = build_options(args)

    async with Translator(variant=variant) as translator:
        try:
            translated = await translator.translate(args.timeout, opts)
        except TranslatorError as e:
            print(f"Error: Translation failed: {e}", file=sys.stderr)
            if args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    print(translated)
    return 0


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
