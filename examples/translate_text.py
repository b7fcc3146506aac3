#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Text translation sample script.

Shows basic use of gtranslate. Change the settings below to try other
languages or the compact endpoint.

Usage:
    cd examples
    python translate_text.py

Environment variables (read from a .env file if present):
    GTRANSLATE_TIMEOUT: Request timeout in seconds (default: 2)
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project source to the path (development use)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

load_dotenv(PROJECT_ROOT / ".env")

from gtranslate import TranslateOptions, Translator, TranslatorError, Variant  # noqa: E402

# =============================================================================
# Settings
# =============================================================================

# Endpoint: Variant.CLASSIC (translate_a/single) | Variant.COMPACT (translate_a/t)
VARIANT = Variant.CLASSIC

SOURCE_LANG = "nl"
TARGET_LANG = "tr"
TEXT = "hallo ik ga vandaag hardlopen"

TIMEOUT = float(os.environ.get("GTRANSLATE_TIMEOUT", "2"))


async def main() -> int:
    opts = (
        TranslateOptions.new(VARIANT)
        .set_source_lang(SOURCE_LANG)
        .set_target_lang(TARGET_LANG)
        .set_query(TEXT)
    )

    async with Translator(variant=VARIANT) as translator:
        try:
            translated = await translator.translate(TIMEOUT, opts)
        except TranslatorError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(f"translated: {translated}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
