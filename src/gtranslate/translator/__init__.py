# SPDX-License-Identifier: Apache-2.0
"""Dual-variant adapter for the unofficial Google Translate endpoints.

Usage:
    from gtranslate.translator import TranslateOptions, Translator, Variant

    opts = TranslateOptions.new().set_source_lang("nl").set_target_lang("tr")
    async with Translator() as translator:
        text = await translator.translate(2.0, opts.set_query("hallo"))

    # Compact endpoint (client "p", JSON array body)
    opts = TranslateOptions.new(Variant.COMPACT).set_target_lang("tr")
    text = await translator.translate(2.0, opts, variant=Variant.COMPACT)
"""

from gtranslate.translator.base import (
    FailedParsingError,
    InvalidResponseError,
    TranslatorError,
    TransportError,
)
from gtranslate.translator.client import Translator
from gtranslate.translator.encoder import RequestTarget, encode
from gtranslate.translator.normalizer import normalize
from gtranslate.translator.options import DST_TARGET, TranslateOptions, Variant

__all__ = [
    # Exceptions
    "TranslatorError",
    "InvalidResponseError",
    "FailedParsingError",
    "TransportError",
    # Request building
    "DST_TARGET",
    "TranslateOptions",
    "Variant",
    "RequestTarget",
    "encode",
    # Response handling
    "normalize",
    # Facade
    "Translator",
]
