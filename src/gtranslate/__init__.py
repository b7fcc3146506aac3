# SPDX-License-Identifier: Apache-2.0
"""gtranslate - free text translation through Google Translate's web endpoints."""

from gtranslate.translator import (
    FailedParsingError,
    InvalidResponseError,
    TranslateOptions,
    Translator,
    TranslatorError,
    TransportError,
    Variant,
)

__version__ = "0.1.0"

__all__ = [
    "Translator",
    "TranslateOptions",
    "Variant",
    "TranslatorError",
    "InvalidResponseError",
    "FailedParsingError",
    "TransportError",
]
