# SPDX-License-Identifier: Apache-2.0
"""Response normalization for the translate endpoints.

The two endpoints answer in incompatible shapes:

- classic (``translate_a/single``): a JSON-like array of arrays, read as
  plain text. The translation is the text between the first pair of
  double quotes.
- compact (``translate_a/t``): a JSON array whose first element is the
  translation.

Both are reduced to a bare ``str`` or a ``TranslatorError``.
"""

from __future__ import annotations

import json
import logging
from typing import Callable

from gtranslate.translator.base import FailedParsingError, InvalidResponseError
from gtranslate.translator.options import Variant

logger = logging.getLogger(__name__)


def is_success(status: int) -> bool:
    """Return True for 2xx statuses."""
    return 200 <= status <= 299


def parse_classic(text: str) -> str:
    """Extract the translation from a classic body.

    Splits on ``"`` and takes the second segment. Quotes inside the
    translated text are not handled, so such text comes back truncated.

    Args:
        text: Decoded response body.

    Returns:
        Translated text.

    Raises:
        FailedParsingError: If there is no quoted segment or it is empty.
    """
    segments = text.split('"')
    if len(segments) < 2:
        raise FailedParsingError("no quoted segment in body", Variant.CLASSIC)

    translated = segments[1]
    if not translated.strip():
        raise FailedParsingError("empty translation", Variant.CLASSIC)
    return translated


def parse_compact(text: str) -> str:
    """Extract the translation from a compact (JSON) body.

    A string element is used as-is; any other element is rendered as
    compact JSON. Double quotes are stripped either way.

    Args:
        text: Decoded response body.

    Returns:
        Translated text.

    Raises:
        FailedParsingError: On invalid JSON, a missing first element or
            an empty result.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise FailedParsingError(f"invalid JSON: {e}", Variant.COMPACT) from e

    if not isinstance(data, list) or not data or data[0] is None:
        raise FailedParsingError("missing first element", Variant.COMPACT)

    element = data[0]
    if isinstance(element, str):
        rendered = element
    else:
        rendered = json.dumps(element, ensure_ascii=False, separators=(",", ":"))

    translated = rendered.replace('"', "")
    if not translated.strip():
        raise FailedParsingError("empty translation", Variant.COMPACT)
    return translated


_GRAMMARS: dict[Variant, Callable[[str], str]] = {
    Variant.CLASSIC: parse_classic,
    Variant.COMPACT: parse_compact,
}


def normalize(variant: Variant, status: int, body: bytes) -> str:
    """Turn an HTTP status and body into translated text.

    The status is checked first; on failure the body is never read.

    Args:
        variant: Variant the request was sent with.
        status: HTTP status code.
        body: Raw response body.

    Returns:
        Translated text.

    Raises:
        InvalidResponseError: If status is outside 200-299.
        FailedParsingError: If the body does not match the variant grammar.
    """
    if not is_success(status):
        raise InvalidResponseError(status)

    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FailedParsingError("body is not valid UTF-8", variant) from e

    if not text.strip():
        raise FailedParsingError("empty body", variant)

    try:
        return _GRAMMARS[variant](text)
    except FailedParsingError:
        logger.warning("Unexpected %s response body: %.200r", variant.value, text)
        raise
