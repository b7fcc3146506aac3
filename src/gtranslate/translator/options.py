# SPDX-License-Identifier: Apache-2.0
"""Request options and endpoint variants."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

API_BASE_URL = "https://translate.google.com/translate_a"
DST_TARGET = "t"


class Variant(str, Enum):
    """Upstream endpoint shape.

    Each variant pairs an endpoint with the response grammar it returns.
    """

    CLASSIC = "classic"  # translate_a/single, quote-delimited body
    COMPACT = "compact"  # translate_a/t, JSON array body

    @property
    def endpoint(self) -> str:
        """Absolute endpoint base URL."""
        return _ENDPOINTS[self]

    @property
    def default_client(self) -> str:
        """Client tag the endpoint expects by default."""
        return _DEFAULT_CLIENTS[self]


_ENDPOINTS = {
    Variant.CLASSIC: f"{API_BASE_URL}/single",
    Variant.COMPACT: f"{API_BASE_URL}/t",
}

_DEFAULT_CLIENTS = {
    Variant.CLASSIC: "gtx",
    Variant.COMPACT: "p",
}


@dataclass(frozen=True)
class TranslateOptions:
    """Options for a single translation request.

    Values are immutable: every setter returns a new instance, so options
    can be shared between concurrent calls.

    Attributes:
        client: Client tag ("gtx" for classic, "p" for compact).
        source_lang: Source language code, or "auto".
        target_lang: Target language code.
        dst_target: Destination target, always "t".
        query: Text to translate.

    Example:
        >>> opts = (
        ...     TranslateOptions.new()
        ...     .set_source_lang("nl")
        ...     .set_target_lang("tr")
        ...     .set_query("hallo ik ga vandaag hardlopen")
        ... )
    """

    client: str = "gtx"
    source_lang: str = ""
    target_lang: str = ""
    dst_target: str = DST_TARGET
    query: str = ""

    @classmethod
    def new(cls, variant: Variant = Variant.CLASSIC) -> TranslateOptions:
        """Create options with defaults for the given variant."""
        return cls(client=variant.default_client)

    def set_client(self, client: str) -> TranslateOptions:
        """Return a copy with ``client`` set."""
        return replace(self, client=client)

    def set_source_lang(self, source_lang: str) -> TranslateOptions:
        """Return a copy with ``source_lang`` set."""
        return replace(self, source_lang=source_lang)

    def set_target_lang(self, target_lang: str) -> TranslateOptions:
        """Return a copy with ``target_lang`` set."""
        return replace(self, target_lang=target_lang)

    def set_dst_target(self, dst_target: str) -> TranslateOptions:
        """Return a copy with ``dst_target`` set."""
        return replace(self, dst_target=dst_target)

    def set_query(self, query: str) -> TranslateOptions:
        """Return a copy with ``query`` set."""
        return replace(self, query=query)
