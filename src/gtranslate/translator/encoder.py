# SPDX-License-Identifier: Apache-2.0
"""Request encoding for the translate endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
from urllib.parse import urlencode

from gtranslate.translator.options import TranslateOptions

REFERER = "https://translate.google.com/"

# The endpoint rejects requests without a plausible browser fingerprint.
USER_AGENT = (
    "Mozilla/5.0 (Linux; Android 6.0; Nexus 5 Build/MRA58N) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/129.0.0.0 Mobile Safari/537.36"
)

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Referer": REFERER,
        "User-Agent": USER_AGENT,
    }
)


@dataclass(frozen=True)
class RequestTarget:
    """A fully formed GET request.

    Attributes:
        url: Endpoint base URL without query string.
        params: Query parameters in send order.
        headers: Request headers.
    """

    url: str
    params: tuple[tuple[str, str], ...]
    headers: Mapping[str, str] = field(default_factory=lambda: DEFAULT_HEADERS)

    @property
    def full_url(self) -> str:
        """URL with query string, for logging."""
        return f"{self.url}?{urlencode(self.params)}"


def encode(endpoint_base: str, options: TranslateOptions) -> RequestTarget:
    """Build the request target for ``options``.

    Values are left unescaped here; the HTTP client percent-encodes them
    once when sending. Language codes are passed through unchecked.

    Args:
        endpoint_base: Absolute endpoint URL (see ``Variant.endpoint``).
        options: Request options.

    Returns:
        Request target with ordered params and the fixed headers.
    """
    params = (
        ("client", options.client),
        ("sl", options.source_lang),
        ("tl", options.target_lang),
        ("dt", options.dst_target),
        ("q", options.query),
    )
    return RequestTarget(url=endpoint_base, params=params, headers=DEFAULT_HEADERS)
