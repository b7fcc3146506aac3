# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by the translator.

None of these are retried internally. Retry policy, if any, belongs to the
caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gtranslate.translator.options import Variant


class TranslatorError(Exception):
    """Base exception for translator module."""

    pass


class InvalidResponseError(TranslatorError):
    """Upstream answered with a non-success HTTP status.

    The response body is discarded; only the status is kept.
    """

    def __init__(self, status: int) -> None:
        super().__init__(f"got invalid response (status {status})")
        self.status = status


class FailedParsingError(TranslatorError):
    """Response body did not match the grammar of the variant in use.

    Usually means the upstream format drifted or the response was parsed
    with the wrong variant. Not a transient error.
    """

    def __init__(self, message: str, variant: Variant) -> None:
        super().__init__(f"failed parsing {variant.value} response: {message}")
        self.variant = variant


class TransportError(TranslatorError):
    """Request could not complete at the network layer.

    Covers timeout expiry, connection failures and aborted transfers.
    """

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(message)
        self.cause = cause
