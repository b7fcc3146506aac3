# SPDX-License-Identifier: Apache-2.0
"""Translator facade over an aiohttp session."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import aiohttp

from gtranslate.translator.base import TransportError
from gtranslate.translator.encoder import encode
from gtranslate.translator.normalizer import normalize
from gtranslate.translator.options import TranslateOptions, Variant

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


class Translator:
    """Google Translate client for the unofficial ``translate_a`` endpoints.

    Holds one ``aiohttp.ClientSession`` shared by every call. Calls are
    independent and may run concurrently; nothing is cached or retried.

    A session passed in by the caller stays owned by the caller and is
    never closed here. Without one, a session is created on first use and
    closed by ``close()`` or on leaving ``async with``.

    Example:
        >>> async with Translator() as translator:
        ...     opts = TranslateOptions.new().set_target_lang("tr").set_query("hallo")
        ...     text = await translator.translate(2.0, opts)
    """

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        variant: Variant = Variant.CLASSIC,
    ) -> None:
        """Initialize Translator.

        Args:
            session: Shared HTTP session (default: created lazily).
            variant: Variant used when ``translate`` is not given one.
        """
        self._session = session
        self._owns_session = session is None
        self._variant = variant

    @classmethod
    def new(cls, variant: Variant = Variant.CLASSIC) -> Translator:
        """Build a Translator with its own session."""
        return cls(variant=variant)

    @classmethod
    def with_session(
        cls,
        session: aiohttp.ClientSession,
        variant: Variant = Variant.CLASSIC,
    ) -> Translator:
        """Build a Translator around an existing session."""
        return cls(session=session, variant=variant)

    @property
    def name(self) -> str:
        """Return backend name."""
        return "google"

    @property
    def variant(self) -> Variant:
        """Default variant."""
        return self._variant

    async def __aenter__(self) -> Translator:
        """Enter async context manager."""
        self._ensure_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Exit async context manager."""
        await self.close()

    def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def translate(
        self,
        timeout: float,
        options: TranslateOptions,
        *,
        variant: Variant | None = None,
    ) -> str:
        """Translate ``options.query``.

        Args:
            timeout: Upper bound in seconds for the whole request/response
                cycle.
            options: Request options.
            variant: Endpoint variant for this call (default: the
                translator's variant).

        Returns:
            Translated text.

        Raises:
            InvalidResponseError: On a non-2xx status.
            FailedParsingError: If the body does not match the variant.
            TransportError: On timeout or network failure.
        """
        variant = variant or self._variant
        target = encode(variant.endpoint, options)
        session = self._ensure_session()

        logger.debug("GET %s", target.full_url)
        try:
            async with session.get(
                target.url,
                params=list(target.params),
                headers=dict(target.headers),
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as response:
                status = response.status
                body = await response.read()
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"Google Translate request timed out after {timeout}s", e
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Google Translate request failed: {e}", e) from e

        logger.debug("Got status %d (%d bytes)", status, len(body))
        return normalize(variant, status, body)

    async def close(self) -> None:
        """Close the HTTP session if this translator created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None
