# SPDX-License-Identifier: Apache-2.0
"""Tests for CLI argument parsing and execution."""

from __future__ import annotations

import os
from unittest.mock import AsyncMock, patch

import pytest

from gtranslate.cli import DEFAULT_TIMEOUT, build_options, parse_args, run
from gtranslate.translator import FailedParsingError, TranslateOptions, Variant


class TestParseArgs:
    """Tests for parse_args function."""

    @patch.dict(os.environ, {}, clear=True)
    def test_basic_input(self) -> None:
        """Test basic text and target arguments."""
        args = parse_args(["hallo", "-t", "tr"])
        assert args.text == "hallo"
        assert args.source == "auto"
        assert args.target == "tr"
        assert args.variant == "classic"
        assert args.client is None
        assert args.timeout == DEFAULT_TIMEOUT
        assert args.verbose is False

    @patch.dict(os.environ, {}, clear=True)
    def test_target_required(self) -> None:
        """Missing target language should exit with usage error."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["hallo"])
        assert exc_info.value.code == 2

    @patch.dict(os.environ, {"GTRANSLATE_TARGET": "de"}, clear=True)
    def test_target_from_env(self) -> None:
        """GTRANSLATE_TARGET should supply the default target."""
        args = parse_args(["hallo"])
        assert args.target == "de"

    @patch.dict(
        os.environ,
        {"GTRANSLATE_VARIANT": "compact", "GTRANSLATE_TIMEOUT": "7.5"},
        clear=True,
    )
    def test_variant_and_timeout_from_env(self) -> None:
        """Environment should supply variant and timeout defaults."""
        args = parse_args(["hallo", "-t", "tr"])
        assert args.variant == "compact"
        assert args.timeout == 7.5

    @patch.dict(os.environ, {"GTRANSLATE_TIMEOUT": "soon"}, clear=True)
    def test_invalid_timeout_env_ignored(self) -> None:
        """An unparseable GTRANSLATE_TIMEOUT should fall back to the default."""
        args = parse_args(["hallo", "-t", "tr"])
        assert args.timeout == DEFAULT_TIMEOUT

    @patch.dict(os.environ, {"GTRANSLATE_VARIANT": "fancy"}, clear=True)
    def test_invalid_variant_env(self) -> None:
        """An unknown GTRANSLATE_VARIANT should be rejected."""
        with pytest.raises(SystemExit):
            parse_args(["hallo", "-t", "tr"])

    @patch.dict(os.environ, {}, clear=True)
    def test_options_override_env(self) -> None:
        """Explicit flags should be parsed."""
        args = parse_args(
            [
                "hallo",
                "-s",
                "nl",
                "-t",
                "tr",
                "--variant",
                "compact",
                "--client",
                "gtx",
                "--timeout",
                "3",
                "-v",
            ]
        )
        assert args.source == "nl"
        assert args.variant == "compact"
        assert args.client == "gtx"
        assert args.timeout == 3.0
        assert args.verbose is True


class TestBuildOptions:
    """Tests for build_options function."""

    @patch.dict(os.environ, {}, clear=True)
    def test_classic(self) -> None:
        """Classic variant should use the gtx client."""
        args = parse_args(["hallo", "-s", "nl", "-t", "tr"])
        assert build_options(args) == TranslateOptions(
            client="gtx", source_lang="nl", target_lang="tr", query="hallo"
        )

    @patch.dict(os.environ, {}, clear=True)
    def test_compact(self) -> None:
        """Compact variant should use the p client."""
        args = parse_args(["hallo", "-t", "tr", "--variant", "compact"])
        assert build_options(args).client == "p"

    @patch.dict(os.environ, {}, clear=True)
    def test_client_override(self) -> None:
        """--client should override the variant default."""
        args = parse_args(["hallo", "-t", "tr", "--client", "dict-chrome-ex"])
        assert build_options(args).client == "dict-chrome-ex"


class TestRun:
    """Tests for run function."""

    @pytest.mark.asyncio
    @patch.dict(os.environ, {}, clear=True)
    async def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Translated text should be printed with exit code 0."""
        args = parse_args(["hallo", "-t", "tr", "--variant", "compact"])
        with patch(
            "gtranslate.cli.Translator.translate",
            AsyncMock(return_value="merhaba"),
        ) as mock_translate:
            code = await run(args)

        assert code == 0
        assert capsys.readouterr().out == "merhaba\n"
        timeout, opts = mock_translate.call_args.args
        assert timeout == DEFAULT_TIMEOUT
        assert opts.client == Variant.COMPACT.default_client

    @pytest.mark.asyncio
    @patch.dict(os.environ, {}, clear=True)
    async def test_failure(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Translator errors should be reported on stderr with exit code 1."""
        args = parse_args(["hallo", "-t", "tr"])
        error = FailedParsingError("no quoted segment in body", Variant.CLASSIC)
        with patch(
            "gtranslate.cli.Translator.translate",
            AsyncMock(side_effect=error),
        ):
            code = await run(args)

        assert code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Translation failed" in captured.err
