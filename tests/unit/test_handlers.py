#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Unit tests for command handlers and error formatting
"""

import pytest

from envui import __version__
from envui.cli import CommandResult
from envui.cli.handlers import format_help_text, handle_help_command, handle_main_command, handle_version_command
from envui.cli.main import dispatch, format_cli_error
from envui.cli.parser import ParsedArgs
from envui.core import PartialFilter, PrefixFilter
from envui.errors import (
    ExitCode, conflicting_filters_error, filter_requires_value_error, unknown_option_error,
)


class TestHandlers:
    """测试命令处理"""

    @pytest.mark.unit
    def test_help_text(self):
        text = format_help_text()

        assert text.startswith(f"envui v{__version__}")
        assert "Usage:" in text
        assert "-f, --filter TEXT" in text
        assert "Examples:" in text
        assert "Description:" in text

    @pytest.mark.unit
    def test_help_and_version_results(self):
        assert handle_help_command().output == [format_help_text()]
        assert handle_version_command() == CommandResult(output=[__version__])

    @pytest.mark.unit
    def test_main_returns_table(self, plain_settings, wide_terminal):
        result = handle_main_command(plain_settings, environ={"A": "1"})

        assert result.success
        assert len(result.output) == 1
        assert "A" in result.output[0]
        assert result.errors == []

    @pytest.mark.unit
    def test_main_no_match(self, plain_settings):
        result = handle_main_command(plain_settings, PartialFilter("zzz"), environ={"A": "1"})

        assert result.exit_code == ExitCode.DATA_NOT_FOUND
        assert result.output == [
            "Filter: Variables containing 'zzz' (0 of 1 displayed)",
            "No environment variables found matching 'zzz'",
        ]

    @pytest.mark.unit
    def test_dispatch(self, plain_settings, wide_terminal):
        assert dispatch(ParsedArgs(command='version'), plain_settings).output == [__version__]
        result = dispatch(ParsedArgs(filter=PrefixFilter("B")), plain_settings, environ={"A": "1", "B": "2"})
        assert result.output[0] == "Filter: Variables starting with 'B' (1 of 2 displayed)"


class TestFormatCliError:
    """测试参数错误信息格式"""

    @pytest.mark.unit
    def test_hint(self):
        lines = format_cli_error(unknown_option_error("--nope"))

        assert lines == ["Error: Unknown option: --nope", "\nUse 'envui --help' to see available options."]

    @pytest.mark.unit
    @pytest.mark.parametrize("error", [filter_requires_value_error(), conflicting_filters_error()])
    def test_usage(self, error):
        lines = format_cli_error(error)

        assert lines[0].startswith("Error: ")
        assert lines[1] == "Usage:"
        assert "# Filter by partial match" in lines[2]

    @pytest.mark.unit
    def test_error_code(self):
        assert unknown_option_error("-x").code == "cli.unknown_option"
