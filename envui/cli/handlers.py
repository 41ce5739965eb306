#!/usr/bin/env python
# -*- coding: utf-8 -*-

from typing import Mapping, Optional

from loguru import logger
from rich.text import Text

from .. import __version__
from .. import messages
from ..config import Settings
from ..core import (
    FilterConfig, NoFilter, filter_environment_variables, generate_no_match_message,
    generate_demo_environment_data, read_environment_variables,
)
from ..display import (
    calculate_column_widths, get_theme, render_environment_table, render_to_string,
    should_use_color,
)
from ..errors import ExitCode
from .result import CommandResult

def format_help_text() -> str:
    lines = [
        f"{messages.PROG_NAME} v{__version__}",
        "",
        messages.DESCRIPTION,
        "",
        "Usage:",
        messages.HELP_USAGE,
        "",
        "Options:",
    ]
    lines += [f"  {flags.ljust(20)}{text}" for flags, text in messages.HELP_OPTIONS]
    lines += [messages.HELP_EXAMPLES, messages.HELP_DESCRIPTION]
    return "\n".join(lines)

def handle_help_command() -> CommandResult:
    return CommandResult(output=[format_help_text()])

def handle_version_command() -> CommandResult:
    return CommandResult(output=[__version__])

def handle_main_command(settings: Settings, filter_config: FilterConfig = NoFilter(),
                        environ: Optional[Mapping[str, str]] = None, demo: bool = False) -> CommandResult:
    """读取环境变量，过滤后渲染为表格"""
    log = logger.bind(src='main_handler')
    data = generate_demo_environment_data() if demo else read_environment_variables(environ)
    if not data:
        return CommandResult(exit_code=ExitCode.DATA_NOT_FOUND, output=[messages.NO_ENVIRONMENT_VARIABLES])

    result = filter_environment_variables(data, filter_config)
    color = should_use_color(settings.display.color)
    theme = get_theme(settings.display.theme)

    output = []
    if result.filter_info:
        info = Text(result.filter_info, style="filter.info")
        output.append(render_to_string(info, max(info.cell_len, 1), color=color, theme=theme))

    if result.match_count == 0:
        log.info(f"No match for {filter_config}")
        output.append(generate_no_match_message(filter_config))
        return CommandResult(exit_code=ExitCode.DATA_NOT_FOUND, output=output)

    widths = calculate_column_widths(settings.table)
    output.append(render_environment_table(
        result.filtered, settings.table, widths,
        colors=settings.colors, color=color, theme=theme,
    ))
    return CommandResult(output=output)
