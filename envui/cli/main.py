#!/usr/bin/env python
# -*- coding: utf-8 -*-

import sys
from typing import List, Mapping, Optional

from loguru import logger
from rich.console import Console
from rich.text import Text

from .. import messages
from ..config import ConfigManager, Settings
from ..display import get_theme
from ..errors import CliError, EnvuiError, ExitCode
from .handlers import handle_help_command, handle_main_command, handle_version_command
from .parser import ParsedArgs, parse_args
from .result import CommandResult

LOG_FORMAT = "{time:HH:mm:ss} | {level} | {message} | {extra}"

def init_logging(settings: Settings):
    logger.remove()
    if settings.log_level:
        # 每次写入时再取 sys.stderr，便于被重定向
        logger.add(lambda msg: sys.stderr.write(msg), format=LOG_FORMAT, level=settings.log_level)
    if settings.log_file:
        logger.add(settings.log_file, format=LOG_FORMAT, level=settings.log_level or 'INFO')

def format_cli_error(error: CliError) -> List[str]:
    lines = [f"{messages.ERROR_PREFIX}{error}"]
    if error.usage:
        lines += ["Usage:", error.usage]
    elif error.hint:
        lines.append(error.hint)
    return lines

def dispatch(args: ParsedArgs, settings: Settings, environ: Optional[Mapping[str, str]] = None) -> CommandResult:
    if args.command == 'help':
        return handle_help_command()
    if args.command == 'version':
        return handle_version_command()
    return handle_main_command(settings, args.filter, environ=environ, demo=args.demo)

def emit(result: CommandResult, settings: Optional[Settings] = None):
    for line in result.output:
        print(line)

    if result.errors:
        theme = get_theme(settings.display.theme if settings else 'default')
        console = Console(stderr=True, theme=theme, highlight=False)
        first, *rest = result.errors
        console.print(Text(first, style="error"), soft_wrap=True)
        for line in rest:
            console.print(Text(line), soft_wrap=True)

def run(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None,
        settings: Optional[Settings] = None) -> int:
    """Parse *argv*, run the command and print its output.

    Every error is turned into a message and an exit code here.
    """
    if argv is None:
        argv = sys.argv[1:]

    log = logger.bind(src='cli')
    try:
        args = parse_args(argv)
        if settings is None:
            settings = ConfigManager().get_settings()
            init_logging(settings)
        result = dispatch(args, settings, environ)
    except CliError as e:
        log.warning(f"Invalid arguments {argv}: {e}")
        result = CommandResult(exit_code=e.exit_code, errors=format_cli_error(e))
    except EnvuiError as e:
        log.error(str(e))
        result = CommandResult(exit_code=e.exit_code, errors=[f"{messages.ERROR_PREFIX}{e}"])
    except KeyboardInterrupt:
        result = CommandResult(exit_code=ExitCode.INTERRUPTED)
    except Exception:
        log.exception("Unexpected error")
        result = CommandResult(exit_code=ExitCode.SYSTEM_ERROR,
                               errors=[f"{messages.ERROR_PREFIX}{messages.GENERAL_ERROR}"])

    emit(result, settings)
    return result.exit_code
