#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
from dataclasses import dataclass
from typing import List, Optional

from ..core import FilterConfig, NoFilter, PartialFilter, PrefixFilter
from ..errors import (
    conflicting_filters_error, filter_requires_value_error,
    invalid_argument_error, unknown_option_error,
)
from .. import messages

class ArgumentParserError(Exception):
    pass

class EnvuiArgumentParser(argparse.ArgumentParser):
    """argparse 默认会打印用法并退出，这里改为抛出异常，由调用方统一处理"""

    def error(self, message):
        raise ArgumentParserError(message)

@dataclass(frozen=True)
class ParsedArgs:
    command: str = 'main'
    filter: FilterConfig = NoFilter()
    demo: bool = False

def build_parser() -> EnvuiArgumentParser:
    parser = EnvuiArgumentParser(prog=messages.PROG_NAME, description=messages.DESCRIPTION,
                                 add_help=False, allow_abbrev=False)
    parser.add_argument('prefix', nargs='*', help="Only show variables starting with PREFIX")
    parser.add_argument('-f', '--filter', default=None, help="Only show variables containing TEXT")
    parser.add_argument('--demo', default=False, action='store_true', help="Display sample data")
    parser.add_argument('-h', '--help', default=False, action='store_true', help="Display help")
    parser.add_argument('-v', '--version', default=False, action='store_true', help="Display version")
    return parser

def _check_options(parser: argparse.ArgumentParser, argv: List[str]):
    """Reject unknown options before argparse looks at values.

    argparse would take ``-x`` after ``--filter`` as its value and ``-1`` as a
    positional number.
    """
    known = {option for action in parser._actions for option in action.option_strings}
    for arg in argv:
        if arg == '--':
            break
        if not arg.startswith('-') or arg == '-':
            continue
        if arg.startswith('--'):
            name = arg.split('=', 1)[0]
            if name not in known:
                raise unknown_option_error(name)
        elif arg[:2] not in known:
            raise unknown_option_error(arg)

def _raise_for_extras(extras: List[str]):
    for arg in extras:
        if arg.startswith('-') and len(arg) > 1:
            raise unknown_option_error(arg.split('=', 1)[0] if arg.startswith('--') else arg)
    if extras:
        raise invalid_argument_error(messages.TOO_MANY_ARGUMENTS.format(' '.join(extras)))

def build_filter_config(prefix: Optional[str], filter_text: Optional[str]) -> FilterConfig:
    """Turn the positional PREFIX and ``--filter`` value into a filter config.

    A blank PREFIX means no filter, a blank ``--filter`` is an error.
    """
    prefix = prefix.strip() if prefix else ''

    if filter_text is not None:
        filter_text = filter_text.strip()
        if not filter_text:
            raise filter_requires_value_error()
        if prefix:
            raise conflicting_filters_error()
        return PartialFilter(filter_text)

    if prefix:
        return PrefixFilter(prefix)
    return NoFilter()

def parse_args(argv: List[str]) -> ParsedArgs:
    """解析命令行参数

    Raises:
        CliError: 未知选项、缺少过滤值、参数冲突等
    """
    parser = build_parser()
    _check_options(parser, argv)
    try:
        args, extras = parser.parse_known_args(argv)
    except ArgumentParserError as e:
        message = str(e)
        if '--filter' in message:
            raise filter_requires_value_error() from e
        raise invalid_argument_error(message) from e

    _raise_for_extras(extras)
    if len(args.prefix) > 1:
        raise invalid_argument_error(messages.TOO_MANY_ARGUMENTS.format(' '.join(args.prefix[1:])))

    filter_config = build_filter_config(args.prefix[0] if args.prefix else None, args.filter)

    if args.help:
        command = 'help'
    elif args.version:
        command = 'version'
    else:
        command = 'main'
    return ParsedArgs(command=command, filter=filter_config, demo=args.demo)
