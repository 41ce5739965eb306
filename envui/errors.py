#!/usr/bin/env python
# -*- coding: utf-8 -*-

from enum import Enum, IntEnum

from . import messages

class ExitCode(IntEnum):
    """进程退出码 (UNIX 约定)"""
    SUCCESS = 0
    SYSTEM_ERROR = 1
    DATA_NOT_FOUND = 2
    # 参数错误与 DATA_NOT_FOUND 共用 2
    INVALID_ARGUMENT = 2
    INTERRUPTED = 130

class CliErrorType(Enum):
    """命令行参数错误类型"""
    UNKNOWN_OPTION = "unknown_option"
    INVALID_ARGUMENT = "invalid_argument"
    FILTER_REQUIRES_VALUE = "filter_requires_value"
    CONFLICTING_FILTERS = "conflicting_filters"

def extract_error_message(error: BaseException) -> str:
    """Return the message of *error*, or a placeholder when it has none."""
    message = str(error)
    return message if message else messages.UNKNOWN_ERROR

class EnvuiError(Exception):
    """envui 异常基类"""
    exit_code: ExitCode = ExitCode.SYSTEM_ERROR

class ConfigError(EnvuiError):
    """配置异常"""
    pass

class EnvironmentReadError(EnvuiError):
    """Raised when the process environment cannot be enumerated."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"{messages.ENV_READ_CONTEXT}: {extract_error_message(cause)}")

class TableRenderError(EnvuiError):
    """Raised when laying out or styling the table fails."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"{messages.TABLE_CREATE_CONTEXT}: {extract_error_message(cause)}")

class CliError(EnvuiError):
    """命令行参数异常

    Attributes:
        type: 错误类型
        hint: 错误之后显示的提示
        usage: 错误之后显示的用法说明，优先于 hint
    """
    exit_code = ExitCode.INVALID_ARGUMENT

    def __init__(self, type: CliErrorType, message: str, hint: str = None, usage: str = None):
        super().__init__(message)
        self.type = type
        self.hint = hint
        self.usage = usage

    @property
    def code(self) -> str:
        return f"cli.{self.type.value}"

def unknown_option_error(option: str) -> CliError:
    return CliError(CliErrorType.UNKNOWN_OPTION, messages.UNKNOWN_OPTION.format(option),
                    hint=messages.INVALID_OPTION_HELP)

def invalid_argument_error(message: str) -> CliError:
    return CliError(CliErrorType.INVALID_ARGUMENT, message, hint=messages.INVALID_OPTION_HELP)

def filter_requires_value_error() -> CliError:
    return CliError(CliErrorType.FILTER_REQUIRES_VALUE, messages.FILTER_REQUIRES_VALUE,
                    usage=messages.FILTER_USAGE)

def conflicting_filters_error() -> CliError:
    return CliError(CliErrorType.CONFLICTING_FILTERS, messages.CONFLICTING_FILTERS,
                    usage=messages.FILTER_USAGE)
