#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os
import sys
from pathlib import Path
from typing import Literal

from dynaconf import Dynaconf
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from . import __respath__
from .errors import ConfigError
from . import messages

__PACKAGE_NAME__ = "envui"

CONFIG_FILE_NAME = f"{__PACKAGE_NAME__}.toml"
ENVVAR_PREFIX = "ENVUI"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
DEFAULT_CONFIG_PATH = __respath__ / "default.toml"

class TableLayoutConfig(BaseModel):
    """Layout and formatting options for the environment table."""
    model_config = ConfigDict(frozen=True)

    terminal_width_ratio: float = Field(default=0.5, gt=0, le=1, description='Share of the terminal width used by the table')
    key_width_ratio: float = Field(default=0.25, gt=0, le=1, description='Share of the table width used by the key column')
    border_space: int = Field(default=7, ge=0, description='Characters reserved for borders and padding')
    default_terminal_width: int = Field(default=80, gt=0, description='Width used when the terminal size is unknown')
    word_wrap: bool = Field(default=True, description='Wrap long cell content instead of clipping it')
    wrap_on_word_boundary: bool = Field(default=False, description='Only break lines at whitespace')
    truncate: str = Field(default="", description='Truncation marker, empty disables truncation')

class ColorSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str = "default"
    bold: bool = False

class ColorConfig(BaseModel):
    """Styles for keys and special values."""
    model_config = ConfigDict(frozen=True)

    key: ColorSpec = ColorSpec(color="cyan")
    empty: ColorSpec = ColorSpec(color="yellow", bold=True)
    true: ColorSpec = ColorSpec(color="green")
    false: ColorSpec = ColorSpec(color="red")

class DisplayConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    theme: str = "default"
    color: Literal["auto", "always", "never"] = "auto"

class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    table: TableLayoutConfig = TableLayoutConfig()
    colors: ColorConfig = ColorConfig()
    display: DisplayConfig = DisplayConfig()
    log_level: str = ""
    log_file: str = ""

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value and value not in LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return value

DEFAULT_TABLE_CONFIG = TableLayoutConfig()
DEFAULT_COLOR_CONFIG = ColorConfig()

def get_config_dir() -> Path:
    """
    获取平台相关的配置目录，不会创建目录
    """
    if sys.platform == "win32":
        app_data = os.environ.get("APPDATA")
        if app_data:
            return Path(app_data) / __PACKAGE_NAME__
        return Path.home() / "AppData" / "Roaming" / __PACKAGE_NAME__

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / __PACKAGE_NAME__
    return Path.home() / ".config" / __PACKAGE_NAME__

def lowercase_keys(d):
    """递归地将字典中的所有键转换为小写"""
    if not isinstance(d, dict):
        return d
    return {k.lower(): lowercase_keys(v) for k, v in d.items()}

def format_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    loc = ".".join(str(part) for part in first['loc'])
    return f"{loc}: {first['msg']}" if loc else first['msg']

class ConfigManager:
    """Loads settings from the packaged defaults, the user file and ENVUI_* variables."""

    def __init__(self, default_config=None, config_dir=None):
        self.default_config = str(default_config or DEFAULT_CONFIG_PATH)
        self.config_dir = Path(config_dir) if config_dir else get_config_dir()
        self.config_file = self.config_dir / CONFIG_FILE_NAME
        self.log = logger.bind(src='config')
        self.config = self._load_config()

    def _load_config(self, settings_files=None):
        """加载配置文件
        :param settings_files: 配置文件列表
        :return: 小写键的配置字典
        """
        if not settings_files:
            settings_files = [self.default_config, str(self.config_file)]

        try:
            config = Dynaconf(
                settings_files=settings_files,
                envvar_prefix=ENVVAR_PREFIX,
                merge_enabled=True,
            )
            data = config.to_dict()
        except Exception as e:
            # 回退到内置默认值
            self.log.error(f"Error loading config, using defaults: {e}")
            return {}

        self.log.debug(f"Config loaded from {settings_files}")
        return lowercase_keys(data)

    def get_settings(self) -> Settings:
        try:
            return Settings.model_validate(self.config)
        except ValidationError as e:
            raise ConfigError(messages.INVALID_CONFIG.format(format_validation_error(e))) from e
