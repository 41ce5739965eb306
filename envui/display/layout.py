#!/usr/bin/env python
# -*- coding: utf-8 -*-

import math
from typing import NamedTuple, Optional

from loguru import logger
from rich.console import Console

from ..config import TableLayoutConfig

class ColumnWidths(NamedTuple):
    key_width: int
    value_width: int

def get_terminal_width() -> Optional[int]:
    """Return the column count of stdout, or None when it is not a terminal."""
    console = Console()
    if not console.is_terminal:
        return None
    return console.width

def calculate_column_widths(config: TableLayoutConfig, terminal_width: Optional[int] = None) -> ColumnWidths:
    """计算列宽

    不做最小值限制，终端过窄时 value_width 可能为 0 或负数，
    由渲染阶段处理。

    Args:
        config: 表格布局配置
        terminal_width: 终端宽度，为空时自动检测
    """
    if terminal_width is None:
        terminal_width = get_terminal_width()
    terminal_width = terminal_width or config.default_terminal_width

    max_table_width = math.floor(terminal_width * config.terminal_width_ratio)
    key_width = math.floor(max_table_width * config.key_width_ratio)
    value_width = max_table_width - key_width - config.border_space

    logger.bind(src='layout').debug(f"terminal={terminal_width} table={max_table_width} key={key_width} value={value_width}")
    return ColumnWidths(key_width, value_width)

def should_use_color(mode: str = "auto") -> bool:
    """Resolve the ``display.color`` setting against the real stdout."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    console = Console()
    return console.is_terminal and console.color_system is not None and not console.no_color
