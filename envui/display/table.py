#!/usr/bin/env python
# -*- coding: utf-8 -*-

import io
from typing import List, Union

from loguru import logger
from rich import box
from rich.cells import cell_len
from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from ..config import ColorConfig, TableLayoutConfig, DEFAULT_COLOR_CONFIG
from ..core import EnvironmentEntry
from ..errors import TableRenderError
from ..messages import HEADER_KEY, HEADER_VALUE
from .colors import format_key, format_value_with_color
from .layout import ColumnWidths
from .themes import DEFAULT_THEME

# 3 条竖线边框 + 每列左右各 1 个空格
TABLE_CHROME_WIDTH = 7
MIN_COLUMN_WIDTH = 1

def crop_cells(line: str, width: int) -> str:
    """Cut *line* down to at most *width* terminal cells."""
    cropped = []
    used = 0
    for char in line:
        char_len = cell_len(char)
        if used + char_len > width:
            break
        cropped.append(char)
        used += char_len
    return ''.join(cropped)

def split_cells(line: str, width: int) -> List[str]:
    """Break *line* into chunks of at most *width* cells, anywhere in a word."""
    chunks = []
    current = []
    used = 0
    for char in line:
        char_len = cell_len(char)
        if current and used + char_len > width:
            chunks.append(''.join(current))
            current = []
            used = 0
        current.append(char)
        used += char_len
    chunks.append(''.join(current))
    return chunks

def truncate_line(line: str, width: int, marker: str) -> str:
    if cell_len(line) <= width:
        return line
    kept = crop_cells(line, max(width - cell_len(marker), 0))
    return crop_cells(kept + marker, width)

def layout_cell(text: str, width: int, config: TableLayoutConfig) -> str:
    """Fit each line of *text* into *width* cells.

    Word boundary wrapping is left to rich, see :func:`column_options`.
    """
    lines = text.split('\n')
    if config.truncate:
        lines = [truncate_line(line, width, config.truncate) for line in lines]
    elif config.word_wrap:
        if config.wrap_on_word_boundary:
            return text
        lines = [chunk for line in lines for chunk in split_cells(line, width)]
    else:
        lines = [crop_cells(line, width) for line in lines]
    return '\n'.join(lines)

def column_options(config: TableLayoutConfig) -> dict:
    if not config.truncate and config.word_wrap and config.wrap_on_word_boundary:
        return {'no_wrap': False, 'overflow': 'fold'}
    return {'no_wrap': True, 'overflow': 'crop'}

def format_cell(content: Union[str, Text], width: int, config: TableLayoutConfig) -> Text:
    if isinstance(content, Text):
        return Text(layout_cell(content.plain, width, config), style=content.style)
    return Text(layout_cell(content, width, config))

def create_table_instance(config: TableLayoutConfig, widths: ColumnWidths) -> Table:
    table = Table(
        box=box.SQUARE,
        show_lines=True,
        header_style="table.header",
        border_style="table.border",
    )
    options = column_options(config)
    table.add_column(HEADER_KEY, width=widths.key_width, **options)
    table.add_column(HEADER_VALUE, width=widths.value_width, **options)
    return table

def render_to_string(renderable, width: int, color: bool = True, theme: Theme = None) -> str:
    """在内存中渲染，宽度和颜色系统固定，保证输出稳定"""
    console = Console(
        file=io.StringIO(),
        width=width,
        force_terminal=color,
        color_system="standard" if color else None,
        no_color=False,
        theme=theme or DEFAULT_THEME,
        legacy_windows=False,
        highlight=False,
        emoji=False,
        force_jupyter=False,
        force_interactive=False,
    )
    console.print(renderable)
    return console.file.getvalue().rstrip('\n')

def render_environment_table(
    data: List[EnvironmentEntry],
    config: TableLayoutConfig,
    widths: ColumnWidths,
    colors: ColorConfig = DEFAULT_COLOR_CONFIG,
    color: bool = True,
    theme: Theme = None,
) -> str:
    """Render *data* as a bordered two column table.

    Column widths below one cell are raised to one.

    Raises:
        TableRenderError: any layout or styling step failed.
    """
    try:
        widths = ColumnWidths(
            max(widths.key_width, MIN_COLUMN_WIDTH),
            max(widths.value_width, MIN_COLUMN_WIDTH),
        )
        table = create_table_instance(config, widths)
        for entry in data:
            table.add_row(
                format_cell(format_key(entry.key, colors), widths.key_width, config),
                format_cell(format_value_with_color(entry.value, colors), widths.value_width, config),
            )
        return render_to_string(table, sum(widths) + TABLE_CHROME_WIDTH, color=color, theme=theme)
    except Exception as e:
        logger.bind(src='table').exception("Table rendering failed")
        raise TableRenderError(e) from e
