#!/usr/bin/env python
# -*- coding: utf-8 -*-

from typing import Union

from rich.style import Style
from rich.text import Text

from ..config import ColorConfig, ColorSpec, DEFAULT_COLOR_CONFIG
from ..messages import EMPTY_VALUE

# 配置中的颜色名 -> rich 颜色
COLOR_STYLES = {
    "yellow": "yellow",
    "red": "red",
    "green": "green",
    "blue": "blue",
    "gray": "bright_black",
    "cyan": "cyan",
    "magenta": "magenta",
}
DEFAULT_COLOR = "default"

def get_style(spec: ColorSpec) -> Style:
    """Build a rich style from *spec*; unknown color names use the terminal default."""
    color = COLOR_STYLES.get(spec.color, DEFAULT_COLOR)
    return Style(color=color, bold=spec.bold)

def apply_style(text: str, spec: ColorSpec) -> Text:
    return Text(text, style=get_style(spec))

def format_key(key: str, colors: ColorConfig = DEFAULT_COLOR_CONFIG) -> Text:
    return apply_style(key, colors.key)

def format_value_with_color(value: str, colors: ColorConfig = DEFAULT_COLOR_CONFIG) -> Union[str, Text]:
    """Style ``<empty>``, ``true`` and ``false`` values.

    ``true``/``false`` match case-insensitively but only as the whole
    value. Anything else is returned unchanged as a plain string.
    """
    if value == EMPTY_VALUE:
        return apply_style(value, colors.empty)

    lower_value = value.lower()
    if lower_value == "true":
        return apply_style(value, colors.true)
    if lower_value == "false":
        return apply_style(value, colors.false)

    return value
