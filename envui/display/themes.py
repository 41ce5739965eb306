#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""显示主题定义"""

from rich.theme import Theme

# 默认主题（适合大多数终端）
DEFAULT_STYLES = {
    # 错误信息
    "error": "red bold",

    # 过滤信息
    "filter.info": "cyan",

    # 表格
    "table.header": "bold red",
    "table.border": "bright_black",
}

# 深色主题（针对深色背景优化）
DARK_STYLES = {
    "error": "bright_red bold",
    "filter.info": "bright_cyan",
    "table.header": "bold bright_red",
    "table.border": "white",
}

# 浅色主题（针对浅色背景优化）
LIGHT_STYLES = {
    "error": "red bold",
    "filter.info": "blue",
    "table.header": "bold blue",
    "table.border": "black",
}

# 单色主题（只使用基本颜色，兼容性最好）
MONO_STYLES = {
    "error": "white bold",
    "filter.info": "white",
    "table.header": "bold white",
    "table.border": "white",
}

THEME_STYLES = {
    "default": DEFAULT_STYLES,
    "dark": DARK_STYLES,
    "light": LIGHT_STYLES,
    "mono": MONO_STYLES,
}

# 主题映射表
THEMES = {name: Theme(styles) for name, styles in THEME_STYLES.items()}
DEFAULT_THEME = THEMES["default"]

def get_theme(theme_name: str) -> Theme:
    """获取指定名称的主题

    Args:
        theme_name: 主题名称 ("default", "dark", "light", "mono")

    Returns:
        Rich主题对象，如果主题名不存在则返回默认主题
    """
    return THEMES.get(theme_name, DEFAULT_THEME)
