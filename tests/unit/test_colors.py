#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Unit tests for value and key coloring
"""

import pytest
from rich.text import Text

from envui.config import ColorConfig, ColorSpec
from envui.display import format_key, format_value_with_color, get_style


class TestFormatValueWithColor:
    """测试特殊值着色"""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["<empty>", "true", "false", "TRUE", "False"])
    def test_special_values_are_styled(self, value):
        formatted = format_value_with_color(value)

        assert isinstance(formatted, Text)
        assert formatted != value
        assert formatted.plain == value

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["hello", "truely", "untrue", "<EMPTY>", "", " true"])
    def test_other_values_unchanged(self, value):
        formatted = format_value_with_color(value)

        assert formatted == value
        assert isinstance(formatted, str)

    @pytest.mark.unit
    def test_default_styles(self):
        assert format_value_with_color("<empty>").style.color.name == "yellow"
        assert format_value_with_color("<empty>").style.bold is True
        assert format_value_with_color("true").style.color.name == "green"
        assert format_value_with_color("false").style.color.name == "red"
        assert not format_value_with_color("false").style.bold

    @pytest.mark.unit
    def test_custom_colors(self):
        colors = ColorConfig(true=ColorSpec(color="blue", bold=True))
        formatted = format_value_with_color("True", colors)

        assert formatted.style.color.name == "blue"
        assert formatted.style.bold is True


class TestStyles:
    """测试颜色查找"""

    @pytest.mark.unit
    def test_key_style(self):
        key = format_key("PATH")

        assert key.plain == "PATH"
        assert key.style.color.name == "cyan"
        assert not key.style.bold

    @pytest.mark.unit
    def test_gray_maps_to_bright_black(self):
        assert get_style(ColorSpec(color="gray")).color.name == "bright_black"

    @pytest.mark.unit
    def test_unknown_color_degrades_to_default(self):
        style = get_style(ColorSpec(color="chartreuse-ish", bold=True))

        assert style.color.name == "default"
        assert style.bold is True


class TestThemes:
    """测试主题"""

    @pytest.mark.unit
    def test_known_themes(self):
        from envui.display import THEMES, get_theme

        assert set(THEMES) == {"default", "dark", "light", "mono"}
        for name in THEMES:
            assert "table.header" in get_theme(name).styles
            assert "filter.info" in get_theme(name).styles

    @pytest.mark.unit
    def test_unknown_theme_falls_back(self):
        from envui.display import THEMES, get_theme

        assert get_theme("nope") is THEMES["default"]

    @pytest.mark.unit
    def test_themes_define_only_used_styles(self):
        from envui.display.themes import THEME_STYLES

        for styles in THEME_STYLES.values():
            assert set(styles) == {"error", "filter.info", "table.header", "table.border"}
