from .layout import ColumnWidths, calculate_column_widths, get_terminal_width, should_use_color
from .colors import format_key, format_value_with_color, get_style
from .table import render_environment_table, render_to_string, layout_cell
from .themes import get_theme, THEMES
