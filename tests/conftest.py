#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Pytest configuration and shared fixtures
"""

import re
import sys
import tempfile
import shutil
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
from loguru import logger

# 添加项目根目录到 Python 路径
sys.path.insert(0, str(Path(__file__).parent.parent))

from envui.config import Settings, DisplayConfig, TableLayoutConfig
from envui.core import EnvironmentEntry

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


def contains_in_order(text: str, needle: str) -> bool:
    """needle 的字符是否按顺序出现在 text 中 (允许被换行拆开)"""
    index = 0
    clean = strip_ansi(text)
    for char in needle:
        index = clean.find(char, index)
        if index == -1:
            return False
        index += 1
    return True


@pytest.fixture(name="strip_ansi")
def strip_ansi_fixture():
    return strip_ansi


@pytest.fixture(name="contains_in_order")
def contains_in_order_fixture():
    return contains_in_order


@pytest.fixture(autouse=True)
def quiet_logger():
    """测试期间关闭 loguru 输出，避免污染 stderr"""
    logger.remove()
    yield
    logger.remove()


@pytest.fixture(scope="function")
def temp_dir() -> Generator[Path, None, None]:
    """创建临时目录用于测试"""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    # 清理
    if temp_path.exists():
        shutil.rmtree(temp_path)


@pytest.fixture
def sample_entries():
    """提供示例环境变量"""
    return [
        EnvironmentEntry("API_KEY", "secret"),
        EnvironmentEntry("NODE_ENV", "prod"),
        EnvironmentEntry("api_url", "https://example.com"),
        EnvironmentEntry("DEBUG", "true"),
        EnvironmentEntry("EMPTY_VAR", "<empty>"),
    ]


@pytest.fixture
def table_config() -> TableLayoutConfig:
    return TableLayoutConfig()


@pytest.fixture
def plain_settings() -> Settings:
    """不输出颜色的设置，保证输出稳定"""
    return Settings(display=DisplayConfig(color="never"))


@pytest.fixture
def wide_terminal():
    """固定终端宽度为 200"""
    with patch('envui.display.layout.get_terminal_width', return_value=200):
        yield 200


def pytest_configure(config):
    """配置 pytest"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
